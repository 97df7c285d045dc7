import logging
from typing import Any, Sequence

from nethermind.tron_decoder.client import TronClient, get_contract_call, get_contract_ret
from nethermind.tron_decoder.exceptions import DecodingFailed, TronDecoderError
from nethermind.tron_decoder.types.decoding import (
    ContractRet,
    DecodedCall,
    DecodedValues,
    RevertResult,
)

from .formatters import DEFAULT_FORMATTERS, Formatter, apply_formatters
from .revert import decode_revert_message
from .selector import SelectorMatch, resolve_selector
from .utils import (
    decode_evm_abi_from_types,
    hex_pairs_to_str,
    hex_to_bytes,
    is_hex_encoded_result,
)

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("tron_decoder").getChild("decoding")

# pylint: disable=broad-exception-caught


class TronTxDecoder:
    """
    Decodes call data, call results, and revert reasons of Tron smart contract transactions from raw data
    and a contract ABI.  The ``*_from_data`` methods make no network calls, which allows decoding every
    transaction within a block quickly.  The ``*_by_id`` methods fetch the transaction, ABI and result
    from the client supplied at initialization.

    .. code-block:: python

        decoder = TronTxDecoder()

        status = get_contract_ret(tx)
        data, contract_address = get_contract_call(tx)

        decoded_input = decoder.decode_input_from_data(data, abi)
        if not method_call_failed(status):
            decoded_result = decoder.decode_result_from_data(data, encoded_result, abi)

    """

    client: TronClient | None
    """ Data source for the fetch & decode entry points """

    formatters: dict[str, Formatter]
    """ Formatters applied to decoded values.  By default, converts all addresses to checksummed hexstrings """

    def __init__(self, client: TronClient | None = None, formatters: dict[str, Formatter] | None = None):
        self.client = client
        self.formatters = {**DEFAULT_FORMATTERS, **(formatters or {})}

    def _decode(self, types: list[str], data: bytes) -> DecodedValues:
        decoded = decode_evm_abi_from_types(types, data)
        return DecodedValues(tuple(apply_formatters(decoded, types, self.formatters)))

    def decode_input_from_data(self, data: str | bytes, abi: Sequence[dict[str, Any]]) -> DecodedCall:
        """
        Decodes the inputs of a contract call.  If no ABI entry matches the selector, the returned
        DecodedCall has a ``method_name`` of None and no values.

        :param data: call data, including the 4 byte selector.  Hex strings may be 0x prefixed
        :param abi: ABI entries of the called contract
        :return: DecodedCall
        :raises eth_abi.exceptions.DecodingError: if the call data does not match the declared input types
        """
        data_bytes = hex_to_bytes(data)
        match = resolve_selector(data_bytes[:4], abi)
        if match.method is None:
            return DecodedCall(method_name=None, direction="input")

        return DecodedCall(
            method_name=match.method,
            parameter_names=list(match.input_names),
            parameter_types=list(match.input_types),
            values=self._decode(match.input_types, data_bytes[4:]),
            direction="input",
        )

    def decode_result_from_data(
        self,
        data: str | bytes,
        encoded_result: str,
        abi: Sequence[dict[str, Any]],
    ) -> DecodedCall:
        """
        Decodes the return values of a contract call.  The function is identified from the selector of the
        call data, and ``encoded_result`` is decoded against its output types.

        If ``encoded_result`` is not 0x prefixed, it is the hex encoded failure message the node returns in
        place of result bytes, and is converted to a plain string instead of ABI decoded.  Check the
        transaction status before decoding results to avoid decoding failure placeholders.

        :param data: call data, including the 4 byte selector
        :param encoded_result: 0x prefixed result bytes, or the node's failure message
        :param abi: ABI entries of the called contract
        :return: DecodedCall
        :raises eth_abi.exceptions.DecodingError: if the result does not match the declared output types
        """
        match = resolve_selector(hex_to_bytes(data)[:4], abi)
        if not match.has_outputs:
            return DecodedCall(method_name=match.method, direction="output")

        names: list[str | None] = [name or None for name in match.output_names]

        if not is_hex_encoded_result(encoded_result):
            return DecodedCall(
                method_name=match.method,
                parameter_names=names,
                parameter_types=list(match.output_types),
                values=hex_pairs_to_str(encoded_result),
                direction="output",
            )

        return DecodedCall(
            method_name=match.method,
            parameter_names=names,
            parameter_types=list(match.output_types),
            values=self._decode(match.output_types, hex_to_bytes(encoded_result)),
            direction="output",
        )

    def decode_revert_message_from_transaction(
        self, transaction: dict[str, Any], encoded_result: str, full_reason: bool = False
    ) -> RevertResult:
        """
        Decodes the revert reason of a transaction record.  Returns an empty message unless the
        transaction status is REVERT.

        :param transaction: transaction record, as returned by the node
        :param encoded_result: result bytes of the call.  Only read for reverted transactions
        :param full_reason: ABI decode ``Error(string)`` reasons instead of reading the last word
        """
        return decode_revert_message(get_contract_ret(transaction), encoded_result, full_reason)

    @staticmethod
    def match_selector(data: str | bytes, abi: Sequence[dict[str, Any]]) -> SelectorMatch:
        """Returns the ABI entry targeted by call data, without decoding parameters"""
        return resolve_selector(hex_to_bytes(data)[:4], abi)

    def _require_client(self) -> TronClient:
        if self.client is None:
            raise TronDecoderError("TronTxDecoder requires a client to fetch transactions by ID")
        return self.client

    async def decode_input_by_id(self, transaction_id: str) -> DecodedCall:
        """
        Fetches a transaction and the ABI of its contract, and decodes the call inputs

        :raises DecodingFailed: wraps any fetching or decoding error that is not a TronDecoderError
        """
        client = self._require_client()
        try:
            transaction = await client.get_transaction(transaction_id)
            data, contract_address = get_contract_call(transaction)
            abi = await client.get_contract_abi(contract_address)

            return self.decode_input_from_data(data, abi)
        except TronDecoderError:
            raise
        except Exception as e:
            raise DecodingFailed(f"Failed to decode input of transaction {transaction_id}: {e}") from e

    async def decode_result_by_id(self, transaction_id: str) -> DecodedCall:
        """
        Fetches a transaction, the ABI of its contract and the call result, and decodes the return values

        :raises DecodingFailed: wraps any fetching or decoding error that is not a TronDecoderError
        """
        client = self._require_client()
        try:
            transaction = await client.get_transaction(transaction_id)
            data, contract_address = get_contract_call(transaction)
            abi = await client.get_contract_abi(contract_address)
            encoded_result = await client.get_hex_encoded_result(transaction_id)

            return self.decode_result_from_data(data, encoded_result, abi)
        except TronDecoderError:
            raise
        except Exception as e:
            raise DecodingFailed(f"Failed to decode result of transaction {transaction_id}: {e}") from e

    async def decode_revert_message(self, transaction_id: str, full_reason: bool = False) -> RevertResult:
        """
        Fetches a transaction, and decodes its revert reason.  The call result is only fetched for
        reverted transactions.

        :raises DecodingFailed: wraps any fetching or decoding error that is not a TronDecoderError
        """
        client = self._require_client()
        try:
            transaction = await client.get_transaction(transaction_id)
            get_contract_call(transaction)

            status = get_contract_ret(transaction)
            encoded_result = (
                await client.get_hex_encoded_result(transaction_id) if status == ContractRet.REVERT.value else ""
            )
            return decode_revert_message(status, encoded_result, full_reason)
        except TronDecoderError:
            raise
        except Exception as e:
            raise DecodingFailed(f"Failed to decode revert message of transaction {transaction_id}: {e}") from e
