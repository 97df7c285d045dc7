import logging

from eth_utils import remove_0x_prefix

from nethermind.tron_decoder.types.decoding import ContractRet, RevertResult

from .utils import decode_evm_abi_from_types, hex_to_bytes, is_hex_payload

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("tron_decoder").getChild("decoding")

ERROR_STRING_SELECTOR = "08c379a0"
""" Selector of Error(string), prefixed to the revert data of require() and revert() calls """


def _last_word_reason(result_hex: str) -> str:
    if not is_hex_payload(result_hex):
        # Raw failure message substituted by the node, not ABI data
        return result_hex.replace("\0", "")
    # Only reasons that fit within the trailing 32 byte word are recovered
    last_word = result_hex[-64:]
    return hex_to_bytes(last_word).decode("utf-8", errors="replace").replace("\0", "")


def _error_string_reason(result_hex: str) -> str | None:
    if not result_hex.startswith(ERROR_STRING_SELECTOR) or not is_hex_payload(result_hex):
        return None
    (reason,) = decode_evm_abi_from_types(["string"], hex_to_bytes(result_hex[8:]))
    return reason


def decode_revert_message(status: str | None, encoded_result: str, full_reason: bool = False) -> RevertResult:
    """
    Extracts the revert reason of a transaction.  Only transactions with a REVERT status carry a reason,
    all other statuses return an empty message.

    By default, the reason is read from the last 32 bytes of the result, with null padding removed.  If
    ``full_reason`` is set, result data prefixed by the ``Error(string)`` selector is ABI decoded, which
    recovers reasons longer than 32 bytes.

    :param status: ``contractRet`` of the transaction
    :param encoded_result: hex encoded result bytes of the call
    :param full_reason: decode ``Error(string)`` payloads with the ABI codec
    :return: RevertResult
    """
    if status != ContractRet.REVERT.value:
        return RevertResult(status=status, message="")

    result_hex = remove_0x_prefix(encoded_result)  # type: ignore[arg-type]

    if full_reason:
        reason = _error_string_reason(result_hex)
        if reason is not None:
            return RevertResult(status=status, message=reason)
        logger.debug("Revert data does not carry the Error(string) selector.  Using last word of result")

    return RevertResult(status=status, message=_last_word_reason(result_hex))
