import asyncio
import logging
from typing import Any, Protocol

import aiohttp
from aiohttp.client_exceptions import ClientError

from nethermind.tron_decoder.exceptions import (
    ContractNotFound,
    MissingContractAddress,
    TransactionNotFound,
    TronNodeError,
)

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("tron_decoder").getChild("client")

DEFAULT_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}
DEFAULT_NODE_URL = "https://api.trongrid.io"

# pylint: disable=raise-missing-from


class TronClient(Protocol):
    """Data source for the fetch & decode entry points.  Implemented by :class:`TronNodeClient`"""

    async def get_transaction(self, transaction_id: str) -> dict[str, Any]:
        """Returns the transaction record for a transaction ID"""
        ...

    async def get_hex_encoded_result(self, transaction_id: str) -> str:
        """Returns the 0x prefixed result bytes of a call, or the node's failure message"""
        ...

    async def get_contract_abi(self, contract_address: str) -> list[dict[str, Any]]:
        """Returns the ABI entries published for a contract"""
        ...


def get_contract_call(transaction: dict[str, Any]) -> tuple[str, str]:
    """
    Extracts the 0x prefixed call data and target contract address from a transaction record.

    :raises MissingContractAddress: if the transaction does not target a contract
    """
    contracts = transaction.get("raw_data", {}).get("contract") or [{}]
    value = contracts[0].get("parameter", {}).get("value", {})

    contract_address = value.get("contract_address")
    if not contract_address:
        raise MissingContractAddress(f"No Contract found for transaction {transaction.get('txID', '')}")

    return "0x" + value.get("data", ""), contract_address


def get_contract_ret(transaction: dict[str, Any]) -> str | None:
    """Returns the ``contractRet`` execution status of a transaction, or None if it is not recorded"""
    ret = transaction.get("ret") or [{}]
    return ret[0].get("contractRet")


class TronNodeClient:
    """
    Async client for the HTTP API of a java-tron full node, or a TronGrid endpoint.  Use as an async
    context manager so the underlying session is closed.

    .. code-block:: python

        async with TronNodeClient("https://api.trongrid.io", api_key=api_key) as client:
            transaction = await client.get_transaction(tx_id)

    """

    node_url: str
    """ Base URL of the node HTTP API """

    request_headers: dict[str, str]

    def __init__(self, node_url: str = DEFAULT_NODE_URL, api_key: str | None = None, timeout: int = 60):
        self.node_url = node_url.rstrip("/")
        self.request_headers = dict(DEFAULT_HEADERS)
        if api_key:
            self.request_headers["TRON-PRO-API-KEY"] = api_key
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> "TronNodeClient":
        self._session = aiohttp.ClientSession(headers=self.request_headers, timeout=self._timeout)
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        """Closes the HTTP session"""
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        if self._session is None:
            raise TronNodeError("TronNodeClient session is not open.  Use 'async with TronNodeClient(...)'")

        url = f"{self.node_url}{path}"
        logger.debug(f"POST {url} {payload}")
        try:
            async with self._session.post(url, json=payload) as response:
                if response.status >= 400:
                    raise TronNodeError(f"{url} returned HTTP {response.status}: {await response.text()}")
                return await response.json(content_type=None)
        except ValueError:
            # Body is not JSON, e.g. an HTML error page from a gateway
            raise TronNodeError(f"Invalid JSON response from {url}")
        except (ClientError, asyncio.TimeoutError) as e:
            raise TronNodeError(f"Error connecting to {url}: {e}")

    async def get_transaction(self, transaction_id: str) -> dict[str, Any]:
        """
        Fetches a transaction record by ID

        :raises TransactionNotFound: if the node returns an empty record
        """
        transaction = await self._post("/wallet/gettransactionbyid", {"value": transaction_id})
        if not transaction:
            raise TransactionNotFound(f"Transaction {transaction_id} not found")
        return transaction

    async def get_hex_encoded_result(self, transaction_id: str) -> str:
        """
        Fetches the result of a contract call.  Returns the 0x prefixed result bytes.  If the call did not
        return data, returns the hex encoded ``resMessage`` without prefix

        :raises TransactionNotFound: if the node has no info for the transaction
        """
        info = await self._post("/wallet/gettransactioninfobyid", {"value": transaction_id})
        if not info:
            raise TransactionNotFound(f"Transaction {transaction_id} not found")

        contract_result = (info.get("contractResult") or [""])[0]
        if contract_result == "":
            return info.get("resMessage", "")
        return "0x" + contract_result

    async def get_contract_abi(self, contract_address: str) -> list[dict[str, Any]]:
        """
        Fetches the ABI entries of a contract

        :param contract_address: hex contract address, as stored in transaction records
        :raises ContractNotFound: if the contract does not exist
        """
        contract = await self._post("/wallet/getcontract", {"value": contract_address, "visible": False})
        if not contract or "Error" in contract:
            raise ContractNotFound(f"Contract {contract_address} does not exist")
        return contract.get("abi", {}).get("entrys", [])
