from typing import Any, Sequence

from eth_abi import encode
from eth_utils.abi import function_signature_to_4byte_selector


def encode_call(signature: str, types: Sequence[str], values: Sequence[Any]) -> str:
    """Builds 0x prefixed call data for a function signature"""
    return "0x" + (function_signature_to_4byte_selector(signature) + encode(list(types), list(values))).hex()


def encode_result(types: Sequence[str], values: Sequence[Any]) -> str:
    return "0x" + encode(list(types), list(values)).hex()


def tron_transaction(
    data: str,
    contract_address: str | None = "41a614f803b6fd780986a42c78ec9c7f77e6ded13c",
    status: str = "SUCCESS",
    tx_id: str = "a1b2",
) -> dict[str, Any]:
    value: dict[str, Any] = {
        "data": data.removeprefix("0x"),
        "owner_address": "41e552f6487585c2b58bc2c9bb4492bc1f17132cd0",
    }
    if contract_address is not None:
        value["contract_address"] = contract_address

    return {
        "txID": tx_id,
        "ret": [{"contractRet": status}],
        "raw_data": {
            "contract": [
                {
                    "type": "TriggerSmartContract",
                    "parameter": {
                        "value": value,
                        "type_url": "type.googleapis.com/protocol.TriggerSmartContract",
                    },
                }
            ]
        },
    }
