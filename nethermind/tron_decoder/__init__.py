"""Decodes call data, return data and revert reasons of Tron smart contract transactions"""

from nethermind.tron_decoder.client import TronNodeClient, get_contract_call, get_contract_ret
from nethermind.tron_decoder.decoding import TronTxDecoder, compute_selector
from nethermind.tron_decoder.types.decoding import (
    DecodedCall,
    DecodedValues,
    RevertResult,
    method_call_failed,
)

__all__ = [
    "TronTxDecoder",
    "TronNodeClient",
    "DecodedCall",
    "DecodedValues",
    "RevertResult",
    "compute_selector",
    "get_contract_call",
    "get_contract_ret",
    "method_call_failed",
]
