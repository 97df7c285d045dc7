import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from eth_utils.abi import function_signature_to_4byte_selector

from .utils import abi_to_signature, collapse_if_tuple, filter_functions

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("tron_decoder").getChild("decoding")


@dataclass
class SelectorMatch:
    """
    Stores the ABI entry matched by a selector, along with its precomputed types & names.  When no
    entry matches, ``abi_entry`` and ``method`` are None, and all lists are empty
    """

    method: str | None = None
    abi_entry: dict[str, Any] | None = None
    function_signature: str | None = None

    input_types: list[str] = field(default_factory=list)
    input_names: list[str] = field(default_factory=list)
    output_types: list[str] = field(default_factory=list)
    output_names: list[str] = field(default_factory=list)

    @property
    def has_outputs(self) -> bool:
        """False for unmatched selectors, and for functions without an outputs field"""
        return self.abi_entry is not None and self.abi_entry.get("outputs") is not None


def compute_selector(function_signature: str) -> str:
    """
    Returns the lowercase hex 4 byte selector for a canonical function signature

    >>> compute_selector("transfer(address,uint256)")
    'a9059cbb'
    """
    return function_signature_to_4byte_selector(function_signature).hex()


def _parameter_names(params: Sequence[dict[str, Any]]) -> list[str]:
    # tuple[] parameters are not named leaves
    return ["" if param.get("type") == "tuple[]" else param.get("name", "") for param in params]


def resolve_selector(selector: bytes | str, contract_abi: Sequence[dict[str, Any]]) -> SelectorMatch:
    """
    Scans the ABI for the function whose signature hashes to the selector.  The first matching entry in
    ABI order is returned.  If no entry matches, returns an empty :class:`SelectorMatch`.

    :param selector: 4 byte selector, as bytes or as a hex string
    :param contract_abi: ABI entries as published by the contract
    :return: SelectorMatch
    """
    selector_hex = selector.hex() if isinstance(selector, (bytes, bytearray)) else selector.lower()
    selector_hex = selector_hex.removeprefix("0x")

    for abi_function in filter_functions(contract_abi):
        inputs = abi_function.get("inputs") or []
        function_signature = abi_to_signature(abi_function)

        if compute_selector(function_signature) != selector_hex:
            continue

        outputs = abi_function.get("outputs") or []
        logger.debug(f"Selector {selector_hex} matched {function_signature}")
        return SelectorMatch(
            method=abi_function["name"],
            abi_entry=abi_function,
            function_signature=function_signature,
            input_types=[collapse_if_tuple(param) for param in inputs],
            input_names=_parameter_names(inputs),
            output_types=[collapse_if_tuple(param) for param in outputs],
            output_names=_parameter_names(outputs),
        )

    logger.debug(f"Selector {selector_hex} not found in ABI with {len(contract_abi)} entries")
    return SelectorMatch()
