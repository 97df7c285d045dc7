from .revert import decode_revert_message
from .selector import SelectorMatch, compute_selector, resolve_selector
from .tron_decoder import TronTxDecoder
from .utils import abi_to_signature, collapse_if_tuple

__all__ = [
    "TronTxDecoder",
    "SelectorMatch",
    "abi_to_signature",
    "collapse_if_tuple",
    "compute_selector",
    "decode_revert_message",
    "resolve_selector",
]
