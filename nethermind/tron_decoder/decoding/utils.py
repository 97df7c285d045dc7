import logging
from typing import Any, Sequence

from eth_abi import decode as eth_abi_decode
from eth_abi.exceptions import DecodingError as ABIDecodingError
from eth_typing.abi import ABIComponent, ABIElement
from eth_utils import is_0x_prefixed, is_hex, remove_0x_prefix

from nethermind.tron_decoder.types.decoding import AbiEntryKind

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("tron_decoder").getChild("decoding")

NON_CALLABLE_KINDS = (AbiEntryKind.constructor, AbiEntryKind.event)


def collapse_if_tuple(abi_param: ABIComponent | dict[str, Any] | str) -> str:
    """
    Converts a tuple from a dict to a parenthesized list of its types.  Plain type strings and
    non-tuple parameters are returned unchanged.

    >>> from nethermind.tron_decoder.decoding.utils import collapse_if_tuple
    >>> collapse_if_tuple(
    ...     {
    ...         'components': [
    ...             {'name': 'anAddress', 'type': 'address'},
    ...             {'name': 'anInt', 'type': 'uint256'},
    ...             {'name': 'someBytes', 'type': 'bytes'},
    ...         ],
    ...         'type': 'tuple[]',
    ...     }
    ... )
    '(address,uint256,bytes)[]'
    >>> collapse_if_tuple('uint256[]')
    'uint256[]'
    """
    if isinstance(abi_param, str):
        return abi_param

    typ = abi_param.get("type")
    if not isinstance(typ, str):
        raise TypeError(f"The 'type' must be a string, but got {typ} of type {type(typ)}")

    if not typ.startswith("tuple"):
        return typ

    delimited = ",".join(collapse_if_tuple(c) for c in abi_param.get("components", []))  # type: ignore[union-attr]
    # Whatever comes after "tuple" is the array dims.  Either "", "[]", or "[k]"
    array_dim = typ[5:]
    return f"({delimited}){array_dim}"


def abi_to_signature(abi: ABIElement | dict[str, Any]) -> str:
    """
    Converts ABI to signature.

    >>> abi_to_signature(
    ...     {"type": "function", "name": "transfer", "inputs": [{"name": "to", "type": "address"},
    ...      {"name": "value", "type": "uint256"}]}
    ... )
    'transfer(address,uint256)'
    """
    collapsed = [collapse_if_tuple(abi_input) for abi_input in abi.get("inputs") or []]
    return f"{abi['name']}({','.join(collapsed)})"


def filter_functions(contract_abi: Sequence[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Filters out constructors and events, along with unnamed entries (fallback & receive functions),
    which cannot be the target of a selector
    """
    return [
        abi
        for abi in contract_abi
        if AbiEntryKind.from_entry(abi) not in NON_CALLABLE_KINDS and abi.get("name")
    ]


def hex_to_bytes(hex_data: str | bytes) -> bytes:
    """Converts a hex string, with or without the 0x prefix, to bytes"""
    if isinstance(hex_data, (bytes, bytearray)):
        return bytes(hex_data)
    return bytes.fromhex(remove_0x_prefix(hex_data))  # type: ignore[arg-type]


def is_hex_encoded_result(encoded_result: str) -> bool:
    """
    Returns True if the result string holds ABI data.  The node substitutes the hex encoded failure
    message for the result bytes of failed calls, which does not carry the 0x prefix.  Only a lower-case
    0x prefix marks ABI data
    """
    return encoded_result.startswith("0x")


def is_hex_payload(hex_data: str) -> bool:
    """
    Returns True if the string is made up of whole hex encoded bytes, without a 0x prefix

    >>> is_hex_payload("4f5554")
    True
    >>> is_hex_payload("REVERT opcode executed")
    False
    """
    if hex_data == "":
        return True
    return len(hex_data) % 2 == 0 and not is_0x_prefixed(hex_data) and is_hex(hex_data)


def hex_pairs_to_str(hex_message: str) -> str:
    """
    Converts each pair of hex characters to a character code.  Messages that are not hex encoded
    are returned as they are.

    >>> hex_pairs_to_str("52455645525420")
    'REVERT '
    >>> hex_pairs_to_str("REVERT opcode executed")
    'REVERT opcode executed'
    """
    if not is_hex_payload(hex_message):
        return hex_message
    return "".join(chr(int(hex_message[i : i + 2], 16)) for i in range(0, len(hex_message), 2))


def decode_evm_abi_from_types(types: list[str], data: bytes | bytearray) -> tuple[Any, ...]:
    """
    Decodes ABI data from types and data bytes.  Decoding errors are logged and re-raised, since they
    signal that the ABI does not describe the data

    :param types: canonical ABI types, with tuples collapsed
    :param data: ABI encoded bytes, without function selector
    :return: tuple of decoded values, one for each type
    """
    try:
        return eth_abi_decode(types, data)
    except ABIDecodingError as e:
        logger.debug(f"{e.__class__.__name__} while decoding {data.hex()} for types {types}: {e}")
        raise
