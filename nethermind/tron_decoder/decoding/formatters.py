from typing import Any, Callable, Sequence

from eth_abi.grammar import ABIType, BasicType, TupleType, parse
from eth_utils import to_checksum_address

Formatter = Callable[[Any], Any]

DEFAULT_FORMATTERS: dict[str, Formatter] = {"address": to_checksum_address}
""" By default, converts all addresses to checksummed hexstrings """


def _format_value(value: Any, abi_type: ABIType, formatters: dict[str, Formatter]) -> Any:
    if abi_type.is_array:
        item_type = abi_type.item_type
        return tuple(_format_value(item, item_type, formatters) for item in value)

    if isinstance(abi_type, TupleType):
        return tuple(
            _format_value(item, component, formatters)
            for item, component in zip(value, abi_type.components, strict=True)
        )

    if isinstance(abi_type, BasicType):
        formatter = formatters.get(abi_type.to_type_str())
        if formatter is None:
            formatter = formatters.get(abi_type.base)
        if formatter is not None:
            return formatter(value)

    return value


def apply_formatters(
    decoding_result: Sequence[Any], types: list[str], formatters: dict[str, Formatter] | None = None
) -> list[Any]:
    """
    Applies formatters to decoding result.  Formatters are keyed by ABI type, and are applied to
    every matching value, including values nested within arrays & tuples.

    :param decoding_result: List of values returned from ABI Decoding
    :param types: List of types for each entry in decoding_result
    :param formatters: Mapping from type string to formatter.  Defaults to checksumming addresses
    """
    formatters = DEFAULT_FORMATTERS if formatters is None else formatters
    if not formatters:
        return list(decoding_result)

    return [_format_value(value, parse(typ), formatters) for value, typ in zip(decoding_result, types, strict=True)]
