from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Literal

# pylint: disable=invalid-name


class AbiEntryKind(Enum):
    """Kinds of ABI entries.  Only entries that are not events or constructors can be called"""

    function = "function"
    event = "event"
    constructor = "constructor"
    fallback = "fallback"
    receive = "receive"
    error = "error"

    @classmethod
    def from_entry(cls, abi_entry: dict[str, Any]) -> "AbiEntryKind | None":
        """
        Returns the kind of ABI entry.  java-tron publishes capitalized kinds (``Function``, ``Event``), so
        the lookup is case-insensitive.  Entries without a type default to functions.  Returns None for
        unrecognized kinds.
        """
        try:
            return cls(str(abi_entry.get("type") or "function").lower())
        except ValueError:
            return None


class ContractRet(Enum):
    """Execution results recorded by java-tron in ``transaction.ret[0].contractRet``"""

    DEFAULT = "DEFAULT"
    SUCCESS = "SUCCESS"
    REVERT = "REVERT"
    BAD_JUMP_DESTINATION = "BAD_JUMP_DESTINATION"
    OUT_OF_MEMORY = "OUT_OF_MEMORY"
    PRECOMPILED_CONTRACT = "PRECOMPILED_CONTRACT"
    STACK_TOO_SMALL = "STACK_TOO_SMALL"
    STACK_TOO_LARGE = "STACK_TOO_LARGE"
    ILLEGAL_OPERATION = "ILLEGAL_OPERATION"
    STACK_OVERFLOW = "STACK_OVERFLOW"
    OUT_OF_ENERGY = "OUT_OF_ENERGY"
    OUT_OF_BANDWIDTH = "OUT_OF_BANDWIDTH"
    OUT_OF_TIME = "OUT_OF_TIME"
    JVM_STACK_OVER_FLOW = "JVM_STACK_OVER_FLOW"
    UNKNOWN = "UNKNOWN"
    TRANSFER_FAILED = "TRANSFER_FAILED"
    INVALID_CODE = "INVALID_CODE"


FAILED_CALL_STATUSES = frozenset(
    {ContractRet.REVERT.value, ContractRet.OUT_OF_ENERGY.value, ContractRet.OUT_OF_BANDWIDTH.value}
)


def method_call_failed(status: str | None) -> bool:
    """
    Returns True if the contract call reverted or ran out of resources.  The result bytes of failed calls
    are not ABI encoded return values, and should not be passed to output decoding.
    """
    return status in FAILED_CALL_STATUSES


@dataclass(frozen=True)
class DecodedValues:
    """
    Positional container of decoded values.  Behaves as a read-only sequence, and keeps an explicit
    ``length`` for consumers of the index-keyed form returned by :meth:`to_dict`
    """

    values: tuple[Any, ...] = ()

    @property
    def length(self) -> int:
        """Number of decoded values"""
        return len(self.values)

    def __getitem__(self, index: int) -> Any:
        return self.values[index]

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def to_dict(self) -> dict[int | str, Any]:
        """
        Returns index-keyed mapping with a trailing count

        >>> DecodedValues((5, "0xf8e81D47203A594245E36C48e151709F0C19fBe8")).to_dict()
        {0: 5, 1: '0xf8e81D47203A594245E36C48e151709F0C19fBe8', '_length': 2}
        """
        output: dict[int | str, Any] = dict(enumerate(self.values))
        output["_length"] = self.length
        return output


@dataclass
class DecodedCall:
    """Function Input or Output Decoding Result"""

    method_name: str | None
    parameter_names: list[str | None] = field(default_factory=list)
    parameter_types: list[str] = field(default_factory=list)

    values: DecodedValues | str = field(default_factory=DecodedValues)
    """ Decoded values.  A plain string when the node substituted a failure message for the result bytes """

    direction: Literal["input", "output"] = "input"

    @property
    def matched(self) -> bool:
        """False if no ABI entry matched the selector of the call data"""
        return self.method_name is not None

    def to_dict(self) -> dict[str, Any]:
        """Renders the result with camelCase keys, prefixed by the decoding direction"""
        prefix = self.direction
        return {
            "methodName": self.method_name,
            f"{prefix}Names": self.parameter_names,
            f"{prefix}Types": self.parameter_types,
            f"decoded{prefix.capitalize()}": self.values.to_dict()
            if isinstance(self.values, DecodedValues)
            else self.values,
        }


@dataclass
class RevertResult:
    """Revert reason extracted from a failed transaction"""

    status: str | None
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"txStatus": self.status, "revertMessage": self.message}
