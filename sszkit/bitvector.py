"""The SSZ ``Bitvector[N]`` type: a fixed number of booleans."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from sszkit.basic import SszType
from sszkit.errors import (
    AdditionalInput,
    ExactLengthError,
    ExpectedFurtherInput,
    InstanceError,
    InvalidBoundError,
    InvalidByte,
    InvalidType,
    MerkleizationError,
    SerializeError,
)
from sszkit.merkle import merkleize, pack_bytes

_BITS_PER_CHUNK = 256


def _pack_bits(bits: list[bool]) -> bytes:
    packed = bytearray((len(bits) + 7) // 8)
    for index, bit in enumerate(bits):
        if bit:
            packed[index // 8] |= 1 << (index % 8)
    return bytes(packed)


def _format_bits(bits: list[bool]) -> str:
    groups = ("".join("1" if bit else "0" for bit in bits[i : i + 4])
              for i in range(0, len(bits), 4))
    return "_".join(groups)


@dataclass(frozen=True)
class Bitvector(SszType):
    """A homogeneous collection of exactly ``length`` boolean values.

    A bitvector of length 0 is illegal: its values cannot be built or encoded.
    """

    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"bitvector length must not be negative, got {self.length}")

    def is_variable_size(self) -> bool:
        return False

    def size_hint(self) -> int:
        return (self.length + 7) // 8

    def default(self) -> list[bool]:
        """Return a value with every bit cleared."""
        if self.length == 0:
            raise InvalidBoundError(self.length)
        return [False] * self.length

    def validate(self, value: Iterable[Any]) -> list[bool]:
        """Return ``value`` as a list of bools, checking its exact length."""
        bits = list(value)
        for bit in bits:
            if not isinstance(bit, bool):
                raise TypeError(f"bitvector elements must be bools, got {bit!r}")
        if len(bits) != self.length:
            raise ExactLengthError(required=self.length, provided=len(bits))
        return bits

    def from_bools(self, bits: Iterable[bool]) -> list[bool]:
        """Build a bitvector value from exactly ``length`` booleans."""
        return self.validate(bits)

    def format(self, value: Iterable[Any]) -> str:
        """Render ``value`` as ``Bitvector<N>[bits]`` in groups of four."""
        return f"Bitvector<{self.length}>[{_format_bits(list(value))}]"

    def serialize(self, value: Iterable[Any]) -> bytes:
        if self.length == 0:
            raise SerializeError(InvalidBoundError(self.length))
        try:
            bits = self.validate(value)
        except InstanceError as err:
            raise SerializeError(err) from err
        except TypeError as err:
            raise SerializeError(str(err)) from err
        return _pack_bits(bits)

    def deserialize(self, data: bytes) -> list[bool]:
        if self.length == 0:
            raise InvalidType(InvalidBoundError(self.length))
        data = bytes(data)
        expected = self.size_hint()
        if len(data) < expected:
            raise ExpectedFurtherInput(provided=len(data), expected=expected)
        if len(data) > expected:
            raise AdditionalInput(provided=len(data), expected=expected)

        remainder_count = self.length % 8
        if remainder_count and data[-1] >> remainder_count:
            raise InvalidByte(data[-1])

        return [bool(data[index // 8] >> (index % 8) & 1) for index in range(self.length)]

    def hash_tree_root(self, value: Iterable[Any]) -> bytes:
        try:
            encoding = self.serialize(value)
        except SerializeError as err:
            raise MerkleizationError(str(err)) from err
        limit = (self.length + _BITS_PER_CHUNK - 1) // _BITS_PER_CHUNK
        return merkleize(pack_bytes(encoding), limit)