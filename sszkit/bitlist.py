"""The SSZ ``Bitlist[N]`` type: a variable number of booleans up to a bound."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from sszkit.basic import SszType
from sszkit.errors import (
    AdditionalInput,
    BoundedLengthError,
    ExpectedFurtherInput,
    InstanceError,
    InvalidByte,
    InvalidInstance,
    MerkleizationError,
    SerializeError,
)
from sszkit.merkle import merkleize, mix_in_length, pack_bytes

_BITS_PER_CHUNK = 256


def _byte_length(bound: int) -> int:
    # one extra bit for the length marker
    return (bound + 7 + 1) // 8


def _pack_bits(bits: list[bool]) -> bytearray:
    packed = bytearray((len(bits) + 7) // 8)
    for index, bit in enumerate(bits):
        if bit:
            packed[index // 8] |= 1 << (index % 8)
    return packed


def _unpack_byte(byte: int, count: int = 8) -> list[bool]:
    return [bool(byte >> shift & 1) for shift in range(count)]


def _format_bits(bits: list[bool]) -> str:
    groups = ("".join("1" if bit else "0" for bit in bits[i : i + 4])
              for i in range(0, len(bits), 4))
    return "_".join(groups)


@dataclass(frozen=True)
class Bitlist(SszType):
    """A homogeneous collection of at most ``bound`` boolean values."""

    bound: int

    def __post_init__(self) -> None:
        if self.bound < 0:
            raise ValueError(f"bitlist bound must not be negative, got {self.bound}")

    def is_variable_size(self) -> bool:
        return True

    def size_hint(self) -> int:
        return 0

    def validate(self, value: Iterable[Any]) -> list[bool]:
        """Return ``value`` as a list of bools, checking the bound."""
        bits = list(value)
        for bit in bits:
            if not isinstance(bit, bool):
                raise TypeError(f"bitlist elements must be bools, got {bit!r}")
        if len(bits) > self.bound:
            raise BoundedLengthError(bound=self.bound, provided=len(bits))
        return bits

    def from_bools(self, bits: Iterable[bool]) -> list[bool]:
        """Build a bitlist value from booleans, enforcing the bound."""
        return self.validate(bits)

    def format(self, value: Iterable[Any]) -> str:
        """Render ``value`` as ``Bitlist<len=L, cap=N>[bits]`` in groups of four."""
        bits = list(value)
        return f"Bitlist<len={len(bits)}, cap={self.bound}>[{_format_bits(bits)}]"

    def _checked_bits(self, value: Iterable[Any]) -> list[bool]:
        try:
            return self.validate(value)
        except (InstanceError, TypeError) as err:
            raise SerializeError(err if isinstance(err, InstanceError) else str(err)) from err

    def serialize(self, value: Iterable[Any]) -> bytes:
        bits = self._checked_bits(value)
        encoding = _pack_bits(bits)
        marker_index = len(bits) % 8
        if marker_index == 0:
            encoding.append(1)
        else:
            encoding[-1] |= 1 << marker_index
        return bytes(encoding)

    def deserialize(self, data: bytes) -> list[bool]:
        data = bytes(data)
        if not data:
            raise ExpectedFurtherInput(provided=0, expected=1)
        max_len = _byte_length(self.bound)
        if len(data) > max_len:
            raise AdditionalInput(provided=len(data), expected=max_len)

        *prefix, last_byte = data
        if last_byte == 0:
            raise InvalidByte(last_byte)

        additional_members = last_byte.bit_length() - 1  # skip the marker bit
        total_members = len(prefix) * 8 + additional_members
        if total_members > self.bound:
            raise InvalidInstance(
                BoundedLengthError(bound=self.bound, provided=total_members)
            )

        bits = [bit for byte in prefix for bit in _unpack_byte(byte)]
        bits.extend(_unpack_byte(last_byte, additional_members))
        return bits

    def hash_tree_root(self, value: Iterable[Any]) -> bytes:
        try:
            bits = self._checked_bits(value)
        except SerializeError as err:
            raise MerkleizationError(str(err)) from err
        chunks = pack_bytes(bytes(_pack_bits(bits)))
        limit = (self.bound + _BITS_PER_CHUNK - 1) // _BITS_PER_CHUNK
        data_root = merkleize(chunks, limit)
        return mix_in_length(data_root, len(bits))