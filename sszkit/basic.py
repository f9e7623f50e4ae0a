"""The SSZ type interface and the basic types: booleans and unsigned integers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from sszkit.errors import (
    AdditionalInput,
    ExpectedFurtherInput,
    InvalidByte,
    SerializeError,
)
from sszkit.merkle import BYTES_PER_CHUNK

UINT_WIDTHS = (8, 16, 32, 64, 128, 256)


class SszType(ABC):
    """Description of an SSZ type that encodes, decodes and roots its values."""

    @abstractmethod
    def is_variable_size(self) -> bool:
        """Whether encodings of this type vary in length."""

    @abstractmethod
    def size_hint(self) -> int:
        """Length of a fixed-size encoding, or 0 for variable-size types."""

    def is_composite_type(self) -> bool:
        """Whether values are rooted as composites rather than packed."""
        return True

    @abstractmethod
    def serialize(self, value: Any) -> bytes:
        """Encode ``value``."""

    @abstractmethod
    def deserialize(self, data: bytes) -> Any:
        """Decode ``data`` into a value."""

    @abstractmethod
    def hash_tree_root(self, value: Any) -> bytes:
        """Return the 32-byte hash tree root of ``value``."""


@dataclass(frozen=True)
class Boolean(SszType):
    """The SSZ ``boolean`` type."""

    def is_variable_size(self) -> bool:
        return False

    def size_hint(self) -> int:
        return 1

    def is_composite_type(self) -> bool:
        return False

    def serialize(self, value: Any) -> bytes:
        if not isinstance(value, bool):
            raise SerializeError(f"expected a bool, got {value!r}")
        return b"\x01" if value else b"\x00"

    def deserialize(self, data: bytes) -> bool:
        if len(data) == 0:
            raise ExpectedFurtherInput(provided=0, expected=1)
        if len(data) > 1:
            raise AdditionalInput(provided=len(data), expected=1)
        byte = data[0]
        if byte == 0:
            return False
        if byte == 1:
            return True
        raise InvalidByte(byte)

    def hash_tree_root(self, value: Any) -> bytes:
        return self.serialize(value).ljust(BYTES_PER_CHUNK, b"\x00")


@dataclass(frozen=True)
class Uint(SszType):
    """An unsigned little-endian integer of 8 to 256 bits."""

    bits: int

    def __post_init__(self) -> None:
        if self.bits not in UINT_WIDTHS:
            raise ValueError(
                f"unsupported integer width {self.bits}; expected one of {UINT_WIDTHS}"
            )

    def is_variable_size(self) -> bool:
        return False

    def size_hint(self) -> int:
        return self.bits // 8

    def is_composite_type(self) -> bool:
        return False

    def serialize(self, value: Any) -> bytes:
        if isinstance(value, bool) or not isinstance(value, int):
            raise SerializeError(f"expected an integer for uint{self.bits}, got {value!r}")
        if not 0 <= value < 1 << self.bits:
            raise SerializeError(f"value {value} does not fit in uint{self.bits}")
        return value.to_bytes(self.size_hint(), "little")

    def deserialize(self, data: bytes) -> int:
        expected = self.size_hint()
        if len(data) < expected:
            raise ExpectedFurtherInput(provided=len(data), expected=expected)
        if len(data) > expected:
            raise AdditionalInput(provided=len(data), expected=expected)
        return int.from_bytes(bytes(data), "little")

    def hash_tree_root(self, value: Any) -> bytes:
        return self.serialize(value).ljust(BYTES_PER_CHUNK, b"\x00")


def serialize(sedes: SszType, value: Any) -> bytes:
    """Encode ``value`` as ``sedes``."""
    return sedes.serialize(value)


def deserialize(sedes: SszType, data: bytes) -> Any:
    """Decode ``data`` as ``sedes``."""
    return sedes.deserialize(data)


def hash_tree_root(sedes: SszType, value: Any) -> bytes:
    """Return the hash tree root of ``value`` as ``sedes``."""
    return sedes.hash_tree_root(value)