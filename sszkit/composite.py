"""Composite helpers shared by homogeneous and heterogeneous SSZ types, and ``Array``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from sszkit.basic import SszType
from sszkit.errors import (
    BYTES_PER_LENGTH_OFFSET,
    AdditionalInput,
    ExactLengthError,
    ExpectedFurtherInput,
    InvalidBoundError,
    InvalidInstance,
    InvalidOffsetsLength,
    InvalidType,
    MerkleizationError,
    OffsetNotIncreasing,
    SerializeError,
)
from sszkit.merkle import merkleize, pack_bytes

_MAX_OFFSET = 1 << (8 * BYTES_PER_LENGTH_OFFSET)


def _read_offset(data: bytes) -> int:
    return int.from_bytes(data, "little")


def _deserialize_fixed(element_type: SszType, data: bytes) -> list[Any]:
    size = element_type.size_hint()
    if size == 0:
        raise InvalidType(InvalidBoundError(size))
    remainder = len(data) % size
    if remainder:
        raise AdditionalInput(provided=len(data), expected=len(data) - remainder)
    return [
        element_type.deserialize(data[start : start + size])
        for start in range(0, len(data), size)
    ]


def _deserialize_variable(element_type: SszType, data: bytes) -> list[Any]:
    if not data:
        return []
    if len(data) < BYTES_PER_LENGTH_OFFSET:
        raise ExpectedFurtherInput(provided=len(data), expected=BYTES_PER_LENGTH_OFFSET)

    offsets_len = _read_offset(data[:BYTES_PER_LENGTH_OFFSET])
    if len(data) < offsets_len:
        raise ExpectedFurtherInput(provided=len(data), expected=offsets_len)
    if offsets_len % BYTES_PER_LENGTH_OFFSET:
        raise InvalidOffsetsLength(offsets_len)

    offsets = [
        _read_offset(data[start : start + BYTES_PER_LENGTH_OFFSET])
        for start in range(0, offsets_len, BYTES_PER_LENGTH_OFFSET)
    ]
    offsets.append(len(data))

    elements = []
    for start, end in zip(offsets, offsets[1:]):
        if start > end:
            raise OffsetNotIncreasing(start=start, end=end)
        elements.append(element_type.deserialize(data[start:end]))
    return elements


def deserialize_homogeneous_composite(element_type: SszType, data: bytes) -> list[Any]:
    """Decode a sequence of elements that all have ``element_type``."""
    data = bytes(data)
    if element_type.is_variable_size():
        return _deserialize_variable(element_type, data)
    return _deserialize_fixed(element_type, data)


def serialize_composite(element_types: Sequence[SszType], values: Sequence[Any]) -> bytes:
    """Encode ``values`` with their types: fixed parts and offsets first, then variable parts."""
    element_types = list(element_types)
    values = list(values)
    if len(element_types) != len(values):
        raise SerializeError(
            f"{len(values)} values given for {len(element_types)} element types"
        )

    fixed: list[bytes | None] = []
    variable: list[bytes] = []
    fixed_length = 0
    for element_type, value in zip(element_types, values):
        encoding = element_type.serialize(value)
        if element_type.is_variable_size():
            fixed.append(None)
            variable.append(encoding)
            fixed_length += BYTES_PER_LENGTH_OFFSET
        else:
            fixed.append(encoding)
            fixed_length += len(encoding)

    total_length = fixed_length + sum(len(part) for part in variable)
    if total_length >= _MAX_OFFSET:
        raise SerializeError(f"encoding of {total_length} bytes is too long for offsets")

    parts = []
    offset = fixed_length
    variable_parts = iter(variable)
    for part in fixed:
        if part is None:
            parts.append(offset.to_bytes(BYTES_PER_LENGTH_OFFSET, "little"))
            offset += len(next(variable_parts))
        else:
            parts.append(part)
    parts.extend(variable)
    return b"".join(parts)


def chunk_roots(element_types: Sequence[SszType], values: Sequence[Any]) -> bytes:
    """Concatenate the hash tree roots of ``values``, one 32-byte chunk each."""
    element_types = list(element_types)
    values = list(values)
    if len(element_types) != len(values):
        raise MerkleizationError(
            f"{len(values)} values given for {len(element_types)} element types"
        )
    return b"".join(
        element_type.hash_tree_root(value)
        for element_type, value in zip(element_types, values)
    )


@dataclass(frozen=True)
class Array(SszType):
    """A fixed-length sequence of ``length`` elements of one type.

    An array of length 0 is illegal: its values cannot be encoded or decoded.
    """

    element_type: SszType
    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"array length must not be negative, got {self.length}")

    def is_variable_size(self) -> bool:
        return self.element_type.is_variable_size()

    def size_hint(self) -> int:
        return self.element_type.size_hint() * self.length

    def is_composite_type(self) -> bool:
        return self.element_type.is_composite_type()

    def _elements(self, value: Sequence[Any]) -> list[Any]:
        elements = list(value)
        if len(elements) != self.length:
            raise ExactLengthError(required=self.length, provided=len(elements))
        return elements

    def serialize(self, value: Sequence[Any]) -> bytes:
        if self.length == 0:
            raise SerializeError(InvalidBoundError(self.length))
        try:
            elements = self._elements(value)
        except ExactLengthError as err:
            raise SerializeError(err) from err
        return serialize_composite([self.element_type] * self.length, elements)

    def deserialize(self, data: bytes) -> list[Any]:
        if self.length == 0:
            raise InvalidType(InvalidBoundError(self.length))
        data = bytes(data)
        if not self.element_type.is_variable_size():
            expected = self.size_hint()
            if len(data) < expected:
                raise ExpectedFurtherInput(provided=len(data), expected=expected)
            if len(data) > expected:
                raise AdditionalInput(provided=len(data), expected=expected)
        elements = deserialize_homogeneous_composite(self.element_type, data)
        if len(elements) != self.length:
            raise InvalidInstance(
                ExactLengthError(required=self.length, provided=len(elements))
            )
        return elements

    def hash_tree_root(self, value: Sequence[Any]) -> bytes:
        try:
            elements = self._elements(value)
        except ExactLengthError as err:
            raise MerkleizationError(str(err)) from err
        if self.element_type.is_composite_type():
            return merkleize(chunk_roots([self.element_type] * self.length, elements))
        try:
            encoding = self.serialize(elements)
        except SerializeError as err:
            raise MerkleizationError(str(err)) from err
        return merkleize(pack_bytes(encoding))