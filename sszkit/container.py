"""The SSZ container type: an ordered, heterogeneous collection of named fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Tuple, Union as _TypingUnion

from sszkit.basic import Boolean, SszType, Uint
from sszkit.bitlist import Bitlist
from sszkit.composite import Array, chunk_roots, serialize_composite
from sszkit.errors import (
    BYTES_PER_LENGTH_OFFSET,
    AdditionalInput,
    ExpectedFurtherInput,
    MerkleizationError,
    OffsetNotIncreasing,
    SerializeError,
)
from sszkit.merkle import merkleize

FieldSpec = Tuple[str, SszType]


def _default_value(sedes: SszType) -> Any:
    """Return the zero value of ``sedes``."""
    default = getattr(sedes, "default", None)
    if callable(default):
        return default()
    if isinstance(sedes, Boolean):
        return False
    if isinstance(sedes, Uint):
        return 0
    if isinstance(sedes, Bitlist):
        return []
    if isinstance(sedes, Array):
        return [_default_value(sedes.element_type) for _ in range(sedes.length)]
    raise TypeError(f"no default value is known for {sedes!r}")


def _normalize_fields(
    fields: _TypingUnion[Mapping[str, SszType], Iterable[FieldSpec]],
) -> tuple[FieldSpec, ...]:
    pairs = tuple(fields.items()) if isinstance(fields, Mapping) else tuple(fields)
    if not pairs:
        raise ValueError("ssz containers with no fields are illegal")
    seen: set[str] = set()
    for name, sedes in pairs:
        if not isinstance(name, str) or not name:
            raise ValueError(f"field names must be non-empty strings, got {name!r}")
        if name in seen:
            raise ValueError(f"duplicate field name {name!r}")
        if not isinstance(sedes, SszType):
            raise TypeError(f"field {name!r} has no SSZ type: {sedes!r}")
        seen.add(name)
    return pairs


@dataclass(frozen=True, init=False)
class Container(SszType):
    """A container whose values are mappings from field name to field value.

    Fields are given in order, either as a mapping or as ``(name, type)`` pairs.
    """

    fields: tuple[FieldSpec, ...]

    def __init__(
        self, fields: _TypingUnion[Mapping[str, SszType], Iterable[FieldSpec]]
    ) -> None:
        object.__setattr__(self, "fields", _normalize_fields(fields))

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.fields)

    @property
    def field_types(self) -> tuple[SszType, ...]:
        return tuple(sedes for _, sedes in self.fields)

    def default(self) -> dict[str, Any]:
        """Return a value with every field set to its zero value."""
        return {name: _default_value(sedes) for name, sedes in self.fields}

    def is_variable_size(self) -> bool:
        return any(sedes.is_variable_size() for sedes in self.field_types)

    def size_hint(self) -> int:
        if self.is_variable_size():
            return 0
        return sum(sedes.size_hint() for sedes in self.field_types)

    def _field_values(self, value: Mapping[str, Any]) -> list[Any]:
        if not isinstance(value, Mapping):
            raise TypeError(f"container values must be mappings, got {value!r}")
        missing = [name for name in self.field_names if name not in value]
        if missing:
            raise KeyError(f"missing container field(s): {', '.join(missing)}")
        return [value[name] for name in self.field_names]

    def serialize(self, value: Mapping[str, Any]) -> bytes:
        try:
            values = self._field_values(value)
        except (KeyError, TypeError) as err:
            raise SerializeError(str(err)) from err
        return serialize_composite(self.field_types, values)

    def deserialize(self, data: bytes) -> dict[str, Any]:
        data = bytes(data)
        length = len(data)
        result: dict[str, Any] = {}
        offsets: list[tuple[int, int]] = []
        start = 0

        for index, (name, sedes) in enumerate(self.fields):
            if sedes.is_variable_size():
                end = start + BYTES_PER_LENGTH_OFFSET
                if end > length:
                    raise ExpectedFurtherInput(
                        provided=max(length - start, 0), expected=BYTES_PER_LENGTH_OFFSET
                    )
                next_offset = int.from_bytes(data[start:end], "little")
                if offsets and next_offset < offsets[-1][1]:
                    raise OffsetNotIncreasing(start=offsets[-1][1], end=next_offset)
                offsets.append((index, next_offset))
                start = end
            else:
                size = sedes.size_hint()
                end = start + size
                if end > length:
                    raise ExpectedFurtherInput(
                        provided=max(length - start, 0), expected=size
                    )
                result[name] = sedes.deserialize(data[start:end])
                start = end

        total_bytes_read = start
        offsets.append((-1, length))
        for (index, span_start), (_, span_end) in zip(offsets, offsets[1:]):
            if span_start > span_end or span_end > length:
                raise ExpectedFurtherInput(
                    provided=max(length - span_start, 0),
                    expected=span_end - span_start,
                )
            name, sedes = self.fields[index]
            result[name] = sedes.deserialize(data[span_start:span_end])
            total_bytes_read += span_end - span_start

        if total_bytes_read > length:
            raise ExpectedFurtherInput(provided=length, expected=total_bytes_read)
        if total_bytes_read < length:
            raise AdditionalInput(provided=length, expected=total_bytes_read)

        return {name: result[name] for name in self.field_names}

    def hash_tree_root(self, value: Mapping[str, Any]) -> bytes:
        try:
            values = self._field_values(value)
        except (KeyError, TypeError) as err:
            raise MerkleizationError(str(err)) from err
        return merkleize(chunk_roots(self.field_types, values))