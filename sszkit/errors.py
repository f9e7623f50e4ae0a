"""Exception hierarchy for SSZ serialization, deserialization and merkleization."""

from __future__ import annotations

BYTES_PER_LENGTH_OFFSET = 4


class SszError(Exception):
    """Base class for every error raised by this package."""


class InstanceError(SszError):
    """A value does not satisfy the length rules of its type."""


class ExactLengthError(InstanceError):
    """The number of elements differs from the exact number required."""

    def __init__(self, required: int, provided: int) -> None:
        self.required = required
        self.provided = provided
        super().__init__(
            f"required {required} elements for this type but {provided} elements given"
        )


class BoundedLengthError(InstanceError):
    """The number of elements exceeds the inclusive upper bound of the type."""

    def __init__(self, bound: int, provided: int) -> None:
        self.bound = bound
        self.provided = provided
        super().__init__(
            f"{provided} elements given for a type with (inclusive) upper bound {bound}"
        )


class InvalidBoundError(SszError):
    """A type was declared with a bound it cannot have."""

    def __init__(self, bound: int) -> None:
        self.bound = bound
        super().__init__(f"the type for this value is invalid with bound {bound}")


class SerializeError(SszError):
    """A value could not be serialized."""

    def __init__(self, reason: str | SszError) -> None:
        self.reason = reason
        super().__init__(str(reason))


class MerkleizationError(SszError):
    """A hash tree root could not be computed."""


class DeserializeError(SszError):
    """An encoding could not be decoded into a value of the expected type."""


class ExpectedFurtherInput(DeserializeError):
    """More data was expected to be in the buffer."""

    def __init__(self, provided: int, expected: int) -> None:
        self.provided = provided
        self.expected = expected
        super().__init__(
            f"expected at least {expected} byte(s) when decoding "
            f"but provided only {provided} byte(s)"
        )


class AdditionalInput(DeserializeError):
    """The buffer contained more data than expected."""

    def __init__(self, provided: int, expected: int) -> None:
        self.provided = provided
        self.expected = expected
        super().__init__(
            f"{provided} byte(s) given but only expected (up to) {expected} byte(s)"
        )


class InvalidByte(DeserializeError):
    """A byte that the expected type does not allow was found."""

    def __init__(self, byte: int) -> None:
        self.byte = byte
        super().__init__(
            f"invalid byte {byte:x} when decoding data of the expected type"
        )


class InvalidInstance(DeserializeError):
    """The decoded value breaks the length rules of its type."""

    def __init__(self, error: InstanceError) -> None:
        self.error = error
        super().__init__(f"invalid instance: {error}")


class InvalidType(DeserializeError):
    """The type being decoded is itself invalid."""

    def __init__(self, error: InvalidBoundError) -> None:
        self.error = error
        super().__init__(f"invalid type: {error}")


class InvalidOffsetsLength(DeserializeError):
    """The bytes used for offsets are not a multiple of the offset size."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"the offsets length provided {length} is not a multiple of the size "
            f"per length offset {BYTES_PER_LENGTH_OFFSET} bytes"
        )


class OffsetNotIncreasing(DeserializeError):
    """An offset points before the offset that precedes it."""

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        super().__init__(f"invalid offset points to byte {end} before byte {start}")