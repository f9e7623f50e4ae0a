"""The SSZ union type: a value of one of several option types, tagged by a selector."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from sszkit.basic import SszType
from sszkit.errors import (
    ExpectedFurtherInput,
    InvalidByte,
    MerkleizationError,
    SerializeError,
)
from sszkit.merkle import BYTES_PER_CHUNK, mix_in_selector

MAX_UNION_OPTIONS = 127

UnionValue = tuple[int, Any]


def _normalize_options(options: Iterable[Optional[SszType]]) -> tuple[Optional[SszType], ...]:
    options = tuple(options)
    if not options:
        raise ValueError("SSZ unions must have at least 1 variant; this union has none")
    if len(options) > MAX_UNION_OPTIONS:
        raise ValueError(
            f"SSZ unions cannot have more than {MAX_UNION_OPTIONS} variants; "
            "this union has more"
        )
    for index, option in enumerate(options):
        if option is None:
            if index != 0:
                raise ValueError("only the first variant can be `None`")
            if len(options) < 2:
                raise ValueError(
                    "SSZ unions must have more than 1 selector if the first is `None`"
                )
        elif not isinstance(option, SszType):
            raise TypeError(f"union option {index} has no SSZ type: {option!r}")
    return options


@dataclass(frozen=True, init=False)
class Union(SszType):
    """A tagged union over ``options``.

    Values are ``(selector, inner)`` pairs. Only the first option may be ``None``,
    in which case its value is ``(0, None)``.
    """

    options: tuple[Optional[SszType], ...]

    def __init__(self, options: Iterable[Optional[SszType]]) -> None:
        object.__setattr__(self, "options", _normalize_options(options))

    def is_variable_size(self) -> bool:
        return True

    def size_hint(self) -> int:
        return 0

    def default(self) -> UnionValue:
        """Return the first option holding its zero value."""
        first = self.options[0]
        if first is None:
            return (0, None)
        # Imported here because the container module depends on this one's peers.
        from sszkit.container import _default_value

        return (0, _default_value(first))

    def _split(self, value: Any) -> tuple[int, Optional[SszType], Any]:
        try:
            selector, inner = value
        except (TypeError, ValueError) as err:
            raise TypeError(
                f"union values must be (selector, value) pairs, got {value!r}"
            ) from err
        if isinstance(selector, bool) or not isinstance(selector, int):
            raise TypeError(f"union selector must be an integer, got {selector!r}")
        if not 0 <= selector < len(self.options):
            raise ValueError(f"selector {selector} is out of range for this union")
        option = self.options[selector]
        if option is None and inner is not None:
            raise ValueError("the `None` variant cannot hold a value")
        return selector, option, inner

    def serialize(self, value: Any) -> bytes:
        try:
            selector, option, inner = self._split(value)
        except (TypeError, ValueError) as err:
            raise SerializeError(str(err)) from err
        if option is None:
            return b"\x00"
        return bytes([selector]) + option.serialize(inner)

    def deserialize(self, data: bytes) -> UnionValue:
        data = bytes(data)
        if not data:
            raise ExpectedFurtherInput(provided=0, expected=1)
        selector = data[0]
        if selector >= len(self.options):
            raise InvalidByte(selector)
        option = self.options[selector]
        if option is None:
            return (0, None)
        return (selector, option.deserialize(data[1:]))

    def hash_tree_root(self, value: Any) -> bytes:
        try:
            selector, option, inner = self._split(value)
        except (TypeError, ValueError) as err:
            raise MerkleizationError(str(err)) from err
        if option is None:
            return mix_in_selector(bytes(BYTES_PER_CHUNK), 0)
        return mix_in_selector(option.hash_tree_root(inner), selector)