"""A typed key/value store shared between systems."""

from __future__ import annotations

import copy
from typing import Any, Hashable, TypeVar

T = TypeVar("T")


class Blackboard:
    """Stores copies of values under keys and hands them back by exact type.

    Reading a key that was never set raises ``KeyError``; reading it as a
    type other than the one it was stored with raises ``TypeError``.
    """

    def __init__(self) -> None:
        self._data: dict[Hashable, Any] = {}

    def set_value(self, key: Hashable, value: Any) -> None:
        """Store a copy of ``value`` under ``key``, replacing any previous value."""
        try:
            stored = copy.deepcopy(value)
        except TypeError as exc:
            raise TypeError(
                f"value for key {key!r} cannot be copied into the blackboard"
            ) from exc
        self._data[key] = stored

    def get_value(self, key: Hashable, expected_type: type[T]) -> T:
        """Return a copy of the value under ``key``, which must be exactly ``expected_type``."""
        try:
            value = self._data[key]
        except KeyError:
            raise KeyError(f"no value has been set for key {key!r}") from None
        if type(value) is not expected_type:
            raise TypeError(
                f"value for key {key!r} is {type(value).__name__}, "
                f"not {expected_type.__name__}"
            )
        return copy.deepcopy(value)

    def __contains__(self, key: object) -> bool:
        return key in self._data