"""Descriptions of editor settings and the groups they belong to."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union

SettingValue = Union[float, bool, int]


class SettingType(Enum):
    """The kind of control a setting is edited with."""

    SLIDER = auto()
    CHECKBOX = auto()
    DROPDOWN = auto()
    BUTTON = auto()


@dataclass
class SettingConfig:
    """One setting: how it is labelled, identified, edited and defaulted."""

    label: str
    id: str
    type: SettingType
    default_value: SettingValue
    min_value: float = 0.0
    max_value: float = 1.0
    options: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.type, SettingType):
            raise TypeError(f"type must be a SettingType, got {self.type!r}")
        if not isinstance(self.default_value, (float, bool, int)):
            raise TypeError(
                "default_value must be a float, bool or int, "
                f"got {type(self.default_value).__name__}"
            )


@dataclass
class SettingCategory:
    """A named group of settings."""

    name: str
    id: str
    settings: list[SettingConfig] = field(default_factory=list)