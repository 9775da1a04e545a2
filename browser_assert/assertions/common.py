"""Shared types for the assertion modules."""

from __future__ import annotations

from enum import Enum


class CheckState(str, Enum):
    """Expected state of a checkbox or radio button."""

    CHECKED = "checked"
    UNCHECKED = "unchecked"

    @classmethod
    def of(cls, checked: bool) -> "CheckState":
        return cls.CHECKED if checked else cls.UNCHECKED
