"""Absent-event sentinel and candidate classification helpers."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class AbsentValue(Enum):
    """Stands in for a list position that holds no event."""

    ABSENT = "absent"

    def __str__(self) -> str:
        return "no event"


ABSENT = AbsentValue.ABSENT


def is_absent(value: object) -> bool:
    """Return True for the absent sentinel and for None."""
    return value is None or value is ABSENT


def is_event_list(value: object) -> bool:
    """Return True when value is an ordered sequence that can hold events."""
    return isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray)
