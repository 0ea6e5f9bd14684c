"""Expectation document entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ExpectationMode(str, Enum):
    """How the expected events are applied to the recorded event list."""

    ALL_OF = "all_of"
    ANY_OF = "any_of"
    SEQUENCE = "sequence"
    EXACT_SEQUENCE = "exact_sequence"
    NOTHING = "nothing"


@dataclass(frozen=True)
class ExpectedEventSpec:
    """Expected type name and field values for one event."""

    type_name: str | None
    fields: Mapping[str, object]


@dataclass(frozen=True)
class Expectation:
    """One named assertion over the recorded event list."""

    name: str
    mode: ExpectationMode
    events: tuple[ExpectedEventSpec, ...]
    and_no_more: bool = False


@dataclass(frozen=True)
class ExpectationDocument:
    """Top-level expectation file aggregate."""

    path: Path
    type_field: str
    expectations: tuple[Expectation, ...]
