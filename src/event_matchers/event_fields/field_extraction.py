"""Field access for opaque event values."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from enum import Enum
from typing import Any


class MissingField(Enum):
    """Marker for a field that one of two compared events does not have."""

    MISSING = "missing"

    def __str__(self) -> str:
        return "missing"


MISSING = MissingField.MISSING


def event_fields(event: object) -> dict[Any, Any]:
    """Return the named fields of an event.

    Dataclasses contribute their declared fields, mappings their keys as they are
    and plain objects their instance attributes. Other values have no fields.
    """
    if dataclasses.is_dataclass(event) and not isinstance(event, type):
        return {field.name: getattr(event, field.name) for field in dataclasses.fields(event)}
    if isinstance(event, Mapping):
        return dict(event.items())
    if hasattr(event, "__dict__"):
        return {
            name: value for name, value in vars(event).items() if not name.startswith("_")
        }
    return {}


def event_type_name(event: object) -> str:
    return type(event).__name__
