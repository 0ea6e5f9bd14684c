"""Event log entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RecordedEvent:
    """One event read from an event log, with its position in the log."""

    position: int
    payload: Mapping[str, Any]
