"""Verification run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class VerificationRequest:
    """Input contract for verifying one event log."""

    expectations_path: str
    events_path: str


@dataclass(frozen=True)
class ExpectationResult:
    """Outcome of one expectation against the recorded events."""

    name: str
    passed: bool
    description: str
    mismatch: str = ""


@dataclass(frozen=True)
class VerificationOutcome:
    """Output contract for one completed verification."""

    expectations_path: Path
    events_path: Path
    event_count: int
    results: tuple[ExpectationResult, ...]

    @property
    def failed_results(self) -> tuple[ExpectationResult, ...]:
        return tuple(result for result in self.results if not result.passed)

    @property
    def all_passed(self) -> bool:
        """Return True when no expectation failed."""
        return not self.failed_results
