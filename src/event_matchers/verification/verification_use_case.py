"""Use case for verifying a recorded event log against an expectation file."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from hamcrest.core.string_description import StringDescription

from event_matchers.event_logs import EventLogError, read_event_log
from event_matchers.expectation_files import (
    Expectation,
    ExpectationFileError,
    compile_expectation,
    load_expectations,
)

from .verification_contracts import ExpectationResult, VerificationOutcome, VerificationRequest

_LOGGER = logging.getLogger(__name__)


class VerificationError(Exception):
    """Raised when a verification cannot be carried out."""


def verify_event_log(request: VerificationRequest) -> VerificationOutcome:
    """Evaluate every expectation of the expectation file against the event log."""
    try:
        document = load_expectations(request.expectations_path)
        recorded_events = read_event_log(request.events_path)
    except (ExpectationFileError, EventLogError) as exc:
        raise VerificationError(str(exc)) from exc
    except OSError as exc:
        raise VerificationError(f"Failed to read input file: {exc}") from exc

    payloads = [event.payload for event in recorded_events]
    results = tuple(
        evaluate_expectation(expectation, payloads, document.type_field)
        for expectation in document.expectations
    )
    failed = sum(1 for result in results if not result.passed)
    _LOGGER.info(
        "Verified %d expectations against %d events, %d failed",
        len(results),
        len(payloads),
        failed,
    )
    return VerificationOutcome(
        expectations_path=Path(request.expectations_path).resolve(),
        events_path=Path(request.events_path).resolve(),
        event_count=len(payloads),
        results=results,
    )


def evaluate_expectation(
    expectation: Expectation, events: Sequence[Any], type_field: str
) -> ExpectationResult:
    """Evaluate one expectation and capture its descriptions."""
    matcher = compile_expectation(expectation, type_field)
    description = StringDescription()
    matcher.describe_to(description)
    if matcher.matches(events):
        _LOGGER.debug("Expectation '%s' passed", expectation.name)
        return ExpectationResult(
            name=expectation.name, passed=True, description=str(description)
        )

    mismatch = StringDescription()
    matcher.describe_mismatch(events, mismatch)
    _LOGGER.debug("Expectation '%s' failed: %s", expectation.name, mismatch)
    return ExpectationResult(
        name=expectation.name,
        passed=False,
        description=str(description),
        mismatch=str(mismatch),
    )
