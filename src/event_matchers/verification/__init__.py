"""Verification run exports."""

from .verification_contracts import ExpectationResult, VerificationOutcome, VerificationRequest
from .verification_use_case import VerificationError, evaluate_expectation, verify_event_log

__all__ = [
    "ExpectationResult",
    "VerificationError",
    "VerificationOutcome",
    "VerificationRequest",
    "evaluate_expectation",
    "verify_event_log",
]
