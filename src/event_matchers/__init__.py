"""Composable matchers for asserting ordered lists of domain events."""

import logging

from .event_fields import equal_event, event_of_type
from .list_matching import (
    ABSENT,
    and_no_more,
    exact_sequence_of,
    list_with_all_of,
    list_with_any_of,
    nothing,
    sequence_of,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ABSENT",
    "list_with_all_of",
    "list_with_any_of",
    "sequence_of",
    "exact_sequence_of",
    "and_no_more",
    "nothing",
    "equal_event",
    "event_of_type",
]
