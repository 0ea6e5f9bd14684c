"""Single-event matcher exports."""

from .equal_event_matcher import EqualEventMatcher, equal_event
from .event_type_matcher import DEFAULT_TYPE_FIELD, EventTypeMatcher, event_of_type
from .field_extraction import MISSING, event_fields

__all__ = [
    "EqualEventMatcher",
    "EventTypeMatcher",
    "DEFAULT_TYPE_FIELD",
    "MISSING",
    "equal_event",
    "event_of_type",
    "event_fields",
]
