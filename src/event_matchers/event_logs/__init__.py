"""Event log domain exports."""

from .event_log_reader import EventLogError, read_event_log
from .recorded_events import RecordedEvent

__all__ = [
    "EventLogError",
    "RecordedEvent",
    "read_event_log",
]
