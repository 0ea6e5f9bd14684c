"""Matcher for the type of a single event."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description

from event_matchers.list_matching.absent_values import is_absent

from .field_extraction import event_type_name

DEFAULT_TYPE_FIELD = "type"


class EventTypeMatcher(BaseMatcher[Any]):
    """Matches events by class, or by type name for mapping events."""

    def __init__(self, event_type: type | str, type_field: str = DEFAULT_TYPE_FIELD) -> None:
        self._event_type = event_type
        self._type_field = type_field

    def _matches(self, item: Any) -> bool:
        if is_absent(item):
            return False
        if isinstance(self._event_type, type):
            return isinstance(item, self._event_type)
        if isinstance(item, Mapping):
            return item.get(self._type_field) == self._event_type
        return event_type_name(item) == self._event_type

    def describe_to(self, description: Description) -> None:
        description.append_text(f"event of type <{self._type_name}>")

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        if isinstance(item, Mapping) and not isinstance(self._event_type, type):
            if self._type_field not in item:
                mismatch_description.append_text(f"had no '{self._type_field}' field")
                return
            mismatch_description.append_text(f"had {self._type_field} ")
            mismatch_description.append_description_of(item[self._type_field])
            return
        if is_absent(item):
            mismatch_description.append_text(f"was <{item}>")
            return
        mismatch_description.append_text(f"was <{event_type_name(item)}>")

    @property
    def _type_name(self) -> str:
        if isinstance(self._event_type, type):
            return self._event_type.__name__
        return self._event_type


def event_of_type(
    event_type: type | str, *, type_field: str = DEFAULT_TYPE_FIELD
) -> EventTypeMatcher:
    """Match events that are instances of ``event_type``.

    A string names the type instead: mapping events match on their
    ``type_field`` entry, other events on their class name.
    """
    return EventTypeMatcher(event_type, type_field=type_field)
