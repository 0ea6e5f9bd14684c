"""Matcher for the absence of events."""

from __future__ import annotations

from typing import Any

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description

from .absent_values import is_absent, is_event_list


class NullOrVoidMatcher(BaseMatcher[Any]):
    """Matches ``ABSENT``, ``None`` or an empty list of events."""

    def _matches(self, item: Any) -> bool:
        if is_absent(item):
            return True
        return is_event_list(item) and len(item) == 0

    def describe_to(self, description: Description) -> None:
        description.append_text("nothing")
