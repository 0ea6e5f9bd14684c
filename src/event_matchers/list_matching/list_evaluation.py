"""Shared base for matchers evaluated against a whole list of events."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description
from hamcrest.core.helpers.wrap_matcher import wrap_matcher
from hamcrest.core.matcher import Matcher
from hamcrest.core.string_description import StringDescription

from .absent_values import is_event_list

_FAILED_MARKER = " (FAILED!)"


@dataclass(frozen=True)
class ListEvaluation:
    """Result of evaluating one list matcher against one list of events."""

    matched: bool
    failed_indexes: tuple[int, ...] = ()
    detail: str = ""

    @classmethod
    def success(cls) -> ListEvaluation:
        return cls(matched=True)


class EventListMatcher(BaseMatcher[Sequence[Any]], ABC):
    """Base class for matchers that apply event matchers to a list of events.

    Subclasses implement ``_evaluate``. Evaluation keeps all progress in local
    state, so one matcher instance may be reused across lists and threads.
    """

    _description_prefix = "list of events"
    _last_separator = "and"

    def __init__(self, *matchers: Matcher[Any] | object) -> None:
        self._matchers: tuple[Matcher[Any], ...] = tuple(
            wrap_matcher(matcher) for matcher in matchers
        )

    @property
    def matchers(self) -> tuple[Matcher[Any], ...]:
        """Event matchers in the order they were given."""
        return self._matchers

    def _matches(self, item: Any) -> bool:
        if not is_event_list(item):
            return False
        return self._evaluate(item).matched

    @abstractmethod
    def _evaluate(self, events: Sequence[Any]) -> ListEvaluation:
        """Evaluate the event matchers against one list of events."""

    def describe_to(self, description: Description) -> None:
        self._describe_matchers(description, failed_indexes=())

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        if not is_event_list(item):
            mismatch_description.append_text("was not a list of events: ")
            mismatch_description.append_description_of(item)
            return
        evaluation = self._evaluate(item)
        if evaluation.matched:
            super().describe_mismatch(item, mismatch_description)
            return
        self._describe_matchers(mismatch_description, failed_indexes=evaluation.failed_indexes)
        if evaluation.detail:
            mismatch_description.append_text("; ").append_text(evaluation.detail)

    def _describe_matchers(
        self, description: Description, *, failed_indexes: Sequence[int]
    ) -> None:
        if not self._matchers:
            description.append_text(f"{self._description_prefix} (no matchers)")
            return
        description.append_text(f"{self._description_prefix}: ")
        last_index = len(self._matchers) - 1
        for index, matcher in enumerate(self._matchers):
            if index == last_index and index > 0:
                description.append_text(f" {self._last_separator} ")
            elif index > 0:
                description.append_text(", ")
            description.append_description_of(matcher)
            if index in failed_indexes:
                description.append_text(_FAILED_MARKER)


def describe_matcher(matcher: Matcher[Any]) -> str:
    """Render a matcher's self-description as plain text."""
    description = StringDescription()
    description.append_description_of(matcher)
    return str(description)


def describe_matcher_mismatch(matcher: Matcher[Any], item: Any) -> str:
    """Render why ``matcher`` rejects ``item`` as plain text."""
    description = StringDescription()
    matcher.describe_mismatch(item, description)
    return str(description)
