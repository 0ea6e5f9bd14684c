"""Order-independent presence matchers over lists of events."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from hamcrest.core.matcher import Matcher

from .list_evaluation import EventListMatcher, ListEvaluation


class ListWithAllOfMatcher(EventListMatcher):
    """Matches when every event matcher matches at least one event in the list.

    One event may satisfy several matchers.
    """

    _description_prefix = "list with all of"
    _last_separator = "and"

    def _evaluate(self, events: Sequence[Any]) -> ListEvaluation:
        failed_indexes = tuple(
            index
            for index, matcher in enumerate(self.matchers)
            if not _matches_any_event(matcher, events)
        )
        if not failed_indexes:
            return ListEvaluation.success()
        return ListEvaluation(
            matched=False,
            failed_indexes=failed_indexes,
            detail=(
                f"{len(failed_indexes)} of {len(self.matchers)} matchers "
                f"matched none of the {len(events)} events"
            ),
        )


class ListWithAnyOfMatcher(EventListMatcher):
    """Matches when at least one event matcher matches at least one event."""

    _description_prefix = "list with any of"
    _last_separator = "or"

    def _evaluate(self, events: Sequence[Any]) -> ListEvaluation:
        if any(_matches_any_event(matcher, events) for matcher in self.matchers):
            return ListEvaluation.success()
        return ListEvaluation(
            matched=False,
            failed_indexes=tuple(range(len(self.matchers))),
            detail=f"none of the {len(events)} events matched any matcher",
        )


def _matches_any_event(matcher: Matcher[Any], events: Sequence[Any]) -> bool:
    return any(matcher.matches(event) for event in events)
