"""Order-sensitive matchers over lists of events."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from hamcrest.core.matcher import Matcher

from .absent_values import ABSENT
from .list_evaluation import (
    EventListMatcher,
    ListEvaluation,
    describe_matcher,
    describe_matcher_mismatch,
)


class SequenceOfEventsMatcher(EventListMatcher):
    """Matches when the event matchers match events in increasing list order.

    Unmatched events may appear between the matched ones. The scan is greedy:
    each matcher takes the earliest event after the previous match, which finds
    an ordering whenever one exists.
    """

    _description_prefix = "list with sequence of"

    def _evaluate(self, events: Sequence[Any]) -> ListEvaluation:
        position = 0
        for index, matcher in enumerate(self.matchers):
            found = _first_match_from(matcher, events, position)
            if found is None:
                return ListEvaluation(
                    matched=False,
                    failed_indexes=(index,),
                    detail=_unsatisfied_detail(matcher, position),
                )
            position = found + 1
        return ListEvaluation.success()


class ExactSequenceOfEventsMatcher(EventListMatcher):
    """Matches when matcher N matches the event at index N for every matcher.

    Events beyond the last matcher are ignored. Matchers beyond the last event
    are evaluated against ``ABSENT``; append ``and_no_more()`` to require that
    no trailing events remain.
    """

    _description_prefix = "list with exact sequence of"

    def _evaluate(self, events: Sequence[Any]) -> ListEvaluation:
        for index, matcher in enumerate(self.matchers):
            candidate = events[index] if index < len(events) else ABSENT
            if matcher.matches(candidate):
                continue
            return ListEvaluation(
                matched=False,
                failed_indexes=(index,),
                detail=f"at index {index}: {describe_matcher_mismatch(matcher, candidate)}",
            )
        return ListEvaluation.success()


def _first_match_from(matcher: Matcher[Any], events: Sequence[Any], start: int) -> int | None:
    for index in range(start, len(events)):
        if matcher.matches(events[index]):
            return index
    return None


def _unsatisfied_detail(matcher: Matcher[Any], position: int) -> str:
    if position == 0:
        return f"no event matched {describe_matcher(matcher)}"
    return f"no event after index {position - 1} matched {describe_matcher(matcher)}"
