"""Factory functions for event list matchers.

Typical use in a test::

    assert_that(
        recorded_events,
        exact_sequence_of(equal_event(OrderCreated("42")), instance_of(OrderPaid), and_no_more()),
    )

Event matchers may be any PyHamcrest matcher; plain values are compared with
``equal_to``.
"""

from __future__ import annotations

from typing import Any

from hamcrest.core.matcher import Matcher

from .nothing_matcher import NullOrVoidMatcher
from .presence_matchers import ListWithAllOfMatcher, ListWithAnyOfMatcher
from .sequence_matchers import ExactSequenceOfEventsMatcher, SequenceOfEventsMatcher


def list_with_all_of(*matchers: Matcher[Any] | object) -> ListWithAllOfMatcher:
    """Match a list where every matcher matches at least one of its events."""
    return ListWithAllOfMatcher(*matchers)


def list_with_any_of(*matchers: Matcher[Any] | object) -> ListWithAnyOfMatcher:
    """Match a list where at least one matcher matches any of its events."""
    return ListWithAnyOfMatcher(*matchers)


def sequence_of(*matchers: Matcher[Any] | object) -> SequenceOfEventsMatcher:
    """Match a list where each matcher matches an event after the previous match.

    Gaps of unmatched events are allowed. Use ``exact_sequence_of`` to match
    position for position.
    """
    return SequenceOfEventsMatcher(*matchers)


def exact_sequence_of(*matchers: Matcher[Any] | object) -> ExactSequenceOfEventsMatcher:
    """Match a list where matcher N matches the event at index N.

    Excess events are ignored. Excess matchers are evaluated against
    ``ABSENT``; append ``and_no_more()`` to make sure no events remain.
    """
    return ExactSequenceOfEventsMatcher(*matchers)


def and_no_more() -> Matcher[Any]:
    """Match "nothing"; closes an exact sequence so no trailing events remain."""
    return nothing()


def nothing() -> Matcher[Any]:
    """Match ``ABSENT``, ``None`` or an empty list of events."""
    return NullOrVoidMatcher()
