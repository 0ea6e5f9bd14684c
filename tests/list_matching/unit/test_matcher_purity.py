"""Reuse and purity tests for event list matchers."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from event_matchers.list_matching import (
    EventListMatcher,
    and_no_more,
    exact_sequence_of,
    list_with_all_of,
    list_with_any_of,
    sequence_of,
)
from hamcrest.core.string_description import StringDescription


def _mismatch(matcher, item) -> str:
    description = StringDescription()
    matcher.describe_mismatch(item, description)
    return str(description)


def test_matchers_give_same_result_when_reused() -> None:
    matchers = (
        list_with_all_of("a", "b"),
        list_with_any_of("a", "z"),
        sequence_of("a", "b"),
        exact_sequence_of("a", "b", and_no_more()),
    )
    lists = (["a", "b"], ["b", "a"], ["z"], [])

    first_pass = [[matcher.matches(events) for events in lists] for matcher in matchers]
    second_pass = [[matcher.matches(events) for events in lists] for matcher in matchers]

    assert first_pass == second_pass


def test_mismatch_description_does_not_depend_on_previous_evaluations() -> None:
    matcher = sequence_of("a", "b")
    fresh = _mismatch(sequence_of("a", "b"), ["b"])

    assert matcher.matches(["a", "b"])
    assert not matcher.matches(["c"])
    assert _mismatch(matcher, ["b"]) == fresh


def test_evaluation_does_not_mutate_events() -> None:
    events = ["a", "c", "b"]

    exact_sequence_of("a", "b").matches(events)
    sequence_of("a", "b").matches(events)

    assert events == ["a", "c", "b"]


def test_one_matcher_can_be_evaluated_from_several_threads() -> None:
    matcher = exact_sequence_of("a", "b", and_no_more())
    lists = [["a", "b"], ["a", "b", "c"], ["b", "a"]] * 50

    with ThreadPoolExecutor(max_workers=4) as executor:
        results = list(executor.map(matcher.matches, lists))

    assert results == [True, False, False] * 50


def test_list_matcher_base_requires_an_evaluation() -> None:
    with pytest.raises(TypeError):
        EventListMatcher("a")
