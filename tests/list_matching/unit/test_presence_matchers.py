"""Presence matcher tests."""

from __future__ import annotations

from event_matchers.list_matching import list_with_all_of, list_with_any_of
from hamcrest import assert_that, equal_to, instance_of, is_not, starts_with
from hamcrest.core.string_description import StringDescription


def _describe(matcher) -> str:
    description = StringDescription()
    matcher.describe_to(description)
    return str(description)


def _mismatch(matcher, item) -> str:
    description = StringDescription()
    matcher.describe_mismatch(item, description)
    return str(description)


def test_all_of_matches_when_every_matcher_finds_an_event() -> None:
    matcher = list_with_all_of(equal_to("created"), equal_to("paid"))

    assert matcher.matches(["paid", "shipped", "created"])


def test_all_of_allows_one_event_to_satisfy_several_matchers() -> None:
    matcher = list_with_all_of(instance_of(str), starts_with("cr"), equal_to("created"))

    assert matcher.matches(["created"])


def test_all_of_fails_when_one_matcher_finds_no_event() -> None:
    matcher = list_with_all_of("created", "refunded")

    assert not matcher.matches(["created", "paid"])


def test_all_of_without_matchers_matches_any_list() -> None:
    assert list_with_all_of().matches([])
    assert list_with_all_of().matches(["created"])


def test_all_of_with_matchers_does_not_match_empty_list() -> None:
    assert not list_with_all_of("created").matches([])


def test_all_of_describes_matchers_with_and_separator() -> None:
    matcher = list_with_all_of("a", "b", "c")

    assert _describe(matcher) == "list with all of: 'a', 'b' and 'c'"


def test_all_of_mismatch_marks_every_failed_matcher() -> None:
    matcher = list_with_all_of("a", "b", "c")

    assert _mismatch(matcher, ["a"]) == (
        "list with all of: 'a', 'b' (FAILED!) and 'c' (FAILED!); "
        "2 of 3 matchers matched none of the 1 events"
    )


def test_any_of_matches_when_one_matcher_finds_an_event() -> None:
    matcher = list_with_any_of("refunded", "paid")

    assert_that(["created", "paid"], matcher)


def test_any_of_fails_when_no_matcher_finds_an_event() -> None:
    assert_that(["created"], is_not(list_with_any_of("refunded", "paid")))


def test_any_of_without_matchers_never_matches() -> None:
    assert not list_with_any_of().matches([])
    assert not list_with_any_of().matches(["created"])


def test_any_of_mismatch_marks_all_matchers_and_uses_or_separator() -> None:
    matcher = list_with_any_of("x", "y")

    assert _describe(matcher) == "list with any of: 'x' or 'y'"
    assert _mismatch(matcher, ["a"]) == (
        "list with any of: 'x' (FAILED!) or 'y' (FAILED!); "
        "none of the 1 events matched any matcher"
    )


def test_presence_matchers_reject_values_that_are_not_event_lists() -> None:
    matcher = list_with_all_of("a")

    assert not matcher.matches("a")
    assert not matcher.matches(None)
    assert _mismatch(matcher, "a") == "was not a list of events: 'a'"


def test_presence_matchers_accept_tuples() -> None:
    assert list_with_all_of("a", "b").matches(("b", "a"))
