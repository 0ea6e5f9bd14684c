"""Nothing matcher tests."""

from __future__ import annotations

from dataclasses import dataclass

from event_matchers.list_matching import ABSENT, and_no_more, nothing
from hamcrest.core.string_description import StringDescription


@dataclass(frozen=True)
class OrderCreated:
    order_id: str


def test_nothing_matches_absent_none_and_empty_lists() -> None:
    matcher = nothing()

    assert matcher.matches(ABSENT)
    assert matcher.matches(None)
    assert matcher.matches([])
    assert matcher.matches(())


def test_nothing_rejects_concrete_events() -> None:
    matcher = nothing()

    assert not matcher.matches(OrderCreated("42"))
    assert not matcher.matches({"type": "OrderCreated"})
    assert not matcher.matches("")
    assert not matcher.matches(0)
    assert not matcher.matches([OrderCreated("42")])


def test_and_no_more_behaves_like_nothing() -> None:
    for candidate in (ABSENT, None, [], OrderCreated("42"), ["x"]):
        assert and_no_more().matches(candidate) is nothing().matches(candidate)


def test_nothing_describes_itself_and_the_rejected_value() -> None:
    description = StringDescription()
    nothing().describe_to(description)
    mismatch = StringDescription()
    nothing().describe_mismatch("paid", mismatch)

    assert str(description) == "nothing"
    assert str(mismatch) == "was 'paid'"
