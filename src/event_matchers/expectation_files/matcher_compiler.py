"""Translate expectation entities into event list matchers."""

from __future__ import annotations

from typing import Any

from hamcrest import all_of, anything, has_entries, has_entry
from hamcrest.core.matcher import Matcher

from event_matchers.list_matching import (
    and_no_more,
    exact_sequence_of,
    list_with_all_of,
    list_with_any_of,
    nothing,
    sequence_of,
)

from .expectation_models import Expectation, ExpectationMode, ExpectedEventSpec


def compile_expectation(expectation: Expectation, type_field: str) -> Matcher[Any]:
    """Build the list matcher described by one expectation."""
    expected_event_matchers = [
        compile_expected_event(spec, type_field) for spec in expectation.events
    ]
    if expectation.mode == ExpectationMode.ALL_OF:
        return list_with_all_of(*expected_event_matchers)
    if expectation.mode == ExpectationMode.ANY_OF:
        return list_with_any_of(*expected_event_matchers)
    if expectation.mode == ExpectationMode.SEQUENCE:
        return sequence_of(*expected_event_matchers)
    if expectation.mode == ExpectationMode.EXACT_SEQUENCE:
        if expectation.and_no_more:
            expected_event_matchers.append(and_no_more())
        return exact_sequence_of(*expected_event_matchers)
    return nothing()


def compile_expected_event(spec: ExpectedEventSpec, type_field: str) -> Matcher[Any]:
    """Build the matcher for one expected mapping event."""
    if spec.type_name is not None and spec.fields:
        return all_of(has_entry(type_field, spec.type_name), has_entries(dict(spec.fields)))
    if spec.type_name is not None:
        return has_entry(type_field, spec.type_name)
    if spec.fields:
        return has_entries(dict(spec.fields))
    return anything()
