"""Field-by-field equality matcher for single events."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description

from event_matchers.list_matching.absent_values import is_absent

from .field_extraction import MISSING, event_fields, event_type_name


@dataclass(frozen=True)
class _TypeDifference:
    actual_type: str
    expected_type: str


@dataclass(frozen=True)
class _FieldDifference:
    field: str
    actual: object
    expected: object


class EqualEventMatcher(BaseMatcher[Any]):
    """Matches events of the expected type whose fields all equal the expected event's."""

    def __init__(self, expected: object, ignored_fields: Iterable[str] = ()) -> None:
        self._expected = expected
        self._ignored_fields = frozenset(ignored_fields)

    def _matches(self, item: Any) -> bool:
        return self._first_difference(item) is None

    def describe_to(self, description: Description) -> None:
        description.append_text("event equal to ").append_description_of(self._expected)
        if self._ignored_fields:
            ignored = ", ".join(sorted(self._ignored_fields))
            description.append_text(f" ignoring fields [{ignored}]")

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        difference = self._first_difference(item)
        if isinstance(difference, _TypeDifference):
            mismatch_description.append_text(
                f"was <{difference.actual_type}> instead of <{difference.expected_type}>"
            )
        elif isinstance(difference, _FieldDifference):
            mismatch_description.append_text(f"field '{difference.field}' was ")
            mismatch_description.append_description_of(difference.actual)
            mismatch_description.append_text(", expected ")
            mismatch_description.append_description_of(difference.expected)
        else:
            super().describe_mismatch(item, mismatch_description)

    def _first_difference(self, item: Any) -> _TypeDifference | _FieldDifference | None:
        if is_absent(item) and is_absent(self._expected):
            return None
        if is_absent(item):
            return _TypeDifference(actual_type=str(item), expected_type=self._expected_type)
        if type(item) is not type(self._expected):
            return _TypeDifference(
                actual_type=event_type_name(item), expected_type=self._expected_type
            )

        expected_fields = event_fields(self._expected)
        actual_fields = event_fields(item)
        if not expected_fields and not actual_fields:
            if item == self._expected:
                return None
            return _FieldDifference(field="value", actual=item, expected=self._expected)

        extra_names = sorted(set(actual_fields) - set(expected_fields), key=repr)
        for name in [*expected_fields, *extra_names]:
            if name in self._ignored_fields:
                continue
            expected_value = expected_fields.get(name, MISSING)
            actual_value = actual_fields.get(name, MISSING)
            if actual_value != expected_value:
                return _FieldDifference(
                    field=str(name), actual=actual_value, expected=expected_value
                )
        return None

    @property
    def _expected_type(self) -> str:
        return event_type_name(self._expected)


def equal_event(expected: object, *, ignored_fields: Iterable[str] = ()) -> EqualEventMatcher:
    """Match an event equal to ``expected`` field by field.

    ``equal_event(None)`` matches ``None`` and ``ABSENT``.

    Args:
      expected: The event the candidate is compared with.
      ignored_fields: Field names left out of the comparison, such as generated
        identifiers or timestamps.
    """
    return EqualEventMatcher(expected, ignored_fields=ignored_fields)
