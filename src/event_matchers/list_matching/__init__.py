"""Event list matching exports."""

from .absent_values import ABSENT, AbsentValue, is_absent, is_event_list
from .list_evaluation import EventListMatcher, ListEvaluation
from .matcher_factory import (
    and_no_more,
    exact_sequence_of,
    list_with_all_of,
    list_with_any_of,
    nothing,
    sequence_of,
)
from .nothing_matcher import NullOrVoidMatcher
from .presence_matchers import ListWithAllOfMatcher, ListWithAnyOfMatcher
from .sequence_matchers import ExactSequenceOfEventsMatcher, SequenceOfEventsMatcher

__all__ = [
    "ABSENT",
    "AbsentValue",
    "is_absent",
    "is_event_list",
    "EventListMatcher",
    "ListEvaluation",
    "ListWithAllOfMatcher",
    "ListWithAnyOfMatcher",
    "SequenceOfEventsMatcher",
    "ExactSequenceOfEventsMatcher",
    "NullOrVoidMatcher",
    "list_with_all_of",
    "list_with_any_of",
    "sequence_of",
    "exact_sequence_of",
    "and_no_more",
    "nothing",
]
