"""Expectation file loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from event_matchers.event_fields import DEFAULT_TYPE_FIELD

from .expectation_models import (
    Expectation,
    ExpectationDocument,
    ExpectationMode,
    ExpectedEventSpec,
)

_LOGGER = logging.getLogger(__name__)

_MODE_NAMES = ", ".join(mode.value for mode in ExpectationMode)


class ExpectationFileError(Exception):
    """Raised when the expectation file is invalid."""


def load_expectations(expectations_path: Path | str) -> ExpectationDocument:
    """Load and validate an expectation file."""
    path = Path(expectations_path)
    if not path.exists():
        raise ExpectationFileError(f"Expectation file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ExpectationFileError(f"{path}: not valid UTF-8: {exc.reason}") from exc

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ExpectationFileError(f"Failed to parse expectation file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ExpectationFileError("Expectation file root must be a mapping.")

    type_field = _parse_matching_section(parsed.get("matching"))
    expectations = _parse_expectations(parsed.get("expectations"))
    _LOGGER.debug("Loaded %d expectations from %s", len(expectations), path)
    return ExpectationDocument(path=path, type_field=type_field, expectations=expectations)


def _parse_matching_section(value: Any) -> str:
    if value is None:
        return DEFAULT_TYPE_FIELD
    if not isinstance(value, Mapping):
        raise ExpectationFileError("matching must be a mapping.")
    type_field = value.get("type_field", DEFAULT_TYPE_FIELD)
    return _require_non_empty_string(type_field, "matching.type_field")


def _parse_expectations(value: Any) -> tuple[Expectation, ...]:
    if not _is_list(value) or not value:
        raise ExpectationFileError("expectations must be a non-empty list.")
    expectations = tuple(
        _parse_expectation(item, f"expectations[{index}]") for index, item in enumerate(value)
    )
    seen_names: set[str] = set()
    for expectation in expectations:
        if expectation.name in seen_names:
            raise ExpectationFileError(f"Duplicate expectation name: {expectation.name}")
        seen_names.add(expectation.name)
    return expectations


def _parse_expectation(value: Any, label: str) -> Expectation:
    if not isinstance(value, Mapping):
        raise ExpectationFileError(f"{label} must be a mapping.")
    name = _require_non_empty_string(value.get("name"), f"{label}.name")
    mode = _parse_mode(value.get("mode"), f"{label}.mode")
    and_no_more = value.get("and_no_more", False)
    if not isinstance(and_no_more, bool):
        raise ExpectationFileError(f"{label}.and_no_more must be a boolean.")
    if and_no_more and mode != ExpectationMode.EXACT_SEQUENCE:
        raise ExpectationFileError(
            f"{label}.and_no_more is only supported with mode "
            f"{ExpectationMode.EXACT_SEQUENCE.value}."
        )

    raw_events = value.get("events")
    if mode == ExpectationMode.NOTHING:
        if raw_events:
            raise ExpectationFileError(f"{label}.events must be empty for mode nothing.")
        events: tuple[ExpectedEventSpec, ...] = ()
    else:
        if not _is_list(raw_events) or not raw_events:
            raise ExpectationFileError(f"{label}.events must be a non-empty list.")
        events = tuple(
            _parse_expected_event(item, f"{label}.events[{index}]")
            for index, item in enumerate(raw_events)
        )
    return Expectation(name=name, mode=mode, events=events, and_no_more=and_no_more)


def _parse_mode(value: Any, label: str) -> ExpectationMode:
    raw = _require_non_empty_string(value, label).lower()
    try:
        return ExpectationMode(raw)
    except ValueError as exc:
        raise ExpectationFileError(f"{label} must be one of {_MODE_NAMES}.") from exc


def _parse_expected_event(value: Any, label: str) -> ExpectedEventSpec:
    if value is None:
        return ExpectedEventSpec(type_name=None, fields={})
    if not isinstance(value, Mapping):
        raise ExpectationFileError(f"{label} must be a mapping.")
    unknown_keys = sorted(str(key) for key in value if key not in ("type", "fields"))
    if unknown_keys:
        raise ExpectationFileError(f"{label} has unknown keys: {', '.join(unknown_keys)}")
    type_value = value.get("type")
    type_name = (
        None if type_value is None else _require_non_empty_string(type_value, f"{label}.type")
    )
    fields = value.get("fields") or {}
    if not isinstance(fields, Mapping):
        raise ExpectationFileError(f"{label}.fields must be a mapping.")
    return ExpectedEventSpec(
        type_name=type_name,
        fields={str(key): field_value for key, field_value in fields.items()},
    )


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes)


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ExpectationFileError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ExpectationFileError(f"{field_name} must not be empty.")
    return stripped
