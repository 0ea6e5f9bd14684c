"""Event log reading service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .recorded_events import RecordedEvent

_LOGGER = logging.getLogger(__name__)

_JSON_LINES_SUFFIXES = frozenset({".jsonl", ".ndjson"})
_JSON_SUFFIXES = frozenset({".json"})
_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class EventLogError(Exception):
    """Raised when an event log cannot be read."""


def read_event_log(events_path: Path | str) -> tuple[RecordedEvent, ...]:
    """Read recorded events in log order.

    Supported formats are JSON lines (``.jsonl``/``.ndjson``), a JSON array
    (``.json``) and a YAML sequence (``.yaml``/``.yml``). Every event must be a
    mapping.
    """
    path = Path(events_path)
    if not path.exists():
        raise EventLogError(f"Event log not found: {path}")

    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise EventLogError(f"{path}: not valid UTF-8: {exc.reason}") from exc
    if suffix in _JSON_LINES_SUFFIXES:
        payloads = _parse_json_lines(text, path)
    elif suffix in _JSON_SUFFIXES:
        payloads = _parse_json_array(text, path)
    elif suffix in _YAML_SUFFIXES:
        payloads = _parse_yaml_sequence(text, path)
    else:
        raise EventLogError(
            f"Unsupported event log format '{suffix or path.name}'. "
            "Use .jsonl, .ndjson, .json, .yaml or .yml."
        )

    events = tuple(
        RecordedEvent(position=position, payload=payload)
        for position, payload in enumerate(payloads)
    )
    _LOGGER.debug("Read %d events from %s", len(events), path)
    return events


def _parse_json_lines(text: str, path: Path) -> list[Mapping[str, Any]]:
    payloads: list[Mapping[str, Any]] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            value = json.loads(line)
        except json.JSONDecodeError as exc:
            raise EventLogError(f"{path}:{line_number}: invalid JSON: {exc.msg}") from exc
        payloads.append(_require_event_mapping(value, f"{path}:{line_number}"))
    return payloads


def _parse_json_array(text: str, path: Path) -> list[Mapping[str, Any]]:
    try:
        value = json.loads(text)
    except json.JSONDecodeError as exc:
        raise EventLogError(f"{path}: invalid JSON: {exc}") from exc
    return _require_event_sequence(value, path)


def _parse_yaml_sequence(text: str, path: Path) -> list[Mapping[str, Any]]:
    try:
        value = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise EventLogError(f"{path}: invalid YAML: {exc}") from exc
    if value is None:
        return []
    return _require_event_sequence(value, path)


def _require_event_sequence(value: Any, path: Path) -> list[Mapping[str, Any]]:
    if not isinstance(value, Sequence) or isinstance(value, str | bytes):
        raise EventLogError(f"{path}: event log root must be a list of events.")
    return [
        _require_event_mapping(item, f"{path}: event {index}") for index, item in enumerate(value)
    ]


def _require_event_mapping(value: Any, label: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise EventLogError(f"{label}: event must be a mapping.")
    return value
