"""Expectation file scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_EXPECTATIONS_FILENAME = "expectations.yaml"

_EXPECTATIONS_SCAFFOLD_TEMPLATE = """# Expectation file template for event-matchers.
# Replace every <REQUIRED> placeholder before running verify.
# Replace <OPTIONAL> placeholders only when your event log needs them.

matching:
  # Event field holding the event type name. Defaults to "type".
  type_field: "type"

expectations:
  - name: "<REQUIRED>"
    # One of: all_of, any_of, sequence, exact_sequence, nothing.
    #   all_of          every expected event occurs somewhere in the log
    #   any_of          at least one expected event occurs in the log
    #   sequence        expected events occur in this order, other events may sit between them
    #   exact_sequence  expected event N is recorded event N
    #   nothing         the log holds no events (leave events out)
    mode: "exact_sequence"
    # exact_sequence only: fail when events remain after the last expected event.
    and_no_more: true
    events:
      - type: "<REQUIRED>"
        fields:
          "<OPTIONAL>": "<OPTIONAL>"
"""


def build_placeholder_expectations() -> str:
    """Build a YAML expectation file template with placeholders and inline guidance."""
    return _EXPECTATIONS_SCAFFOLD_TEMPLATE


def write_placeholder_expectations(output_path: Path | str) -> Path:
    """Write the placeholder expectation template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Expectation file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_expectations(), encoding="utf-8")
    return destination.resolve()
