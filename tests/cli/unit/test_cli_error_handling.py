"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from event_matchers.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["verify", "--events", "/tmp/events.jsonl"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--expectations" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["verify", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_input_file_returns_error_without_traceback(tmp_path: Path, capsys) -> None:
    exit_code = main(
        [
            "verify",
            "--expectations",
            str(tmp_path / "missing.yaml"),
            "--events",
            str(tmp_path / "events.jsonl"),
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Expectation file not found" in captured.err
    assert "Traceback" not in captured.err


def test_generate_expectations_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    destination = tmp_path / "expectations.yaml"
    destination.write_text("keep", encoding="utf-8")

    exit_code = main(["generate-expectations", "--output", str(destination)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err


def test_non_utf8_inputs_return_error_without_traceback(tmp_path: Path, capsys) -> None:
    expectations_path = tmp_path / "expectations.yaml"
    expectations_path.write_text(
        "expectations:\n  - name: a\n    mode: all_of\n    events: [~]\n", encoding="utf-8"
    )
    events_path = tmp_path / "events.jsonl"
    events_path.write_bytes(b'{"type": "A\xff"}\n')
    broken_expectations_path = tmp_path / "broken.yaml"
    broken_expectations_path.write_bytes(b"expectations: \xff\n")

    events_exit = main(
        ["verify", "--expectations", str(expectations_path), "--events", str(events_path)]
    )
    events_err = capsys.readouterr().err
    expectations_exit = main(
        ["verify", "--expectations", str(broken_expectations_path), "--events", str(events_path)]
    )
    expectations_err = capsys.readouterr().err

    assert events_exit == 1
    assert "not valid UTF-8" in events_err
    assert "Traceback" not in events_err
    assert expectations_exit == 1
    assert "not valid UTF-8" in expectations_err
    assert "Traceback" not in expectations_err
