"""Command line interface entry point."""

from __future__ import annotations

import sys
import textwrap

import click

from event_matchers.expectation_files import (
    DEFAULT_EXPECTATIONS_FILENAME,
    write_placeholder_expectations,
)
from event_matchers.verification import (
    ExpectationResult,
    VerificationError,
    VerificationRequest,
    verify_event_log,
)

_DETAIL_INDENT = "    "


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="event-matchers")
def cli() -> None:
    """Verify recorded domain events against expectation files."""


@cli.command(name="generate-expectations")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_EXPECTATIONS_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML expectation file template to write",
)
def generate_expectations(output_path: str) -> None:
    """Generate a placeholder YAML expectation file with guidance comments."""
    try:
        resolved_output = write_placeholder_expectations(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="verify")
@click.option(
    "--expectations",
    "expectations_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON expectation file",
)
@click.option(
    "--events",
    "events_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the recorded event log (.jsonl, .ndjson, .json, .yaml, .yml)",
)
def verify(expectations_path: str, events_path: str) -> None:
    """Check every expectation against the recorded event log."""
    try:
        outcome = verify_event_log(
            VerificationRequest(expectations_path=expectations_path, events_path=events_path)
        )
    except VerificationError as exc:
        raise CliError(str(exc)) from exc

    for result in outcome.results:
        _echo_result(result)
    failed = len(outcome.failed_results)
    click.echo(
        f"{len(outcome.results)} expectations, {failed} failed "
        f"({outcome.event_count} events checked)"
    )
    if failed:
        raise CliError(f"{failed} of {len(outcome.results)} expectations failed.")


def _echo_result(result: ExpectationResult) -> None:
    if result.passed:
        click.echo(f"PASS {result.name}")
        return
    click.echo(f"FAIL {result.name}")
    click.echo(textwrap.indent(f"expected: {result.description}", _DETAIL_INDENT))
    click.echo(textwrap.indent(f"but: {result.mismatch}", _DETAIL_INDENT))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
