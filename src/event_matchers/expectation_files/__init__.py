"""Expectation file domain exports."""

from .expectation_models import (
    Expectation,
    ExpectationDocument,
    ExpectationMode,
    ExpectedEventSpec,
)
from .loader import ExpectationFileError, load_expectations
from .matcher_compiler import compile_expectation, compile_expected_event
from .scaffold_builder import (
    DEFAULT_EXPECTATIONS_FILENAME,
    build_placeholder_expectations,
    write_placeholder_expectations,
)

__all__ = [
    "Expectation",
    "ExpectationDocument",
    "ExpectationMode",
    "ExpectedEventSpec",
    "ExpectationFileError",
    "load_expectations",
    "compile_expectation",
    "compile_expected_event",
    "DEFAULT_EXPECTATIONS_FILENAME",
    "build_placeholder_expectations",
    "write_placeholder_expectations",
]
