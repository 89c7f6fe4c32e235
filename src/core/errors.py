"""Naifuru exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type carrying the process exit code
that the CLI reports, so scripts can branch on the failure class.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from core.constants import (
    EXIT_CODE_CLI,
    EXIT_CODE_CONFIG_PARSE,
    EXIT_CODE_CONFIG_VALIDATION,
    EXIT_CODE_DEFAULT,
    EXIT_CODE_EXTRACTION,
    EXIT_CODE_IO,
)

ArgsValidationKind = Literal[
    "no_extension",
    "invalid_extension",
    "path_does_not_exist",
    "path_is_not_file",
    "path_is_not_directory",
]
ConfigValidationKind = Literal[
    "no_extension",
    "invalid_extension",
    "path_does_not_exist",
    "path_is_not_file",
    "path_is_not_directory",
    "mismatched_acc_axis",
    "duplicate_acc_axis",
    "required_acc_axis",
    "duplicate_names",
]
DataExtractionKind = Literal[
    "endian_detection_failed",
    "format_unsupported",
    "missing_file_data",
    "failed_extraction",
    "pattern_not_matched",
]


class NaifuruError(Exception):
    """Base exception for all naifuru failures."""

    exit_code: int = EXIT_CODE_DEFAULT


class NaifuruCliError(NaifuruError):
    """Raised for invalid command-line arguments."""

    exit_code = EXIT_CODE_CLI

    def __init__(self, kind: ArgsValidationKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class NaifuruConfigValidationError(NaifuruError):
    """Raised for one violation found while validating an analysis config."""

    exit_code = EXIT_CODE_CONFIG_VALIDATION

    def __init__(self, kind: ConfigValidationKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class NaifuruConfigParseError(NaifuruError):
    """Raised when configuration text cannot be parsed into the typed schema."""

    exit_code = EXIT_CODE_CONFIG_PARSE


class NaifuruIoError(NaifuruError):
    """Raised when a configuration or recording file cannot be read."""

    exit_code = EXIT_CODE_IO


class NaifuruExtractionError(NaifuruError):
    """Raised when one field of one recording cannot be extracted.

    Attributes:
        kind: Extraction failure category.
        field: Name of the offending field or payload part.
        path: Source file path, when the failure is tied to a file.
    """

    exit_code = EXIT_CODE_EXTRACTION

    def __init__(
        self,
        kind: DataExtractionKind,
        field: str,
        path: Path | None = None,
    ) -> None:
        super().__init__(_render_extraction_message(kind, field, path))
        self.kind = kind
        self.field = field
        self.path = path


def _render_extraction_message(kind: DataExtractionKind, field: str, path: Path | None) -> str:
    location = str(path) if path is not None else "-"
    if kind == "endian_detection_failed":
        return f"Failed to determine endianness of '{field}': {location}"
    if kind == "format_unsupported":
        return f"'{field}' format is not supported yet: {location}"
    if kind == "missing_file_data":
        return f"'{field}' is missing: {location}"
    if kind == "pattern_not_matched":
        return (
            f"The extraction pattern of '{field}' was not matched, "
            f"the data format is invalid: {location}"
        )
    return f"Failed to extract '{field}': {location}"
