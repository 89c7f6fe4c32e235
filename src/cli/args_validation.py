"""Command-line argument validation.

Both path arguments are checked and every violation is returned, so the
user sees all argument problems at once.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import ANALYSIS_CONFIG_EXTENSIONS
from core.errors import NaifuruCliError


def collect_args_errors(input_file_path: Path, output_dir_path: Path) -> list[NaifuruCliError]:
    """Validate the input config path and the output directory path.

    Args:
        input_file_path: Analysis config file given with ``-i``.
        output_dir_path: Output directory given with ``-o``.

    Returns:
        Violations in argument order. Empty when both paths are valid.
    """
    errors: list[NaifuruCliError] = []
    input_error = _validate_input_file_path(input_file_path)
    if input_error is not None:
        errors.append(input_error)
    output_error = _validate_output_dir_path(output_dir_path)
    if output_error is not None:
        errors.append(output_error)
    return errors


def _validate_input_file_path(path: Path) -> NaifuruCliError | None:
    if not path.exists():
        return NaifuruCliError(
            "path_does_not_exist", f"The specified path doesn't exist: '{path}'"
        )
    if not path.is_file():
        return NaifuruCliError("path_is_not_file", f"The given path is not a file: '{path}'")
    if not path.suffix or path.suffix == ".":
        return NaifuruCliError("no_extension", f"Couldn't find a file extension for: '{path}'")
    extension = path.suffix[1:].lower()
    if extension not in ANALYSIS_CONFIG_EXTENSIONS:
        return NaifuruCliError(
            "invalid_extension",
            f"Unsupported file extension: '{extension}'. "
            f"Supported types are: {', '.join(ANALYSIS_CONFIG_EXTENSIONS)}",
        )
    return None


def _validate_output_dir_path(path: Path) -> NaifuruCliError | None:
    if not path.exists():
        return NaifuruCliError(
            "path_does_not_exist", f"The specified path doesn't exist: '{path}'"
        )
    if not path.is_dir():
        return NaifuruCliError(
            "path_is_not_directory", f"The given path is not a directory: '{path}'"
        )
    return None
