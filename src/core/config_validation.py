"""Semantic validation of analysis configs.

Every rule is checked for every plan and every error is collected, so a
user sees all problems of a config in one pass. Filesystem access is
limited to read-only existence checks.
"""

from __future__ import annotations

from core.errors import NaifuruConfigValidationError
from core.format_catalog import SUPPORTED_ACC_AXES, acceptable_extensions, is_multi_axis
from core.types import AnalysisConfig, ConversionConfig, FileConfig, GroupConfig


def collect_validation_errors(config: AnalysisConfig) -> list[NaifuruConfigValidationError]:
    """Validate every plan of an analysis config.

    Args:
        config: Parsed analysis config.

    Returns:
        All violations in plan order, followed by the duplicate-name
        violation when plan names collide. Empty when the config is valid.
    """
    errors: list[NaifuruConfigValidationError] = []
    for conversion in config.conversions:
        errors.extend(validate_conversion(conversion))
    duplicate_error = _validate_unique_names(config)
    if duplicate_error is not None:
        errors.append(duplicate_error)
    return errors


def validate_conversion(conversion: ConversionConfig) -> list[NaifuruConfigValidationError]:
    """Validate extensions, paths, and axis layout of one plan."""
    all_files = [file for group in conversion.groups for file in group.files]
    errors: list[NaifuruConfigValidationError] = []
    extensions = acceptable_extensions(conversion.source_format)
    for file in all_files:
        extension_error = _validate_extension(file, extensions)
        if extension_error is not None:
            errors.append(extension_error)
    for file in all_files:
        path_error = _validate_path(file)
        if path_error is not None:
            errors.append(path_error)
    for group_index, group in enumerate(conversion.groups):
        errors.extend(_validate_group_axes(conversion, group, group_index + 1))
    return errors


def _validate_extension(
    file: FileConfig,
    extensions: tuple[str, ...],
) -> NaifuruConfigValidationError | None:
    """Check a file extension against the accepted list.

    Args:
        file: File entry to check.
        extensions: Lowercase extensions accepted by the plan format.

    Returns:
        A validation error, or ``None`` when the extension is accepted.
    """
    suffix = file.path.suffix
    if not suffix or suffix == ".":
        return NaifuruConfigValidationError(
            "no_extension", f"Couldn't find a file extension for: '{file.path}'"
        )
    extension = suffix[1:].lower()
    if extension not in extensions:
        return NaifuruConfigValidationError(
            "invalid_extension",
            f"Unsupported file extension: '{extension}'. Expected one of: {', '.join(extensions)}",
        )
    return None


def _validate_path(file: FileConfig) -> NaifuruConfigValidationError | None:
    """Check that a file entry points at an existing regular file.

    Args:
        file: File entry to check.

    Returns:
        A validation error, or ``None`` when the path is a file.
    """
    if not file.path.exists():
        return NaifuruConfigValidationError(
            "path_does_not_exist", f"The specified path doesn't exist: '{file.path}'"
        )
    if not file.path.is_file():
        return NaifuruConfigValidationError(
            "path_is_not_file", f"This path isn't a file: '{file.path}'"
        )
    return None


def _validate_group_axes(
    conversion: ConversionConfig,
    group: GroupConfig,
    group_id: int,
) -> list[NaifuruConfigValidationError]:
    """Check the acceleration-axis layout of one group.

    Args:
        conversion: Plan owning the group.
        group: Group to check.
        group_id: One-based group number used in messages.

    Returns:
        Axis violations of the group. Single-axis formats reject any axis;
        multi-axis formats need each of ns, ew, and ud exactly once.
    """
    if not is_multi_axis(conversion.source_format):
        return [
            NaifuruConfigValidationError(
                "mismatched_acc_axis",
                f"The format '{conversion.source_format}' doesn't expect 'acc_axis', "
                f"but it was set (name: '{conversion.name}', id: {group_id})",
            )
            for file in group.files
            if file.acc_axis is not None
        ]
    errors: list[NaifuruConfigValidationError] = []
    required_axes = list(SUPPORTED_ACC_AXES)
    for file in group.files:
        if file.acc_axis is None:
            errors.append(
                NaifuruConfigValidationError(
                    "required_acc_axis",
                    f"Missing 'acc_axis' information (name: '{conversion.name}', id: {group_id})",
                )
            )
        elif file.acc_axis in required_axes:
            required_axes.remove(file.acc_axis)
        else:
            errors.append(_all_axes_required_error(conversion, group_id))
    if required_axes and not errors:
        errors.append(_all_axes_required_error(conversion, group_id))
    return errors


def _all_axes_required_error(
    conversion: ConversionConfig,
    group_id: int,
) -> NaifuruConfigValidationError:
    """Build the error raised when a group lacks or repeats an axis."""
    return NaifuruConfigValidationError(
        "duplicate_acc_axis",
        f"The format '{conversion.source_format}' needs all three axes: 'ns', 'ew', and 'ud'. "
        f"Please check (name: '{conversion.name}', id: {group_id})",
    )


def _validate_unique_names(config: AnalysisConfig) -> NaifuruConfigValidationError | None:
    """Find the first plan name that repeats an earlier one.

    Args:
        config: Parsed analysis config.

    Returns:
        A ``duplicate_names`` error, or ``None`` when every name is unique.
    """
    seen_names: set[str] = set()
    for conversion in config.conversions:
        if conversion.name in seen_names:
            return NaifuruConfigValidationError(
                "duplicate_names",
                "Duplicate conversion names found. Each name must be unique: "
                f"{conversion.name}",
            )
        seen_names.add(conversion.name)
    return None
