"""Typed analysis-config parsing for declarative conversions.

This module loads TOML analysis configs and maps them onto one strict
schema. Structural problems (unknown keys, wrong types, unknown format
names) are parse errors; semantic rules such as axis layout and unique plan
names belong to ``core.config_validation``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence, TypeVar, cast

import tomli

from core.errors import NaifuruConfigParseError, NaifuruIoError
from core.format_catalog import (
    SUPPORTED_ACC_AXES,
    SUPPORTED_NAME_FORMATS,
    SUPPORTED_SOURCE_FORMATS,
    SUPPORTED_TARGET_FORMATS,
)
from core.types import (
    AccAxis,
    AnalysisConfig,
    ConversionConfig,
    FileConfig,
    GlobalConfig,
    GroupConfig,
    NameFormat,
    SourceFormat,
    TargetFormat,
)

_ChoiceT = TypeVar("_ChoiceT", bound=str)


def load_analysis_config(config_path: str | Path) -> AnalysisConfig:
    """Load and parse a TOML analysis config from disk.

    Args:
        config_path: File path to the TOML analysis config.

    Returns:
        Parsed analysis config.

    Raises:
        NaifuruIoError: If the file cannot be read.
        NaifuruConfigParseError: If TOML syntax or schema checks fail.
    """
    config_file = Path(config_path).expanduser()
    try:
        config_text = config_file.read_text(encoding="utf-8")
    except OSError as error:
        raise NaifuruIoError(
            f"Failed to read analysis config at {config_file}: {error}. "
            "Check the path and file permissions."
        ) from error
    return parse_analysis_config_text(config_text, str(config_file))


def parse_analysis_config_text(config_text: str, source_name: str = "<string>") -> AnalysisConfig:
    """Parse TOML text into an analysis config.

    Args:
        config_text: Raw TOML document.
        source_name: Name used in error messages.

    Returns:
        Parsed analysis config.

    Raises:
        NaifuruConfigParseError: If TOML syntax or schema checks fail.
    """
    try:
        payload = tomli.loads(config_text)
    except tomli.TOMLDecodeError as error:
        raise NaifuruConfigParseError(
            f"Failed to parse TOML analysis config {source_name}: {error}. Fix TOML syntax."
        ) from error
    return parse_analysis_config(payload)


def parse_analysis_config(payload: object) -> AnalysisConfig:
    """Map a decoded TOML payload onto the typed schema.

    Args:
        payload: Decoded TOML document.

    Returns:
        Parsed analysis config.

    Raises:
        NaifuruConfigParseError: If the payload does not match the schema.
    """
    root_mapping = _expect_mapping(payload, "analysis config root")
    _validate_keys(root_mapping, {"global", "conversion"}, "analysis config root")
    global_config = _parse_global(root_mapping)
    conversions = _parse_conversions(root_mapping)
    return AnalysisConfig(global_config=global_config, conversions=conversions)


def _parse_global(root_mapping: Mapping[str, object]) -> GlobalConfig:
    raw_global = root_mapping.get("global")
    if raw_global is None:
        raise NaifuruConfigParseError(
            "Analysis config missing required table [global]. Add name_format."
        )
    global_mapping = _expect_mapping(raw_global, "[global]")
    _validate_keys(global_mapping, {"name_format"}, "[global]")
    name_format = _parse_choice(
        global_mapping, "name_format", SUPPORTED_NAME_FORMATS, "[global]"
    )
    return GlobalConfig(name_format=cast(NameFormat, name_format))


def _parse_conversions(root_mapping: Mapping[str, object]) -> tuple[ConversionConfig, ...]:
    raw_conversions = root_mapping.get("conversion")
    if raw_conversions is None:
        raise NaifuruConfigParseError(
            "Analysis config missing required array [[conversion]]. Add at least one plan."
        )
    rows = _expect_sequence(raw_conversions, "[[conversion]]")
    return tuple(
        _parse_conversion(row, index) for index, row in enumerate(rows)
    )


def _parse_conversion(value: object, index: int) -> ConversionConfig:
    context = f"conversion #{index + 1}"
    mapping = _expect_mapping(value, context)
    _validate_keys(mapping, {"name", "from", "to", "group"}, context)
    name = mapping.get("name")
    if not isinstance(name, str) or not name.strip():
        raise NaifuruConfigParseError(
            f"Invalid {context}: field 'name' must be a non-empty string."
        )
    source_format = _parse_choice(mapping, "from", SUPPORTED_SOURCE_FORMATS, context)
    target_format = _parse_choice(mapping, "to", SUPPORTED_TARGET_FORMATS, context)
    raw_groups = mapping.get("group")
    if raw_groups is None:
        raise NaifuruConfigParseError(f"Invalid {context}: missing required field 'group'.")
    group_rows = _expect_sequence(raw_groups, f"{context} group")
    groups = tuple(
        _parse_group(row, f"{context} group #{group_index + 1}")
        for group_index, row in enumerate(group_rows)
    )
    return ConversionConfig(
        name=name,
        source_format=cast(SourceFormat, source_format),
        target_format=cast(TargetFormat, target_format),
        groups=groups,
    )


def _parse_group(value: object, context: str) -> GroupConfig:
    mapping = _expect_mapping(value, context)
    _validate_keys(mapping, {"files"}, context)
    raw_files = mapping.get("files")
    if raw_files is None:
        raise NaifuruConfigParseError(f"Invalid {context}: missing required field 'files'.")
    file_rows = _expect_sequence(raw_files, f"{context} files")
    return GroupConfig(
        files=tuple(
            _parse_file(row, f"{context} file #{file_index + 1}")
            for file_index, row in enumerate(file_rows)
        )
    )


def _parse_file(value: object, context: str) -> FileConfig:
    mapping = _expect_mapping(value, context)
    _validate_keys(mapping, {"path", "acc_axis"}, context)
    raw_path = mapping.get("path")
    if not isinstance(raw_path, str) or not raw_path:
        raise NaifuruConfigParseError(f"Invalid {context}: field 'path' must be a string.")
    acc_axis = None
    if mapping.get("acc_axis") is not None:
        acc_axis = cast(AccAxis, _parse_choice(mapping, "acc_axis", SUPPORTED_ACC_AXES, context))
    return FileConfig(path=Path(raw_path), acc_axis=acc_axis)


def _parse_choice(
    mapping: Mapping[str, object],
    field_name: str,
    choices: tuple[_ChoiceT, ...],
    context: str,
) -> _ChoiceT:
    raw_value = mapping.get(field_name)
    if not isinstance(raw_value, str):
        raise NaifuruConfigParseError(
            f"Invalid {context}: field '{field_name}' must be a string."
        )
    for choice in choices:
        if raw_value == choice:
            return choice
    supported_rows = ", ".join(choices)
    raise NaifuruConfigParseError(
        f"Invalid {context}: unsupported {field_name} '{raw_value}'. Use one of: {supported_rows}."
    )


def _expect_mapping(value: object, context: str) -> Mapping[str, object]:
    if isinstance(value, Mapping):
        return cast(Mapping[str, object], value)
    raise NaifuruConfigParseError(
        f"Invalid {context}: expected table, got {type(value).__name__}."
    )


def _expect_sequence(value: object, context: str) -> Sequence[object]:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return value
    raise NaifuruConfigParseError(f"Invalid {context}: expected array, got {type(value).__name__}.")


def _validate_keys(mapping: Mapping[str, object], allowed_keys: set[str], context: str) -> None:
    unknown_keys = sorted(set(mapping) - allowed_keys)
    if unknown_keys:
        raise NaifuruConfigParseError(
            f"Invalid {context}: unknown fields {', '.join(unknown_keys)}."
        )
