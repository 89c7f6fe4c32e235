"""Unit tests for analysis-config semantic validation."""

from __future__ import annotations

from pathlib import Path

from core.config_validation import collect_validation_errors, validate_conversion
from core.types import (
    AccAxis,
    AnalysisConfig,
    ConversionConfig,
    FileConfig,
    GlobalConfig,
    GroupConfig,
    SourceFormat,
)


def _touch(directory: Path, name: str) -> Path:
    path = directory / name
    path.write_text("", encoding="utf-8")
    return path


def _conversion(
    source_format: SourceFormat,
    groups: list[list[tuple[Path, AccAxis | None]]],
    name: str = "plan",
) -> ConversionConfig:
    return ConversionConfig(
        name=name,
        source_format=source_format,
        target_format="jp_jma_csv",
        groups=tuple(
            GroupConfig(files=tuple(FileConfig(path=path, acc_axis=axis) for path, axis in group))
            for group in groups
        ),
    )


def _config(*conversions: ConversionConfig) -> AnalysisConfig:
    return AnalysisConfig(
        global_config=GlobalConfig(name_format="yyyymmdd-hhmmss-sn-n"),
        conversions=conversions,
    )


def _knet_files(directory: Path, axes: list[AccAxis | None]) -> list[tuple[Path, AccAxis | None]]:
    suffixes = ("NS", "EW", "UD", "NS")
    return [
        (_touch(directory, f"MYG004_{index}.{suffixes[index]}"), axis)
        for index, axis in enumerate(axes)
    ]


def test_knet_group_with_three_distinct_axes_is_valid(tmp_path: Path) -> None:
    """Exactly ns, ew, and ud in any order should pass."""
    conversion = _conversion("jp_nied_knet", [_knet_files(tmp_path, ["ud", "ns", "ew"])])

    assert validate_conversion(conversion) == []


def test_knet_group_with_duplicate_axis_reports_duplicate(tmp_path: Path) -> None:
    """A repeated axis tag should report duplicate_acc_axis."""
    conversion = _conversion("jp_nied_knet", [_knet_files(tmp_path, ["ns", "ns", "ud"])])

    errors = validate_conversion(conversion)

    assert [error.kind for error in errors] == ["duplicate_acc_axis"]


def test_knet_group_missing_axis_reports_all_axes_needed(tmp_path: Path) -> None:
    """A group with fewer than three axes should report the all-axes error."""
    conversion = _conversion("jp_nied_knet", [_knet_files(tmp_path, ["ns", "ew"])])

    errors = validate_conversion(conversion)

    assert [error.kind for error in errors] == ["duplicate_acc_axis"] and "id: 1" in str(errors[0])


def test_knet_group_with_untagged_file_reports_required_axis(tmp_path: Path) -> None:
    """A multi-axis file without a tag should report required_acc_axis."""
    conversion = _conversion("jp_nied_knet", [_knet_files(tmp_path, ["ns", "ew", None])])

    errors = validate_conversion(conversion)

    assert [error.kind for error in errors] == ["required_acc_axis"]


def test_knet_group_with_four_files_reports_duplicate(tmp_path: Path) -> None:
    """A fourth tagged file can never be valid."""
    conversion = _conversion("jp_nied_knet", [_knet_files(tmp_path, ["ns", "ew", "ud", "ns"])])

    errors = validate_conversion(conversion)

    assert [error.kind for error in errors] == ["duplicate_acc_axis"]


def test_single_axis_format_with_axis_tag_reports_mismatch(tmp_path: Path) -> None:
    """SAC files must not carry an axis tag."""
    conversion = _conversion(
        "tw_palert_sac",
        [[(_touch(tmp_path, "a.sac"), None)], [(_touch(tmp_path, "b.sac"), "ns")]],
        name="palert",
    )

    errors = validate_conversion(conversion)

    assert [error.kind for error in errors] == ["mismatched_acc_axis"] and "id: 2" in str(
        errors[0]
    )


def test_single_axis_format_without_axis_tags_is_valid(tmp_path: Path) -> None:
    """Untagged single-axis groups should pass."""
    conversion = _conversion("tw_palert_sac", [[(_touch(tmp_path, "a.SAC"), None)]])

    assert validate_conversion(conversion) == []


def test_extension_and_path_errors_are_reported_in_order(tmp_path: Path) -> None:
    """Extension checks should precede path checks and none should short-circuit."""
    missing_sac = tmp_path / "missing.sac"
    conversion = _conversion(
        "tw_palert_sac",
        [
            [(_touch(tmp_path, "station.txt"), None)],
            [(_touch(tmp_path, "station"), None)],
            [(missing_sac, None)],
            [(tmp_path, None)],
        ],
    )

    errors = validate_conversion(conversion)

    assert [error.kind for error in errors] == [
        "invalid_extension",
        "no_extension",
        "no_extension",
        "path_does_not_exist",
        "path_is_not_file",
    ]


def test_collect_validation_errors_accumulates_across_plans(tmp_path: Path) -> None:
    """Every plan should be validated even after an earlier plan fails."""
    first = _conversion("jp_nied_knet", [_knet_files(tmp_path, ["ns"])], name="first")
    second = _conversion(
        "tw_palert_sac", [[(_touch(tmp_path, "c.sac"), "ud")]], name="second"
    )

    errors = collect_validation_errors(_config(first, second))

    assert [error.kind for error in errors] == ["duplicate_acc_axis", "mismatched_acc_axis"]


def test_collect_validation_errors_reports_first_duplicate_name_once(tmp_path: Path) -> None:
    """Colliding plan names should be reported once, naming the collision."""
    sac_path = _touch(tmp_path, "d.sac")
    plans = [
        _conversion("tw_palert_sac", [[(sac_path, None)]], name=name)
        for name in ("alpha", "beta", "alpha", "beta")
    ]

    errors = collect_validation_errors(_config(*plans))

    assert [error.kind for error in errors] == ["duplicate_names"] and str(errors[0]).endswith(
        "alpha"
    )


def test_validation_errors_carry_exit_code_three(tmp_path: Path) -> None:
    """Validation errors should map to exit code 3."""
    conversion = _conversion("tw_palert_sac", [[(tmp_path / "absent.sac", None)]])

    errors = validate_conversion(conversion)

    assert [error.exit_code for error in errors] == [3]
