"""Unit tests for analysis-config loading and schema parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.analysis_config import (
    load_analysis_config,
    parse_analysis_config,
    parse_analysis_config_text,
)
from core.errors import NaifuruConfigParseError, NaifuruIoError
from tests.fixture_paths import fixture_path


def test_load_analysis_config_parses_plans_in_order() -> None:
    """Valid config should keep plan, group, and file order."""
    config = load_analysis_config(fixture_path("analysis_config/valid_plans.toml"))

    knet, palert = config.conversions
    assert (
        config.global_config.name_format,
        knet.name,
        knet.source_format,
        knet.target_format,
        tuple(file.acc_axis for file in knet.groups[0].files),
        palert.source_format,
        len(palert.groups),
        palert.groups[1].files[0].path,
    ) == (
        "yyyymmdd-hhmmss-sn-n",
        "knet-tohoku",
        "jp_nied_knet",
        "jp_jma_csv",
        ("ns", "ew", "ud"),
        "tw_palert_sac",
        2,
        Path("TWA02.sac"),
    )


def test_load_analysis_config_leaves_axis_unset_when_absent() -> None:
    """Files without acc_axis should parse with no axis tag."""
    config = load_analysis_config(fixture_path("analysis_config/valid_plans.toml"))

    assert config.conversions[1].groups[0].files[0].acc_axis is None


def test_load_analysis_config_rejects_unknown_file_key() -> None:
    """Unknown file fields should be rejected."""
    with pytest.raises(NaifuruConfigParseError, match="unknown fields axis"):
        load_analysis_config(fixture_path("analysis_config/unknown_file_key.toml"))


def test_load_analysis_config_rejects_unsupported_source_format() -> None:
    """Unknown source format names should be rejected."""
    with pytest.raises(NaifuruConfigParseError, match="unsupported from 'mini_seed'"):
        load_analysis_config(fixture_path("analysis_config/unsupported_source_format.toml"))


def test_load_analysis_config_requires_global_table() -> None:
    """Missing [global] table should be rejected."""
    with pytest.raises(NaifuruConfigParseError, match=r"\[global\]"):
        load_analysis_config(fixture_path("analysis_config/missing_global.toml"))


def test_load_analysis_config_reports_toml_syntax_errors() -> None:
    """Malformed TOML should surface as a parse error with exit code 5."""
    with pytest.raises(NaifuruConfigParseError) as error_info:
        load_analysis_config(fixture_path("analysis_config/invalid_syntax.toml"))

    assert error_info.value.exit_code == 5


def test_load_analysis_config_missing_file_raises_io_error(tmp_path: Path) -> None:
    """Unreadable config path should raise an I/O error with exit code 4."""
    with pytest.raises(NaifuruIoError) as error_info:
        load_analysis_config(tmp_path / "absent.toml")

    assert error_info.value.exit_code == 4


def test_parse_analysis_config_text_rejects_invalid_axis() -> None:
    """Axis tags outside ns/ew/ud should be rejected."""
    config_text = """
[global]
name_format = "yyyymmdd-hhmmss-sn-n"

[[conversion]]
name = "knet"
from = "jp_nied_knet"
to = "jp_jma_csv"

[[conversion.group]]
files = [{ path = "a.NS", acc_axis = "xy" }]
"""
    with pytest.raises(NaifuruConfigParseError, match="unsupported acc_axis 'xy'"):
        parse_analysis_config_text(config_text)


def test_parse_analysis_config_rejects_non_array_groups() -> None:
    """Group field must be an array of tables."""
    payload = {
        "global": {"name_format": "yyyymmdd-hhmmss-sn-n"},
        "conversion": [
            {"name": "knet", "from": "jp_nied_knet", "to": "jp_jma_csv", "group": "oops"}
        ],
    }

    with pytest.raises(NaifuruConfigParseError, match="expected array"):
        parse_analysis_config(payload)


def test_parse_analysis_config_rejects_blank_plan_name() -> None:
    """Plan names must be non-empty strings."""
    payload = {
        "global": {"name_format": "yyyymmdd-hhmmss-sn-n"},
        "conversion": [{"name": " ", "from": "tw_palert_sac", "to": "jp_jma_csv", "group": []}],
    }

    with pytest.raises(NaifuruConfigParseError, match="'name'"):
        parse_analysis_config(payload)
