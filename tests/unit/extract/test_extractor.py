"""Unit tests for extractor dispatch."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import NaifuruExtractionError
from core.format_catalog import SUPPORTED_SOURCE_FORMATS
from core.types import ProcessableUnit, SourceFormat
from extract.extractor import EXTRACTOR_FACTORIES, create_extractor, supported_extraction_formats
from extract.jp_nied_knet import JpNiedKnetExtractor
from extract.tw_palert_sac import TwPalertSacExtractor


def _unit(source_format: SourceFormat) -> ProcessableUnit:
    return ProcessableUnit(
        conversion_name="plan",
        source_format=source_format,
        target_format="jp_jma_csv",
        group_index=0,
        file_index=0,
        acc_axis=None,
        path=Path("recording.dat"),
    )


def test_dispatch_table_covers_every_source_format() -> None:
    """Every catalog format should have an entry, implemented or not."""
    assert set(EXTRACTOR_FACTORIES) == set(SUPPORTED_SOURCE_FORMATS)


def test_create_extractor_maps_implemented_formats() -> None:
    """SAC and K-NET units should dispatch to their decoders."""
    assert isinstance(create_extractor(_unit("tw_palert_sac")), TwPalertSacExtractor) and (
        isinstance(create_extractor(_unit("jp_nied_knet")), JpNiedKnetExtractor)
    )


@pytest.mark.parametrize(
    "source_format", ["us_scsn_v2", "nz_geonet_v1a", "nz_geonet_v2a", "tk_afad_asc"]
)
def test_create_extractor_reports_unimplemented_formats(source_format: SourceFormat) -> None:
    """Formats without a decoder should raise format_unsupported instead of aborting."""
    with pytest.raises(NaifuruExtractionError) as error_info:
        create_extractor(_unit(source_format))

    assert (error_info.value.kind, error_info.value.field, error_info.value.exit_code) == (
        "format_unsupported",
        source_format,
        6,
    )


def test_supported_extraction_formats_lists_decoders() -> None:
    """Only formats with a decoder should be reported as supported."""
    assert supported_extraction_formats() == ("jp_nied_knet", "tw_palert_sac")
