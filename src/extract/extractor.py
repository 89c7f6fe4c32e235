"""Extractor capability contract and per-format dispatch.

Every supported source format appears in the dispatch table; formats whose
decoder is not written yet map to ``None`` and surface a
``format_unsupported`` error instead of aborting the process.
"""

from __future__ import annotations

from typing import Callable, Mapping, Protocol

from core.errors import NaifuruExtractionError
from core.seismic_ir import Acceleration, SeismicIr
from core.types import ProcessableUnit, SourceFormat
from extract.jp_nied_knet import JpNiedKnetExtractor
from extract.tw_palert_sac import TwPalertSacExtractor


class Extractor(Protocol):
    """Decoding operations implemented once per source format."""

    def extract(self) -> SeismicIr:
        """Decode the whole unit into a record.

        Returns:
            Intermediate record of the unit.

        Raises:
            NaifuruExtractionError: On the first field that cannot be decoded.
        """
        ...

    def extract_latitude(self) -> float:
        """Return the station latitude in decimal degrees.

        Raises:
            NaifuruExtractionError: If the field is missing or malformed.
        """
        ...

    def extract_longitude(self) -> float:
        """Return the station longitude in decimal degrees.

        Raises:
            NaifuruExtractionError: If the field is missing or malformed.
        """
        ...

    def extract_unit_type(self) -> str:
        """Return the physical unit label of the samples."""
        ...

    def extract_acceleration(self) -> Acceleration:
        """Decode the sample blocks of the unit.

        Returns:
            Acceleration with every axis the unit carries.

        Raises:
            NaifuruExtractionError: If the sample section cannot be decoded.
        """
        ...

    def extract_initial_time(self) -> str:
        """Return the record start time.

        Returns:
            UTC ISO-8601 text with milliseconds and a ``Z`` suffix.

        Raises:
            NaifuruExtractionError: If the time fields are missing or invalid.
        """
        ...


ExtractorFactory = Callable[[ProcessableUnit], Extractor]

EXTRACTOR_FACTORIES: Mapping[SourceFormat, ExtractorFactory | None] = {
    "jp_nied_knet": JpNiedKnetExtractor,
    "us_scsn_v2": None,
    "nz_geonet_v1a": None,
    "nz_geonet_v2a": None,
    "tw_palert_sac": TwPalertSacExtractor,
    "tk_afad_asc": None,
}


def create_extractor(unit: ProcessableUnit) -> Extractor:
    """Return the decoder for a unit's source format.

    Args:
        unit: Unit to decode. The decoder takes it over for one extraction.

    Returns:
        Format-specific extractor.

    Raises:
        NaifuruExtractionError: If the format has no decoder yet.
    """
    factory = EXTRACTOR_FACTORIES.get(unit.source_format)
    if factory is None:
        raise NaifuruExtractionError("format_unsupported", unit.source_format, unit.path)
    return factory(unit)


def supported_extraction_formats() -> tuple[SourceFormat, ...]:
    """Return source formats that currently have a decoder."""
    return tuple(
        source_format
        for source_format, factory in EXTRACTOR_FACTORIES.items()
        if factory is not None
    )
