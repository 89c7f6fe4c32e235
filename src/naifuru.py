"""Public SDK surface for naifuru.

This module provides a stable import path for library users.
It re-exports config loading, validation, extraction, and IR types.
"""

from __future__ import annotations

from core.analysis_config import load_analysis_config, parse_analysis_config_text
from core.config import NaifuruConfig
from core.config_validation import collect_validation_errors
from core.errors import (
    NaifuruCliError,
    NaifuruConfigParseError,
    NaifuruConfigValidationError,
    NaifuruError,
    NaifuruExtractionError,
    NaifuruIoError,
)
from core.processable_units import expand_processable_units
from core.seismic_ir import Acceleration, FormatMetadata, SeismicIr, assemble_group
from core.types import AnalysisConfig, ProcessableUnit
from extract.extractor import Extractor, create_extractor, supported_extraction_formats
from extract.file_loader import load_unit_content
from extract.pipeline import ExtractionReport, run_extraction

__all__ = [
    "Acceleration",
    "AnalysisConfig",
    "ExtractionReport",
    "Extractor",
    "FormatMetadata",
    "NaifuruCliError",
    "NaifuruConfig",
    "NaifuruConfigParseError",
    "NaifuruConfigValidationError",
    "NaifuruError",
    "NaifuruExtractionError",
    "NaifuruIoError",
    "ProcessableUnit",
    "SeismicIr",
    "assemble_group",
    "collect_validation_errors",
    "create_extractor",
    "expand_processable_units",
    "load_analysis_config",
    "load_unit_content",
    "parse_analysis_config_text",
    "run_extraction",
    "supported_extraction_formats",
]
