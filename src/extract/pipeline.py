"""Extraction orchestration for analysis configs.

This module validates a config, expands it into processable units, loads
each unit's recording, dispatches it to its decoder, and assembles
multi-axis groups. A failing unit of a multi-axis group drops that group's
record; in single-axis groups each file stands alone. Every failure is
reported and the remaining units are still processed.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from pathlib import Path
from typing import Sequence

from core.config import NaifuruConfig
from core.config_validation import collect_validation_errors
from core.constants import EXIT_CODE_EXTRACTION, EXIT_CODE_SUCCESS
from core.errors import NaifuruError, NaifuruExtractionError, NaifuruIoError
from core.format_catalog import is_multi_axis
from core.logging_config import get_logger
from core.processable_units import expand_processable_units
from core.seismic_ir import SeismicIr, assemble_group
from core.types import AnalysisConfig, ProcessableUnit, TargetFormat
from extract.extractor import create_extractor
from extract.file_loader import load_unit_content

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class ExtractedRecord:
    """One decoded record ready for conversion."""

    conversion_name: str
    group_index: int
    target_format: TargetFormat
    ir: SeismicIr


@dataclass(frozen=True)
class ExtractionFailure:
    """One unit that could not be decoded."""

    conversion_name: str
    group_index: int
    file_index: int
    path: Path
    error: NaifuruError


@dataclass(frozen=True)
class ExtractionReport:
    """Outcome of extracting every unit of a config."""

    records: tuple[ExtractedRecord, ...]
    failures: tuple[ExtractionFailure, ...]

    @property
    def irs(self) -> tuple[SeismicIr, ...]:
        """Decoded records without their plan context."""
        return tuple(record.ir for record in self.records)

    @property
    def exit_code(self) -> int:
        """Process exit code summarizing the batch."""
        return EXIT_CODE_SUCCESS if not self.failures else EXIT_CODE_EXTRACTION


class ExtractionPipelineRunner:
    """Runner for sequential, skip-and-continue extraction of a config."""

    def __init__(self, config: AnalysisConfig, runtime_config: NaifuruConfig) -> None:
        self._config = config
        self._runtime_config = runtime_config

    def run(self) -> ExtractionReport:
        """Validate the config and extract every group.

        Raises:
            NaifuruConfigValidationError: The first violation, after every
                violation has been logged.
        """
        self._validate()
        records: list[ExtractedRecord] = []
        failures: list[ExtractionFailure] = []
        units = expand_processable_units(self._config)
        for group_units in _iter_groups(units):
            group_records, group_failures = self._extract_group(group_units)
            records.extend(group_records)
            failures.extend(group_failures)
        _LOGGER.info(
            "extraction_completed",
            unit_count=len(units),
            record_count=len(records),
            failure_count=len(failures),
        )
        return ExtractionReport(records=tuple(records), failures=tuple(failures))

    def _validate(self) -> None:
        errors = collect_validation_errors(self._config)
        for error in errors:
            _LOGGER.error("config_validation_failed", kind=error.kind, message=str(error))
        if errors:
            raise errors[0]

    def _extract_group(
        self,
        group_units: Sequence[ProcessableUnit],
    ) -> tuple[list[ExtractedRecord], list[ExtractionFailure]]:
        """Extract one file group.

        Args:
            group_units: Units sharing a conversion name and group index.

        Returns:
            Records built from the group and the failures it produced. A
            multi-axis group stops at its first failure and yields no record;
            a single-axis group yields one record per decodable file.
        """
        head = group_units[0]
        if not is_multi_axis(head.source_format):
            return self._extract_single_axis_group(group_units)
        contributions = []
        for unit in group_units:
            try:
                ir = self._extract_unit(unit)
            except (NaifuruExtractionError, NaifuruIoError) as error:
                _log_unit_failure(unit, error)
                return [], [_build_failure(unit, error)]
            contributions.append((unit.acc_axis, ir))
        return [_build_record(head, assemble_group(contributions))], []

    def _extract_single_axis_group(
        self,
        group_units: Sequence[ProcessableUnit],
    ) -> tuple[list[ExtractedRecord], list[ExtractionFailure]]:
        records: list[ExtractedRecord] = []
        failures: list[ExtractionFailure] = []
        for unit in group_units:
            try:
                ir = self._extract_unit(unit)
            except (NaifuruExtractionError, NaifuruIoError) as error:
                _log_unit_failure(unit, error)
                failures.append(_build_failure(unit, error))
                continue
            records.append(_build_record(unit, ir))
        return records, failures

    def _extract_unit(self, unit: ProcessableUnit) -> SeismicIr:
        if unit.content is None:
            unit = load_unit_content(unit, self._runtime_config.text_encoding)
        extractor = create_extractor(unit)
        ir = extractor.extract()
        _LOGGER.debug(
            "unit_extracted",
            conversion=unit.conversion_name,
            group_index=unit.group_index,
            file_index=unit.file_index,
            num_of_elements=ir.num_of_elements,
        )
        return ir


def run_extraction(
    config: AnalysisConfig,
    runtime_config: NaifuruConfig | None = None,
) -> ExtractionReport:
    """Extract every group of an analysis config.

    Args:
        config: Parsed analysis config.
        runtime_config: Optional runtime configuration.

    Returns:
        Records and per-unit failures.
    """
    runner = ExtractionPipelineRunner(config, runtime_config or NaifuruConfig.from_env())
    return runner.run()


def _iter_groups(units: Sequence[ProcessableUnit]) -> list[list[ProcessableUnit]]:
    return [
        list(group_units)
        for _, group_units in groupby(
            units, key=lambda unit: (unit.conversion_name, unit.group_index)
        )
    ]


def _build_record(unit: ProcessableUnit, ir: SeismicIr) -> ExtractedRecord:
    return ExtractedRecord(
        conversion_name=unit.conversion_name,
        group_index=unit.group_index,
        target_format=unit.target_format,
        ir=ir,
    )


def _build_failure(unit: ProcessableUnit, error: NaifuruError) -> ExtractionFailure:
    return ExtractionFailure(
        conversion_name=unit.conversion_name,
        group_index=unit.group_index,
        file_index=unit.file_index,
        path=unit.path,
        error=error,
    )


def _log_unit_failure(unit: ProcessableUnit, error: NaifuruError) -> None:
    _LOGGER.error(
        "unit_extraction_skipped",
        conversion=unit.conversion_name,
        group_index=unit.group_index,
        file_index=unit.file_index,
        path=str(unit.path),
        error=str(error),
    )
