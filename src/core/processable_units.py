"""Expansion of conversion plans into per-file extraction units."""

from __future__ import annotations

from core.types import AnalysisConfig, ConversionConfig, ProcessableUnit


def iter_processable_units(conversion: ConversionConfig) -> list[ProcessableUnit]:
    """Flatten one plan into units, preserving group and file order."""
    units: list[ProcessableUnit] = []
    for group_index, group in enumerate(conversion.groups):
        for file_index, file in enumerate(group.files):
            units.append(
                ProcessableUnit(
                    conversion_name=conversion.name,
                    source_format=conversion.source_format,
                    target_format=conversion.target_format,
                    group_index=group_index,
                    file_index=file_index,
                    acc_axis=file.acc_axis,
                    path=file.path,
                    content=file.content,
                )
            )
    return units


def expand_processable_units(config: AnalysisConfig) -> list[ProcessableUnit]:
    """Flatten every plan of an analysis config in declaration order."""
    units: list[ProcessableUnit] = []
    for conversion in config.conversions:
        units.extend(iter_processable_units(conversion))
    return units
