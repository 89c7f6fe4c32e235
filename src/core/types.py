"""Shared typed models.

This module defines immutable data models used by config loading,
validation, unit expansion, and extraction to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Union

SourceFormat = Literal[
    "jp_nied_knet",
    "us_scsn_v2",
    "nz_geonet_v1a",
    "nz_geonet_v2a",
    "tw_palert_sac",
    "tk_afad_asc",
]
TargetFormat = Literal["jp_jma_csv", "jp_stera3d_txt"]
AccAxis = Literal["ns", "ew", "ud"]
NameFormat = Literal["yyyymmdd-hhmmss-sn-n"]
PayloadKind = Literal["text", "binary"]


@dataclass(frozen=True)
class TextContent:
    """Text recording loaded as an ordered sequence of lines."""

    lines: tuple[str, ...]


@dataclass(frozen=True)
class BinaryContent:
    """Binary recording loaded as a raw byte sequence."""

    data: bytes


FileContent = Union[TextContent, BinaryContent]


@dataclass(frozen=True)
class FileConfig:
    """One recording file listed in a conversion group.

    Attributes:
        path: Recording path as written in the analysis config.
        acc_axis: Axis tag, only meaningful for multi-axis formats.
        content: Loaded content, absent until a loader populates it.
    """

    path: Path
    acc_axis: AccAxis | None = None
    content: FileContent | None = None


@dataclass(frozen=True)
class GroupConfig:
    """Files that together describe one observation event."""

    files: tuple[FileConfig, ...]


@dataclass(frozen=True)
class ConversionConfig:
    """One named conversion plan.

    Attributes:
        name: Plan name, unique within an analysis config.
        source_format: Format of the input recordings.
        target_format: Report format the IR will be converted into.
        groups: Ordered observation groups.
    """

    name: str
    source_format: SourceFormat
    target_format: TargetFormat
    groups: tuple[GroupConfig, ...]


@dataclass(frozen=True)
class GlobalConfig:
    """Settings shared by every conversion plan."""

    name_format: NameFormat


@dataclass(frozen=True)
class AnalysisConfig:
    """Validated-schema root of an analysis config file."""

    global_config: GlobalConfig
    conversions: tuple[ConversionConfig, ...]


@dataclass(frozen=True)
class ProcessableUnit:
    """Flattened extraction task for one physical file.

    Attributes:
        conversion_name: Name of the plan the file belongs to.
        source_format: Format of the recording.
        target_format: Report format of the plan.
        group_index: Zero-based group position inside the plan.
        file_index: Zero-based file position inside the group.
        acc_axis: Axis tag of the file, if any.
        path: Recording path.
        content: Loaded content, if any.
    """

    conversion_name: str
    source_format: SourceFormat
    target_format: TargetFormat
    group_index: int
    file_index: int
    acc_axis: AccAxis | None
    path: Path
    content: FileContent | None = None

    @property
    def is_group_header(self) -> bool:
        """Return whether this unit is the first file of its group."""
        return self.file_index == 0
