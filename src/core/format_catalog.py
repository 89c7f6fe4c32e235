"""Catalog of supported source and target formats.

Each source format statically determines its acceptable file extensions,
whether its acceleration axes are split across files, and whether its
recordings are text or binary.
"""

from __future__ import annotations

from typing import Mapping

from core.types import AccAxis, NameFormat, PayloadKind, SourceFormat, TargetFormat

SUPPORTED_SOURCE_FORMATS: tuple[SourceFormat, ...] = (
    "jp_nied_knet",
    "us_scsn_v2",
    "nz_geonet_v1a",
    "nz_geonet_v2a",
    "tw_palert_sac",
    "tk_afad_asc",
)
SUPPORTED_TARGET_FORMATS: tuple[TargetFormat, ...] = ("jp_jma_csv", "jp_stera3d_txt")
SUPPORTED_ACC_AXES: tuple[AccAxis, ...] = ("ns", "ew", "ud")
SUPPORTED_NAME_FORMATS: tuple[NameFormat, ...] = ("yyyymmdd-hhmmss-sn-n",)

SOURCE_FORMAT_EXTENSIONS: Mapping[SourceFormat, tuple[str, ...]] = {
    "jp_nied_knet": ("ns", "ew", "ud"),
    "us_scsn_v2": ("v2",),
    "nz_geonet_v1a": ("v1a",),
    "nz_geonet_v2a": ("v2a",),
    "tw_palert_sac": ("sac",),
    "tk_afad_asc": ("asc",),
}
MULTI_AXIS_SOURCE_FORMATS: frozenset[SourceFormat] = frozenset({"jp_nied_knet", "tk_afad_asc"})
BINARY_SOURCE_FORMATS: frozenset[SourceFormat] = frozenset({"tw_palert_sac"})


def acceptable_extensions(source_format: SourceFormat) -> tuple[str, ...]:
    """Return lower-case extensions (without dot) accepted for a format."""
    return SOURCE_FORMAT_EXTENSIONS[source_format]


def is_multi_axis(source_format: SourceFormat) -> bool:
    """Return whether a format stores each axis in its own file."""
    return source_format in MULTI_AXIS_SOURCE_FORMATS


def payload_kind(source_format: SourceFormat) -> PayloadKind:
    """Return whether recordings of a format are loaded as text or bytes."""
    return "binary" if source_format in BINARY_SOURCE_FORMATS else "text"
