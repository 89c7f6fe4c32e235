"""Seismic intermediate representation shared by every decoder.

Decoders hand a ``SeismicIr`` to the converter stage by value. Multi-axis
formats produce one contribution per file; ``assemble_group`` folds those
contributions into one record per observation group.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Sequence

import numpy as np

from core.types import AccAxis


def format_timestamp(moment: datetime) -> str:
    """Render a record start time in the shared IR form.

    Args:
        moment: Timezone-aware start time.

    Returns:
        UTC ISO-8601 text with millisecond precision and a ``Z`` suffix,
        for example ``2011-03-11T05:46:15.000Z``.
    """
    utc_moment = moment.astimezone(timezone.utc)
    return utc_moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc_moment.microsecond // 1000:03d}Z"


def _empty_series() -> np.ndarray:
    return np.zeros(0, dtype=np.float64)


@dataclass(frozen=True, eq=False)
class Acceleration:
    """Three-axis acceleration series in physical units."""

    ns: np.ndarray = field(default_factory=_empty_series)
    ew: np.ndarray = field(default_factory=_empty_series)
    ud: np.ndarray = field(default_factory=_empty_series)

    def axis(self, acc_axis: AccAxis) -> np.ndarray:
        """Return the series of one axis."""
        return getattr(self, acc_axis)

    def with_axis(self, acc_axis: AccAxis, series: np.ndarray) -> "Acceleration":
        """Return a copy with one axis replaced."""
        return replace(self, **{acc_axis: np.asarray(series, dtype=np.float64)})

    @property
    def max_length(self) -> int:
        """Longest series length across the three axes."""
        return max(len(self.ns), len(self.ew), len(self.ud))


@dataclass(frozen=True)
class FormatMetadata:
    """Format-specific metadata attached to a record.

    Attributes:
        unit_type: Physical unit label of the samples.
        sac_version: SAC header version (6 or 7), SAC only.
        delta_t: Sampling interval in seconds.
        sampling_rate: Sampling rate in Hz.
        site_code: Station code.
        latitude: Latitude in degrees.
        longitude: Longitude in degrees.
        ad_coefficient: Scale factor applied to raw counts.
    """

    unit_type: str
    sac_version: int | None
    delta_t: float | None
    sampling_rate: int | None
    site_code: str
    latitude: float
    longitude: float
    ad_coefficient: float


@dataclass(frozen=True, eq=False)
class SeismicIr:
    """Unified decoded record.

    A record without metadata is a samples-only contribution: its single
    filled axis holds raw digitizer counts awaiting the group coefficient.
    """

    num_of_elements: int
    timestamp: str | None
    acceleration: Acceleration
    metadata: FormatMetadata | None

    @property
    def is_samples_only(self) -> bool:
        """Return whether this record still needs group assembly."""
        return self.metadata is None


def assemble_group(contributions: Sequence[tuple[AccAxis | None, SeismicIr]]) -> SeismicIr:
    """Merge per-file contributions of one group into a single record.

    Args:
        contributions: ``(axis, record)`` pairs in file order. The first
            record must carry metadata; later samples-only records are
            scaled by its coefficient and placed on their axis.

    Returns:
        Combined record.

    Raises:
        ValueError: If the header record is missing or an axis is absent.
    """
    if not contributions:
        raise ValueError("Cannot assemble an empty group.")
    _, header = contributions[0]
    if header.metadata is None:
        raise ValueError("The first record of a group must carry header metadata.")
    coefficient = header.metadata.ad_coefficient
    acceleration = header.acceleration
    for acc_axis, contribution in contributions[1:]:
        if acc_axis is None:
            raise ValueError("Samples-only contributions must name their axis.")
        series = contribution.acceleration.axis(acc_axis)
        if contribution.is_samples_only:
            series = series * coefficient
        acceleration = acceleration.with_axis(acc_axis, series)
    return replace(
        header,
        num_of_elements=acceleration.max_length,
        acceleration=acceleration,
    )
