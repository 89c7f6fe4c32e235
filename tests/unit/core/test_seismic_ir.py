"""Unit tests for the seismic IR and group assembly."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import numpy as np
import pytest

from core.seismic_ir import (
    Acceleration,
    FormatMetadata,
    SeismicIr,
    assemble_group,
    format_timestamp,
)


def _metadata(coefficient: float) -> FormatMetadata:
    return FormatMetadata(
        unit_type="gal",
        sac_version=None,
        delta_t=0.01,
        sampling_rate=100,
        site_code="MYG004",
        latitude=38.103,
        longitude=142.86,
        ad_coefficient=coefficient,
    )


def _header_ir(coefficient: float = 0.5) -> SeismicIr:
    acceleration = Acceleration().with_axis("ns", np.array([1.0, 2.0]))
    return SeismicIr(
        num_of_elements=2,
        timestamp="2011-03-11T05:46:15.000Z",
        acceleration=acceleration,
        metadata=_metadata(coefficient),
    )


def _samples_only(axis: str, counts: list[float]) -> SeismicIr:
    return SeismicIr(
        num_of_elements=len(counts),
        timestamp=None,
        acceleration=Acceleration().with_axis(axis, np.array(counts)),
        metadata=None,
    )


def test_acceleration_defaults_to_empty_axes() -> None:
    """A new acceleration should hold three empty float series."""
    acceleration = Acceleration()

    assert acceleration.max_length == 0 and acceleration.ns.dtype == np.float64


def test_acceleration_with_axis_returns_copy() -> None:
    """Replacing one axis should not mutate the original."""
    original = Acceleration()

    updated = original.with_axis("ud", [1, 2, 3])

    assert len(original.ud) == 0 and updated.axis("ud").tolist() == [1.0, 2.0, 3.0]


def test_assemble_group_scales_samples_only_contributions() -> None:
    """Later files should be scaled by the header coefficient and placed on their axis."""
    merged = assemble_group(
        [
            ("ns", _header_ir(0.5)),
            ("ew", _samples_only("ew", [4.0, 6.0])),
            ("ud", _samples_only("ud", [-2.0, 8.0, 10.0])),
        ]
    )

    assert (
        merged.acceleration.ns.tolist(),
        merged.acceleration.ew.tolist(),
        merged.acceleration.ud.tolist(),
        merged.num_of_elements,
        merged.metadata.site_code,
    ) == ([1.0, 2.0], [2.0, 3.0], [-1.0, 4.0, 5.0], 3, "MYG004")


def test_assemble_group_rejects_header_without_metadata() -> None:
    """The first contribution must carry header metadata."""
    with pytest.raises(ValueError):
        assemble_group([("ew", _samples_only("ew", [1.0]))])


def test_assemble_group_rejects_empty_group() -> None:
    """Assembly needs at least one contribution."""
    with pytest.raises(ValueError):
        assemble_group([])


def test_samples_only_flag_tracks_metadata() -> None:
    """Only records without metadata are samples-only."""
    assert _samples_only("ns", [1.0]).is_samples_only and not _header_ir().is_samples_only


@pytest.mark.parametrize(
    ("moment", "expected"),
    [
        (
            datetime(2011, 3, 11, 14, 46, 15, tzinfo=timezone(timedelta(hours=9))),
            "2011-03-11T05:46:15.000Z",
        ),
        (
            datetime(2024, 2, 1, 1, 2, 4, 900000, tzinfo=timezone.utc),
            "2024-02-01T01:02:04.900Z",
        ),
    ],
)
def test_format_timestamp_renders_utc_milliseconds(moment: datetime, expected: str) -> None:
    """Offset-aware times should be shifted to UTC and keep milliseconds."""
    assert format_timestamp(moment) == expected
