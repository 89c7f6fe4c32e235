"""Decoder for NIED K-NET ASCII strong-motion recordings.

K-NET stores each axis in its own file. Header fields live on fixed
one-based line numbers and are located by whitespace token position. Only
the first file of a group is parsed for header metadata; later files of the
group contribute raw sample counts that group assembly scales with the
header coefficient.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import numpy as np

from core.constants import (
    KNET_HEADER_LINES,
    KNET_LINE_LATITUDE,
    KNET_LINE_LONGITUDE,
    KNET_LINE_RECORD_TIME,
    KNET_LINE_SAMPLING_FREQ,
    KNET_LINE_SCALE_FACTOR,
    KNET_LINE_STATION_CODE,
    KNET_UNIT_LABEL,
    KNET_UTC_OFFSET_HOURS,
)
from core.errors import NaifuruExtractionError
from core.seismic_ir import Acceleration, FormatMetadata, SeismicIr, format_timestamp
from core.types import AccAxis, BinaryContent, ProcessableUnit, TextContent
from extract.scale_factor import ScaleFactor, parse_scale_factor

_JST = timezone(timedelta(hours=KNET_UTC_OFFSET_HOURS))
_RECORD_TIME_FORMAT = "%Y/%m/%d %H:%M:%S"


class JpNiedKnetExtractor:
    """Extract one K-NET axis file, as header-bearing or samples-only unit."""

    def __init__(self, unit: ProcessableUnit) -> None:
        self._unit = unit
        self._path = unit.path

    @property
    def is_header_bearing(self) -> bool:
        """Whether this unit is the first file of its group."""
        return self._unit.is_group_header

    def extract(self) -> SeismicIr:
        """Decode this file.

        Returns:
            A full record for the header-bearing file, otherwise a
            samples-only record holding raw counts on this file's axis.

        Raises:
            NaifuruExtractionError: On the first field that cannot be decoded.
        """
        if not self.is_header_bearing:
            raw_counts = self.extract_raw_counts()
            return SeismicIr(
                num_of_elements=len(raw_counts),
                timestamp=None,
                acceleration=Acceleration().with_axis(self._axis(), raw_counts),
                metadata=None,
            )
        scale_factor = self.extract_scale_factor()
        sampling_rate = self.extract_sampling_rate()
        metadata = FormatMetadata(
            unit_type=self.extract_unit_type(),
            sac_version=None,
            delta_t=1.0 / sampling_rate,
            sampling_rate=sampling_rate,
            site_code=self.extract_site_code(),
            latitude=self.extract_latitude(),
            longitude=self.extract_longitude(),
            ad_coefficient=scale_factor.coefficient,
        )
        acceleration = Acceleration().with_axis(
            self._axis(), self.extract_raw_counts() * scale_factor.coefficient
        )
        return SeismicIr(
            num_of_elements=acceleration.max_length,
            timestamp=self.extract_initial_time(),
            acceleration=acceleration,
            metadata=metadata,
        )

    def extract_latitude(self) -> float:
        """Return the station latitude from line 2.

        Raises:
            NaifuruExtractionError: If the token is missing or not numeric.
        """
        return self._float_token(KNET_LINE_LATITUDE, "latitude", 1)

    def extract_longitude(self) -> float:
        """Return the station longitude from line 3.

        Raises:
            NaifuruExtractionError: If the token is missing or not numeric.
        """
        return self._float_token(KNET_LINE_LONGITUDE, "longitude", 1)

    def extract_unit_type(self) -> str:
        """K-NET samples are always in gal."""
        return KNET_UNIT_LABEL

    def extract_site_code(self) -> str:
        """Return the station code from line 6.

        Raises:
            NaifuruExtractionError: If the line has no station token.
        """
        return self._token(KNET_LINE_STATION_CODE, "station code", 2)

    def extract_scale_factor(self) -> ScaleFactor:
        """Parse the line-14 descriptor and its coefficient."""
        token = self._token(KNET_LINE_SCALE_FACTOR, "scale factor", 2)
        try:
            scale_factor = parse_scale_factor(token)
        except ValueError as error:
            raise NaifuruExtractionError("failed_extraction", "scale factor", self._path) from error
        if scale_factor is None:
            raise NaifuruExtractionError("pattern_not_matched", "scale factor", self._path)
        return scale_factor

    def extract_sampling_rate(self) -> int:
        """Parse the line-11 sampling frequency.

        Returns:
            Samples per second, read from a token such as ``100Hz``.

        Raises:
            NaifuruExtractionError: If the token is missing, non-numeric, or zero.
        """
        token = self._token(KNET_LINE_SAMPLING_FREQ, "sampling frequency", 2)
        digits = token[:-2] if token.lower().endswith("hz") else token
        if not digits.isdigit() or int(digits) == 0:
            raise NaifuruExtractionError("pattern_not_matched", "sampling frequency", self._path)
        return int(digits)

    def extract_initial_time(self) -> str:
        """Record start time, read as Japan Standard Time and rendered in UTC."""
        date_token = self._token(KNET_LINE_RECORD_TIME, "record time", 2)
        time_token = self._token(KNET_LINE_RECORD_TIME, "record time", 3)
        try:
            started_at = datetime.strptime(f"{date_token} {time_token}", _RECORD_TIME_FORMAT)
        except ValueError as error:
            raise NaifuruExtractionError(
                "pattern_not_matched", "record time", self._path
            ) from error
        return format_timestamp(started_at.replace(tzinfo=_JST))

    def extract_acceleration(self) -> Acceleration:
        """Samples of this file on its axis, scaled when header-bearing."""
        raw_counts = self.extract_raw_counts()
        if self.is_header_bearing:
            raw_counts = raw_counts * self.extract_scale_factor().coefficient
        return Acceleration().with_axis(self._axis(), raw_counts)

    def extract_raw_counts(self) -> np.ndarray:
        """Integer sample counts following the header block."""
        lines = self._lines()
        if len(lines) < KNET_HEADER_LINES:
            raise NaifuruExtractionError(
                "missing_file_data", f"memo (line {KNET_HEADER_LINES})", self._path
            )
        counts: list[int] = []
        for line in lines[KNET_HEADER_LINES:]:
            for token in line.split():
                try:
                    counts.append(int(token))
                except ValueError as error:
                    raise NaifuruExtractionError(
                        "pattern_not_matched", "acceleration", self._path
                    ) from error
        return np.asarray(counts, dtype=np.float64)

    def _axis(self) -> AccAxis:
        """Return the axis tag assigned to this file by the config."""
        if self._unit.acc_axis is None:
            raise NaifuruExtractionError("failed_extraction", "acc_axis", self._path)
        return self._unit.acc_axis

    def _float_token(self, line_number: int, field: str, position: int) -> float:
        """Read one header token as a float.

        Args:
            line_number: One-based header line.
            field: Field name reported on failure.
            position: Zero-based whitespace token index.

        Returns:
            The parsed value.
        """
        token = self._token(line_number, field, position)
        try:
            return float(token)
        except ValueError as error:
            raise NaifuruExtractionError("pattern_not_matched", field, self._path) from error

    def _token(self, line_number: int, field: str, position: int) -> str:
        """Read one whitespace-separated header token.

        Args:
            line_number: One-based header line.
            field: Field name reported on failure.
            position: Zero-based whitespace token index.

        Returns:
            The raw token.

        Raises:
            NaifuruExtractionError: If the line or token is missing.
        """
        lines = self._lines()
        tokens = lines[line_number - 1].split() if len(lines) >= line_number else []
        if len(tokens) <= position:
            raise NaifuruExtractionError(
                "missing_file_data", f"{field} (line {line_number})", self._path
            )
        return tokens[position]

    def _lines(self) -> tuple[str, ...]:
        """Return the decoded text lines of this unit.

        Raises:
            NaifuruExtractionError: If the unit has no text content.
        """
        content = self._unit.content
        if content is None:
            raise NaifuruExtractionError("missing_file_data", "file content", self._path)
        if isinstance(content, BinaryContent):
            raise NaifuruExtractionError("format_unsupported", "Binary type of K-NET", self._path)
        if isinstance(content, TextContent):
            return content.lines
        raise NaifuruExtractionError("format_unsupported", type(content).__name__, self._path)
