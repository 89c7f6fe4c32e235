"""Decoder for Taiwan P-Alert binary SAC recordings.

Decoding runs in two phases: the decoder copies the unit's bytes into a
private buffer and normalizes it to little endian once, then every field is
read from a fixed word index of that buffer. Character header words
have no byte order and are read from the unmodified payload.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import numpy as np

from core.constants import (
    SAC_HEADER_WORDS,
    SAC_UNDEFINED_VALUE,
    SAC_UNIT_LABELS,
    SAC_UNIT_NOT_FOUND,
    SAC_VALID_VERSIONS,
    SAC_WORD_B,
    SAC_WORD_DELTA,
    SAC_WORD_IDEP,
    SAC_WORD_KCMPNM,
    SAC_WORD_KSTNM,
    SAC_WORD_NPTS,
    SAC_WORD_NVHDR,
    SAC_WORD_NZHOUR,
    SAC_WORD_NZJDAY,
    SAC_WORD_NZMIN,
    SAC_WORD_NZMSEC,
    SAC_WORD_NZSEC,
    SAC_WORD_NZYEAR,
    SAC_WORD_SIZE,
    SAC_WORD_STLA,
    SAC_WORD_STLO,
)
from core.errors import NaifuruExtractionError
from core.seismic_ir import Acceleration, FormatMetadata, SeismicIr, format_timestamp
from core.types import AccAxis, BinaryContent, ProcessableUnit, TextContent
from extract.sac_words import (
    Endian,
    normalize_to_little_endian,
    read_float_word,
    read_int_word,
    read_string_words,
    word_count,
)

_COMPONENT_AXES: dict[str, AccAxis] = {"N": "ns", "E": "ew", "Z": "ud", "U": "ud"}


class TwPalertSacExtractor:
    """Extract a ``SeismicIr`` from one single-file SAC recording."""

    def __init__(self, unit: ProcessableUnit) -> None:
        self._unit = unit
        self._path = unit.path
        self._buffer: bytearray | None = None
        self._endian: Endian | None = None

    @property
    def detected_endian(self) -> Endian | None:
        """Byte order found during normalization, if it already ran."""
        return self._endian

    @property
    def normalized_payload(self) -> bytes:
        """Little-endian copy of the recording, normalizing on first access."""
        return bytes(self.normalize())

    def normalize(self) -> bytearray:
        """Detect byte order and swap the private buffer to little endian once."""
        if self._buffer is None:
            self._buffer, self._endian = normalize_to_little_endian(
                self._binary_payload(), self._path
            )
        return self._buffer

    def extract(self) -> SeismicIr:
        """Decode the whole record.

        Raises:
            NaifuruExtractionError: On the first field that cannot be decoded.
        """
        buffer = self.normalize()
        acceleration = self.extract_acceleration()
        delta = read_float_word(buffer, SAC_WORD_DELTA, "delta", self._path)
        nvhdr = read_int_word(buffer, SAC_WORD_NVHDR, "nvhdr", self._path)
        metadata = FormatMetadata(
            unit_type=self.extract_unit_type(),
            sac_version=nvhdr if nvhdr in SAC_VALID_VERSIONS else None,
            delta_t=delta,
            sampling_rate=int(round(1.0 / delta)) if delta > 0 else None,
            site_code=self.extract_site_code(),
            latitude=self.extract_latitude(),
            longitude=self.extract_longitude(),
            ad_coefficient=1.0,
        )
        return SeismicIr(
            num_of_elements=self._npts(),
            timestamp=self.extract_initial_time(),
            acceleration=acceleration,
            metadata=metadata,
        )

    def extract_latitude(self) -> float:
        """Station latitude from header word 31."""
        return read_float_word(self.normalize(), SAC_WORD_STLA, "latitude", self._path)

    def extract_longitude(self) -> float:
        """Station longitude from header word 32."""
        return read_float_word(self.normalize(), SAC_WORD_STLO, "longitude", self._path)

    def extract_unit_type(self) -> str:
        """Unit label for the idep code; unknown codes map to ``notfound``."""
        idep = read_int_word(self.normalize(), SAC_WORD_IDEP, "unit type", self._path)
        return SAC_UNIT_LABELS.get(idep, SAC_UNIT_NOT_FOUND)

    def extract_site_code(self) -> str:
        """Station name from the kstnm header string."""
        self.normalize()
        site_code = read_string_words(
            self._binary_payload(), SAC_WORD_KSTNM, "site code", self._path
        )
        return "" if site_code == str(SAC_UNDEFINED_VALUE) else site_code

    def extract_initial_time(self) -> str:
        """Start time (reference time plus begin offset) as UTC ISO-8601."""
        buffer = self.normalize()
        parts = [
            read_int_word(buffer, index, "initial time", self._path)
            for index in (
                SAC_WORD_NZYEAR,
                SAC_WORD_NZJDAY,
                SAC_WORD_NZHOUR,
                SAC_WORD_NZMIN,
                SAC_WORD_NZSEC,
                SAC_WORD_NZMSEC,
            )
        ]
        if SAC_UNDEFINED_VALUE in parts:
            raise NaifuruExtractionError("failed_extraction", "initial time", self._path)
        year, jday, hour, minute, second, msec = parts
        begin = read_float_word(buffer, SAC_WORD_B, "initial time", self._path)
        if begin == float(SAC_UNDEFINED_VALUE):
            begin = 0.0
        try:
            start = datetime(year, 1, 1, tzinfo=timezone.utc) + timedelta(
                days=jday - 1,
                hours=hour,
                minutes=minute,
                seconds=second,
                milliseconds=msec,
            )
            start += timedelta(seconds=begin)
        except (ValueError, OverflowError) as error:
            raise NaifuruExtractionError(
                "failed_extraction", "initial time", self._path
            ) from error
        return format_timestamp(start)

    def extract_acceleration(self) -> Acceleration:
        """Decode the float32 data section into three axes.

        A data section of ``3 * npts`` words holds NS, EW, UD blocks in
        order. A section of ``npts`` words holds one component, routed by
        the last character of kcmpnm.
        """
        buffer = self.normalize()
        npts = self._npts()
        data_words = word_count(buffer, self._path) - SAC_HEADER_WORDS
        if data_words < 0:
            raise NaifuruExtractionError("failed_extraction", "acceleration", self._path)
        if data_words == 3 * npts:
            return Acceleration(
                ns=self._read_block(buffer, 0, npts),
                ew=self._read_block(buffer, npts, npts),
                ud=self._read_block(buffer, 2 * npts, npts),
            )
        if data_words == npts:
            return Acceleration().with_axis(
                self._component_axis(), self._read_block(buffer, 0, npts)
            )
        raise NaifuruExtractionError("failed_extraction", "acceleration", self._path)

    def _npts(self) -> int:
        npts = read_int_word(self.normalize(), SAC_WORD_NPTS, "npts", self._path)
        if npts < 0:
            raise NaifuruExtractionError("failed_extraction", "npts", self._path)
        return npts

    def _component_axis(self) -> AccAxis:
        """Map the last kcmpnm character onto an axis.

        Returns:
            ``ns`` for N, ``ew`` for E, and ``ud`` for Z or U.

        Raises:
            NaifuruExtractionError: If kcmpnm is blank, holds the ``-12345``
                undefined marker, or ends in any other character.
        """
        component = read_string_words(
            self._binary_payload(), SAC_WORD_KCMPNM, "component", self._path
        )
        axis = _COMPONENT_AXES.get(component[-1:].upper())
        if axis is None:
            raise NaifuruExtractionError("failed_extraction", "component", self._path)
        return axis

    def _read_block(self, buffer: bytearray, first_sample: int, count: int) -> np.ndarray:
        if count == 0:
            return np.zeros(0, dtype=np.float64)
        offset = (SAC_HEADER_WORDS + first_sample) * SAC_WORD_SIZE
        samples = np.frombuffer(buffer, dtype="<f4", count=count, offset=offset)
        return samples.astype(np.float64)

    def _binary_payload(self) -> bytes:
        content = self._unit.content
        if content is None:
            raise NaifuruExtractionError("missing_file_data", "file content", self._path)
        if isinstance(content, TextContent):
            raise NaifuruExtractionError("format_unsupported", "Text type of SAC", self._path)
        if isinstance(content, BinaryContent):
            return content.data
        raise NaifuruExtractionError("format_unsupported", type(content).__name__, self._path)
