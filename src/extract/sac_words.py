"""Word-level decoding helpers for SAC binary recordings.

SAC files are sequences of 4-byte words with no byte-order marker. This
module scores big- and little-endian interpretations of the header against
plausibility checks, normalizes buffers to little endian, and reads typed
words at fixed indices.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

import numpy as np

from core.constants import (
    SAC_DELTA_MAX_EXCLUSIVE,
    SAC_DELTA_MIN_EXCLUSIVE,
    SAC_STRING_WORDS,
    SAC_VALID_VERSIONS,
    SAC_WORD_B,
    SAC_WORD_DELTA,
    SAC_WORD_DEPMAX,
    SAC_WORD_DEPMIN,
    SAC_WORD_E,
    SAC_WORD_NVHDR,
    SAC_WORD_SIZE,
)
from core.errors import NaifuruExtractionError
from core.logging_config import get_logger

Endian = Literal["big", "little"]

_LOGGER = get_logger(__name__)
_BYTE_ORDER_PREFIX = {"big": ">", "little": "<"}


@dataclass(frozen=True)
class SacHeaderProbe:
    """Header words used to score one byte-order hypothesis."""

    delta: float
    b: float
    e: float
    depmin: float
    depmax: float
    nvhdr: int

    def plausibility_score(self) -> int:
        """Count satisfied plausibility checks (0-4)."""
        score = 0
        if SAC_DELTA_MIN_EXCLUSIVE < self.delta < SAC_DELTA_MAX_EXCLUSIVE:
            score += 1
        if self.e > self.b:
            score += 1
        if self.depmax > self.depmin:
            score += 1
        if self.nvhdr in SAC_VALID_VERSIONS:
            score += 1
        return score


def word_count(data: bytes | bytearray, path: Path) -> int:
    """Return the number of 4-byte words in a buffer.

    Raises:
        NaifuruExtractionError: If the length is not a multiple of the word size.
    """
    if len(data) % SAC_WORD_SIZE != 0:
        raise NaifuruExtractionError("failed_extraction", "sac words (partial word)", path)
    return len(data) // SAC_WORD_SIZE


def read_float_word(
    data: bytes | bytearray,
    index: int,
    field: str,
    path: Path,
    endian: Endian = "little",
) -> float:
    """Read one float32 word at a fixed word index."""
    return float(_read_word(data, index, field, path, f"{_BYTE_ORDER_PREFIX[endian]}f4"))


def read_int_word(
    data: bytes | bytearray,
    index: int,
    field: str,
    path: Path,
    endian: Endian = "little",
) -> int:
    """Read one int32 word at a fixed word index."""
    return int(_read_word(data, index, field, path, f"{_BYTE_ORDER_PREFIX[endian]}i4"))


def read_string_words(data: bytes | bytearray, index: int, field: str, path: Path) -> str:
    """Read an 8-byte SAC header string starting at a word index."""
    start = index * SAC_WORD_SIZE
    end = start + SAC_STRING_WORDS * SAC_WORD_SIZE
    if index < 0 or end > len(data):
        raise NaifuruExtractionError("failed_extraction", field, path)
    raw = bytes(data[start:end])
    return raw.decode("ascii", errors="replace").replace("\x00", " ").strip()


def probe_header(data: bytes | bytearray, endian: Endian, path: Path) -> SacHeaderProbe:
    """Decode the scored header words under one byte-order hypothesis."""
    return SacHeaderProbe(
        delta=read_float_word(data, SAC_WORD_DELTA, "delta", path, endian),
        b=read_float_word(data, SAC_WORD_B, "b", path, endian),
        e=read_float_word(data, SAC_WORD_E, "e", path, endian),
        depmin=read_float_word(data, SAC_WORD_DEPMIN, "depmin", path, endian),
        depmax=read_float_word(data, SAC_WORD_DEPMAX, "depmax", path, endian),
        nvhdr=read_int_word(data, SAC_WORD_NVHDR, "nvhdr", path, endian),
    )


def detect_endian(data: bytes | bytearray, path: Path) -> Endian:
    """Pick the byte order whose header interpretation is more plausible.

    Raises:
        NaifuruExtractionError: If both hypotheses score the same.
    """
    big_probe = probe_header(data, "big", path)
    little_probe = probe_header(data, "little", path)
    big_score = big_probe.plausibility_score()
    little_score = little_probe.plausibility_score()
    _LOGGER.debug(
        "sac_endian_scored",
        path=str(path),
        big_endian=_probe_fields(big_probe),
        little_endian=_probe_fields(little_probe),
        big_score=big_score,
        little_score=little_score,
    )
    if big_score > little_score:
        return "big"
    if little_score > big_score:
        return "little"
    raise NaifuruExtractionError("endian_detection_failed", "sac header", path)


def normalize_to_little_endian(data: bytes | bytearray, path: Path) -> tuple[bytearray, Endian]:
    """Return a private little-endian copy of a buffer and its detected order.

    Raises:
        NaifuruExtractionError: If the buffer is misaligned or detection fails.
    """
    word_count(data, path)
    endian = detect_endian(data, path)
    buffer = bytearray(data)
    if endian == "big":
        _swap_words_in_place(buffer)
    return buffer, endian


def restore_byte_order(buffer: bytes | bytearray, endian: Endian) -> bytes:
    """Re-encode a little-endian buffer under the given byte order."""
    restored = bytearray(buffer)
    if endian == "big":
        _swap_words_in_place(restored)
    return bytes(restored)


def _swap_words_in_place(buffer: bytearray) -> None:
    """Reverse the byte order of every 4-byte word of a buffer.

    Args:
        buffer: Word-aligned buffer, modified in place.
    """
    if not buffer:
        return
    words = np.frombuffer(buffer, dtype=np.uint32)
    words.byteswap(inplace=True)


def _read_word(
    data: bytes | bytearray,
    index: int,
    field: str,
    path: Path,
    dtype: str,
) -> np.generic:
    """Read one word at a fixed word index.

    Args:
        data: Raw buffer.
        index: Zero-based word index.
        field: Field name reported on failure.
        path: Source path reported on failure.
        dtype: Numpy dtype string carrying the byte order.

    Returns:
        The decoded scalar.

    Raises:
        NaifuruExtractionError: If the word lies outside the buffer.
    """
    offset = index * SAC_WORD_SIZE
    if index < 0 or offset + SAC_WORD_SIZE > len(data):
        raise NaifuruExtractionError("failed_extraction", field, path)
    return np.frombuffer(data, dtype=dtype, count=1, offset=offset)[0]


def _probe_fields(probe: SacHeaderProbe) -> dict[str, float | int]:
    """Flatten a header probe into log-friendly fields."""
    return {
        "delta": probe.delta,
        "b": probe.b,
        "e": probe.e,
        "depmin": probe.depmin,
        "depmax": probe.depmax,
        "nvhdr": probe.nvhdr,
    }
