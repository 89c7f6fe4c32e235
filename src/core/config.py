"""Runtime configuration model for naifuru.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass

from core.constants import DEFAULT_LOG_LEVEL, DEFAULT_TEXT_ENCODING, SUPPORTED_LOG_LEVELS
from core.errors import NaifuruConfigParseError


@dataclass(frozen=True)
class NaifuruConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Default logging level when the CLI does not override it.
        text_encoding: Encoding used to decode text recordings.
    """

    log_level: str
    text_encoding: str

    @classmethod
    def from_env(cls) -> "NaifuruConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            NaifuruConfigParseError: If environment values are invalid.
        """
        log_level = _parse_log_level(os.getenv("NAIFURU_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        text_encoding = _parse_text_encoding(
            os.getenv("NAIFURU_TEXT_ENCODING", DEFAULT_TEXT_ENCODING)
        )
        return cls(log_level=log_level, text_encoding=text_encoding)


def _parse_log_level(raw_value: str) -> str:
    """Parse the logging level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Normalized log level name.

    Raises:
        NaifuruConfigParseError: If the level is not supported.
    """
    normalized = raw_value.strip().lower()
    if normalized in SUPPORTED_LOG_LEVELS:
        return normalized
    raise NaifuruConfigParseError(
        "Invalid NAIFURU_LOG_LEVEL value: "
        f"expected one of {', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'."
    )


def _parse_text_encoding(raw_value: str) -> str:
    try:
        return codecs.lookup(raw_value.strip()).name
    except LookupError as error:
        raise NaifuruConfigParseError(
            f"Invalid NAIFURU_TEXT_ENCODING value: unknown codec '{raw_value}'."
        ) from error
