"""Recording loaders that populate unit content before extraction.

Decoders never touch the filesystem; this module reads each unit's file as
raw bytes or as text lines depending on the source format.
"""

from __future__ import annotations

from dataclasses import replace

from core.constants import DEFAULT_TEXT_ENCODING
from core.errors import NaifuruIoError
from core.format_catalog import payload_kind
from core.types import BinaryContent, FileContent, ProcessableUnit, TextContent


def load_unit_content(
    unit: ProcessableUnit,
    encoding: str = DEFAULT_TEXT_ENCODING,
) -> ProcessableUnit:
    """Return a copy of a unit with its file content loaded.

    Args:
        unit: Unit whose path should be read.
        encoding: Text encoding for text formats.

    Returns:
        Unit with ``content`` populated.

    Raises:
        NaifuruIoError: If the file cannot be read or decoded.
    """
    return replace(unit, content=_read_content(unit, encoding))


def _read_content(unit: ProcessableUnit, encoding: str) -> FileContent:
    try:
        if payload_kind(unit.source_format) == "binary":
            return BinaryContent(data=unit.path.read_bytes())
        text = unit.path.read_text(encoding=encoding)
    except OSError as error:
        raise NaifuruIoError(
            f"Failed to read recording at {unit.path}: {error}. Check the path and permissions."
        ) from error
    except UnicodeDecodeError as error:
        raise NaifuruIoError(
            f"Failed to decode recording at {unit.path} as {encoding}: {error.reason}. "
            "Set NAIFURU_TEXT_ENCODING to the file encoding."
        ) from error
    return TextContent(lines=tuple(text.splitlines()))
