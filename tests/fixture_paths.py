"""Shared fixture path helpers for tests."""

from __future__ import annotations

from pathlib import Path

KNET_FIXTURE_STEM = "MYG0041103111446"


def fixture_path(relative_path: str) -> Path:
    """Resolve a fixture path relative to tests/fixtures.

    Args:
        relative_path: Path under fixtures root.

    Returns:
        Absolute fixture path.
    """
    tests_root = Path(__file__).resolve().parent
    return tests_root / "fixtures" / relative_path


def knet_fixture_path(direction: str) -> Path:
    """Return the K-NET fixture recording for one direction suffix (NS, EW, UD)."""
    return fixture_path(f"knet/{KNET_FIXTURE_STEM}.{direction}")
