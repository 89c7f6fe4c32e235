"""Unit tests for scale-factor descriptor parsing."""

from __future__ import annotations

import pytest

from extract.scale_factor import ScaleFactor, iter_scale_factors, parse_scale_factor


def test_parse_scale_factor_extracts_exact_integers() -> None:
    """The descriptor should parse numerator, denominator, and coefficient."""
    scale_factor = parse_scale_factor("7845(gal)/8223790")

    assert scale_factor == ScaleFactor(
        numerator=7845, denominator=8223790, coefficient=7845 / 8223790
    )


def test_parse_scale_factor_keeps_large_integers_exact() -> None:
    """Integers wider than 64 bits should not lose precision."""
    scale_factor = parse_scale_factor("123456789012345678901234567890(gal)/3")

    assert scale_factor is not None and scale_factor.numerator == 123456789012345678901234567890


def test_parse_scale_factor_returns_none_without_descriptor() -> None:
    """Text without a descriptor should not match."""
    assert parse_scale_factor("no scale factor here") is None


def test_parse_scale_factor_rejects_zero_denominator() -> None:
    """A zero denominator cannot produce a coefficient."""
    with pytest.raises(ValueError):
        parse_scale_factor("3920(gal)/0")


def test_iter_scale_factors_returns_matches_left_to_right() -> None:
    """Multiple descriptors should be extracted independently in order."""
    scale_factors = iter_scale_factors("3920(gal)/6182761 and 7845(gal)/8223790")

    assert [(item.numerator, item.denominator) for item in scale_factors] == [
        (3920, 6182761),
        (7845, 8223790),
    ]
