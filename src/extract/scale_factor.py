"""Scale-factor descriptors of strong-motion ASCII recordings.

K-NET style headers describe the digitizer scale as
``<numerator>(gal)/<denominator>``, e.g. ``7845(gal)/8223790``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

SCALE_FACTOR_PATTERN = re.compile(r"(?P<numerator>\d+)\(gal\)/(?P<denominator>\d+)")


@dataclass(frozen=True)
class ScaleFactor:
    """Parsed scale descriptor with its precomputed coefficient.

    Attributes:
        numerator: Full-scale acceleration in gal.
        denominator: Full-scale digitizer count.
        coefficient: ``numerator / denominator``, applied to every raw sample.
    """

    numerator: int
    denominator: int
    coefficient: float

    @classmethod
    def from_match(cls, match: re.Match[str]) -> "ScaleFactor":
        """Build a scale factor from a pattern match.

        Raises:
            ValueError: If the denominator is zero.
        """
        numerator = int(match.group("numerator"))
        denominator = int(match.group("denominator"))
        if denominator == 0:
            raise ValueError(f"Scale factor denominator is zero: '{match.group(0)}'.")
        return cls(
            numerator=numerator,
            denominator=denominator,
            coefficient=numerator / denominator,
        )


def parse_scale_factor(text: str) -> ScaleFactor | None:
    """Return the first scale descriptor found in text, if any."""
    match = SCALE_FACTOR_PATTERN.search(text)
    if match is None:
        return None
    return ScaleFactor.from_match(match)


def iter_scale_factors(text: str) -> list[ScaleFactor]:
    """Return every scale descriptor in text, left to right."""
    return [ScaleFactor.from_match(match) for match in SCALE_FACTOR_PATTERN.finditer(text)]
