"""Breakpoint region definitions.

A region is a named band of widths described only by its exclusive upper
bound; its lower bound is implied by the region before it. Regions are kept in
the order they were given and scanned in that order, so callers must list them
with ascending bounds. That ordering is not validated: unsorted bounds simply
yield whichever region the scan meets first.

Default scale (desktop-oriented, mirrors common web ranges):
 - xs: < 640px
 - sm: < 960px
 - md: < 1280px
 - lg: < 1600px
 - xl: open ended
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Tuple, Union

__all__ = [
    "Region",
    "RegionDefinitions",
    "DEFAULT_REGIONS",
    "normalize_regions",
    "classify_width",
    "parse_regions",
]


@dataclass(frozen=True)
class Region:
    """Named width band.

    Attributes
    ----------
    name: str
        Identifier reported by listeners (e.g. ``"small"``).
    upper_bound: float
        Exclusive upper pixel boundary. ``math.inf`` for an open-ended tier.
    """

    name: str
    upper_bound: float

    def contains(self, width: float) -> bool:
        return width < self.upper_bound


RegionDefinitions = Union[
    Mapping[str, float],
    Iterable[Tuple[str, float]],
    Iterable[Region],
]


DEFAULT_REGIONS: Tuple[Region, ...] = (
    Region("xs", 640),
    Region("sm", 960),
    Region("md", 1280),
    Region("lg", 1600),
    Region("xl", math.inf),
)


def normalize_regions(definitions: Optional[RegionDefinitions]) -> Tuple[Region, ...]:
    """Return ``definitions`` as an ordered tuple of ``Region``.

    Accepts a mapping (insertion order kept), pairs, or ready-made regions.
    ``None`` yields an empty tuple.
    """
    if definitions is None:
        return ()
    items = definitions.items() if isinstance(definitions, Mapping) else definitions
    out = []
    for item in items:
        if isinstance(item, Region):
            out.append(item)
        else:
            name, bound = item
            out.append(Region(str(name), bound))
    return tuple(out)


def classify_width(regions: Iterable[Region], width: float) -> Optional[str]:
    """Name of the first region whose upper bound exceeds ``width``.

    Returns None when the width is beyond every bound (or there are no regions).
    """
    for region in regions:
        if region.contains(width):
            return region.name
    return None


_TOKEN_SPLIT = re.compile(r"[\s,]+")


def parse_regions(text: str) -> Tuple[Region, ...]:
    """Parse ``"small=400 medium=800 wide=inf"`` into regions.

    Tokens are separated by whitespace or commas. Raises ValueError on a token
    without ``=``, an empty name, or a bound that is not a number.
    """
    regions = []
    for token in _TOKEN_SPLIT.split(text.strip()):
        if not token:
            continue
        name, sep, raw_bound = token.partition("=")
        if not sep or not name:
            raise ValueError(f"Malformed region token: {token!r} (expected name=bound)")
        try:
            bound = float(raw_bound)
        except ValueError as exc:
            raise ValueError(f"Region {name!r} has a non-numeric bound: {raw_bound!r}") from exc
        if bound.is_integer():
            bound = int(bound)
        regions.append(Region(name, bound))
    return tuple(regions)
