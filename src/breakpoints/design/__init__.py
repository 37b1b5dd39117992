"""Region definitions and width classification helpers."""

from .regions import (  # noqa: F401
    DEFAULT_REGIONS,
    Region,
    RegionDefinitions,
    classify_width,
    normalize_regions,
    parse_regions,
)

__all__ = [
    "DEFAULT_REGIONS",
    "Region",
    "RegionDefinitions",
    "classify_width",
    "normalize_regions",
    "parse_regions",
]
