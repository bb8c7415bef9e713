"""Data models for the icon package build."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class License:
    """License of an icon, as declared in the catalog."""

    type: str  # SPDX identifier, e.g. CC0-1.0
    url: Optional[str] = None  # e.g. https://spdx.org/licenses/CC0-1.0


@dataclass
class IconRecord:
    """Represents one icon of the catalog."""

    title: str  # e.g. Test Icon
    source: str  # e.g. https://example.com/brand
    hex: str  # e.g. FF0000
    slug: Optional[str] = None  # e.g. testicon (derived from title if not in the catalog)
    guidelines: Optional[str] = None  # e.g. https://example.com/brand/guidelines
    license: Optional[License] = None
    svg: Optional[str] = None  # raw markup, set during enrichment
    path: Optional[str] = None  # d attribute(s), set during enrichment
