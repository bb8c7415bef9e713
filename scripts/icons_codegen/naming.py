"""Slug and export identifier utilities for the icon package build."""

import re
import unicodedata

from .models import IconRecord

EXPORT_PREFIX = "icon"

TITLE_TO_SLUG_REPLACEMENTS = {
    "+": "plus",
    ".": "dot",
    "&": "and",
    "đ": "d",
    "ħ": "h",
    "ı": "i",
    "ĸ": "k",
    "ŀ": "l",
    "ł": "l",
    "ß": "ss",
    "ŧ": "t",
}

_TITLE_TO_SLUG_CHARS = re.compile(
    "[" + re.escape("".join(TITLE_TO_SLUG_REPLACEMENTS)) + "]"
)
_TITLE_TO_SLUG_RANGE = re.compile(r"[^a-z0-9]")
_WORD_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")


def title_to_slug(title: str) -> str:
    """
    Convert an icon title to its slug.

    Rules:
    - Lowercase everything
    - Spell out characters that carry meaning (+, ., &) and map letters
      without a decomposition (đ, ł, ß, ...) to ASCII
    - Decompose accents (NFD) and drop everything outside [a-z0-9]

    Examples:
    - "Test Icon" -> testicon
    - "C++" -> cplusplus
    - ".ENV" -> dotenv
    - "Citroën" -> citroen
    """
    slug = _TITLE_TO_SLUG_CHARS.sub(
        lambda m: TITLE_TO_SLUG_REPLACEMENTS[m.group(0)], title.lower()
    )
    slug = unicodedata.normalize("NFD", slug)
    return _TITLE_TO_SLUG_RANGE.sub("", slug)


def get_icon_slug(icon: IconRecord) -> str:
    """Return the catalog slug of an icon, or the one derived from its title."""
    return icon.slug or title_to_slug(icon.title)


def slug_to_variable_name(slug: str) -> str:
    """
    Convert a slug to the identifier the icon is exported under.

    Runs of characters that are not ASCII letters or digits separate words;
    every word gets its first letter capitalized.

    testicon -> iconTesticon
    dot-env -> iconDotEnv
    7-zip -> icon7Zip
    """
    words = [w for w in _WORD_SEPARATORS.split(slug) if w]
    return EXPORT_PREFIX + "".join(w[0].upper() + w[1:] for w in words)
