"""SVG path extraction."""

import re

from .errors import ExtractionError

_PATH_ELEMENT = re.compile(r"<path\b[^>]*>", re.IGNORECASE)
_D_ATTRIBUTE = re.compile(r"""\sd\s*=\s*(?:"([^"]*)"|'([^']*)')""")


def svg_to_path(svg: str) -> str:
    """
    Extract the path data of an icon from its SVG markup.

    Args:
        svg: The raw SVG markup

    Returns:
        The d attribute of every <path> element, joined with a space

    Raises:
        ExtractionError: If the markup contains no non-empty d attribute
    """
    paths = []
    for element in _PATH_ELEMENT.findall(svg):
        if match := _D_ATTRIBUTE.search(element):
            d = (match.group(1) or match.group(2) or "").strip()
            if d:
                paths.append(d)

    if not paths:
        raise ExtractionError("no path data found in SVG markup")

    return " ".join(paths)
