"""Icon catalog loading and build path configuration."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import DuplicateSlugError
from .models import IconRecord, License
from .naming import get_icon_slug

UTF8 = "utf-8"


@dataclass(frozen=True)
class BuildPaths:
    """Inputs and outputs of a build, resolved against a project root."""

    root: Path
    data_file: Path
    icons_dir: Path
    index_file: Path
    icons_js_file: Path
    icons_mjs_file: Path
    icons_dts_file: Path
    utils_js_file: Path
    utils_mjs_file: Path
    index_template_file: Path
    icon_object_template_file: Path


def get_build_paths(root: Optional[Path] = None) -> BuildPaths:
    """
    Resolve the build paths for a project root.

    The default root is the repository this package is checked out in
    (two levels above scripts/icons_codegen).
    """
    if root is None:
        root = Path(__file__).parent.parent.parent
    root = Path(root).resolve()
    templates_dir = root / "scripts" / "templates"

    return BuildPaths(
        root=root,
        data_file=root / "_data" / "icons.json",
        icons_dir=root / "icons",
        index_file=root / "index.js",
        icons_js_file=root / "icons.js",
        icons_mjs_file=root / "icons.mjs",
        icons_dts_file=root / "icons.d.ts",
        utils_js_file=root / "utils.js",
        utils_mjs_file=root / "utils.mjs",
        index_template_file=templates_dir / "index.js",
        icon_object_template_file=templates_dir / "icon-object.js",
    )


def _parse_license(data: Optional[dict]) -> Optional[License]:
    if data is None:
        return None
    return License(type=data["type"], url=data.get("url"))


def parse_icons_data(text: str) -> list[IconRecord]:
    """
    Parse the JSON catalog into icon records.

    The catalog is an object with an "icons" array; entries keep their order.
    """
    icons = []
    for entry in json.loads(text)["icons"]:
        icons.append(
            IconRecord(
                title=entry["title"],
                source=entry["source"],
                hex=entry["hex"],
                slug=entry.get("slug"),
                guidelines=entry.get("guidelines"),
                license=_parse_license(entry.get("license")),
            )
        )
    return icons


def load_icons_data(data_file: Path) -> list[IconRecord]:
    """Read and parse the catalog file."""
    with open(data_file, encoding=UTF8) as f:
        return parse_icons_data(f.read())


def check_unique_slugs(icons: list[IconRecord]) -> None:
    """
    Make sure no two icons end up with the same slug.

    Raises:
        DuplicateSlugError: Naming the slug and both titles
    """
    seen: dict[str, str] = {}
    for icon in icons:
        slug = get_icon_slug(icon)
        if slug in seen:
            raise DuplicateSlugError(
                f"slug '{slug}' of '{icon.title}' is already used by '{seen[slug]}'"
            )
        seen[slug] = icon.title
