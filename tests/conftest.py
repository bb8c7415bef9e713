import json
import shutil
from pathlib import Path

import pytest

from icons_codegen.catalog import get_build_paths

REPO_ROOT = Path(__file__).parent.parent

TEST_ICON = {
    "title": "Test Icon",
    "slug": "testicon",
    "hex": "FF0000",
    "source": "https://example.com",
}
TEST_ICON_SVG = '<svg role="img" viewBox="0 0 24 24">\n<path d="M0 0h10v10z"/>\n</svg>\n'


def passthrough(source, **options):
    return source


@pytest.fixture
def make_project(tmp_path):
    """Create a project root with the real templates, a catalog and SVGs."""

    def make(icons, svgs):
        shutil.copytree(REPO_ROOT / "scripts" / "templates", tmp_path / "scripts" / "templates")
        shutil.copy(REPO_ROOT / "utils.mjs", tmp_path / "utils.mjs")
        (tmp_path / "_data").mkdir()
        (tmp_path / "_data" / "icons.json").write_text(json.dumps({"icons": icons}), encoding="utf-8")
        (tmp_path / "icons").mkdir()
        for slug, svg in svgs.items():
            (tmp_path / "icons" / f"{slug}.svg").write_text(svg, encoding="utf-8")
        return get_build_paths(tmp_path)

    return make
