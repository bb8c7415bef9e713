#!/usr/bin/env python3
"""
Compile the icon catalog into static JavaScript that can be imported in the
browser and is tree-shakeable.

Generates, relative to the repository root:
1. icons.js / icons.mjs: one export per icon (CommonJS and ES module)
2. icons.d.ts: a type declaration for every export
3. index.js: all icons keyed by slug plus getIcon(slug), not tree-shakeable
4. utils.js: a CommonJS build of utils.mjs

Usage: python scripts/build_package.py
"""

import asyncio
from typing import Optional

from icons_codegen.catalog import (
    UTF8,
    BuildPaths,
    check_unique_slugs,
    get_build_paths,
    load_icons_data,
)
from icons_codegen.codegen import (
    build_barrels,
    generate_icons_dts,
    generate_icons_js,
    generate_icons_mjs,
    generate_index_js,
)
from icons_codegen.errors import MissingAssetError
from icons_codegen.models import IconRecord
from icons_codegen.naming import get_icon_slug
from icons_codegen.svg import svg_to_path
from icons_codegen.transform import (
    Transform,
    esbuild_transform,
    write_js,
    write_text,
    write_ts,
)


async def read_text(path) -> str:
    return await asyncio.to_thread(path.read_text, encoding=UTF8)


async def enrich_icon(icon: IconRecord, paths: BuildPaths) -> IconRecord:
    """
    Load the SVG of an icon and attach its markup, path data and slug.

    Raises:
        MissingAssetError: If icons/<slug>.svg does not exist
        ExtractionError: If the SVG has no path data
    """
    slug = get_icon_slug(icon)
    svg_filepath = paths.icons_dir / f"{slug}.svg"
    try:
        svg = await read_text(svg_filepath)
    except FileNotFoundError as exc:
        raise MissingAssetError(f"no SVG for icon '{icon.title}': {svg_filepath}") from exc

    icon.svg = svg.replace("\r", "").replace("\n", "")
    icon.path = svg_to_path(icon.svg)
    icon.slug = slug
    return icon


async def enrich_icons(icons: list[IconRecord], paths: BuildPaths) -> None:
    """Enrich all icons concurrently; the first failure cancels the rest."""
    tasks = [asyncio.ensure_future(enrich_icon(icon, paths)) for icon in icons]
    try:
        await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise


async def build(
    paths: Optional[BuildPaths] = None, transform: Transform = esbuild_transform
) -> None:
    if paths is None:
        paths = get_build_paths()

    icons, index_template, icon_object_template, utils_mjs = await asyncio.gather(
        asyncio.to_thread(load_icons_data, paths.data_file),
        read_text(paths.index_template_file),
        read_text(paths.icon_object_template_file),
        read_text(paths.utils_mjs_file),
    )
    print(f"Found {len(icons)} icons")

    check_unique_slugs(icons)
    await enrich_icons(icons, paths)

    barrels = build_barrels(icons, icon_object_template)

    # write our generic index.js
    print(f"Generating {paths.index_file}")
    write_js(paths.index_file, generate_index_js(barrels, index_template), transform)

    # the exports of all icons in CommonJS ...
    print(f"Generating {paths.icons_js_file}")
    write_js(paths.icons_js_file, generate_icons_js(barrels), transform)

    # ... and ESM
    print(f"Generating {paths.icons_mjs_file}")
    write_js(paths.icons_mjs_file, generate_icons_mjs(barrels), transform)

    print(f"Generating {paths.icons_dts_file}")
    write_ts(paths.icons_dts_file, generate_icons_dts(barrels))

    print(f"Generating {paths.utils_js_file}")
    write_text(paths.utils_js_file, transform(utils_mjs, format="cjs", target=None))

    print("\nDone!")
    print(f"Generated {len(barrels.mjs)} icon exports")


def main():
    asyncio.run(build())


if __name__ == "__main__":
    main()
