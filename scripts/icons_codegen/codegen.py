"""JavaScript and TypeScript source generation for the icon package."""

import json
import re
from dataclasses import dataclass, field, replace
from string import Template
from typing import Optional

from .errors import DuplicateSlugError
from .models import IconRecord, License
from .naming import slug_to_variable_name

SPDX_LICENSE_URL = "https://spdx.org/licenses/"

SVG_PROPERTY_DEPRECATION_WARNING = (
    "The `svg` property will be removed in the next major. "
    'Please use `import { getSvg } from "brand-icons/utils"` instead.'
)

_UNESCAPED_QUOTE = re.compile(r"(?<!\\)'")


def escape(value: str) -> str:
    """
    Backslash-escape every single quote that is not escaped already.

    Backslashes themselves pass through untouched, so a value with a lone or
    trailing backslash does not survive as the same JavaScript string.
    """
    return _UNESCAPED_QUOTE.sub(r"\\'", value)


def quote(value: str) -> str:
    return f"'{escape(value)}'"


def license_to_object(license: Optional[License]) -> Optional[License]:
    """
    Fill in the SPDX URL of a license that does not declare one.

    Returns a new License; the catalog's instance is left alone.
    """
    if license is None:
        return None
    if license.url is None:
        return replace(license, url=f"{SPDX_LICENSE_URL}{license.type}")
    return license


def icon_fields(icon: IconRecord) -> list[tuple[str, str]]:
    """
    Serialize the fields of an icon, in output order, as (key, literal) pairs.

    guidelines and license are left out when the icon has none.
    """
    fields = [
        ("title", quote(icon.title)),
        ("slug", quote(icon.slug or "")),
        ("path", quote(icon.path or "")),
        ("source", quote(icon.source)),
        ("hex", quote(icon.hex)),
    ]
    if icon.guidelines:
        fields.append(("guidelines", quote(icon.guidelines)))
    if (license := license_to_object(icon.license)) is not None:
        fields.append(
            ("license", f"{{type:{quote(license.type)},url:{quote(license.url or '')}}}")
        )
    return fields


def icon_to_object(icon: IconRecord, template: str) -> str:
    """Render an icon as an object literal using the icon-object template."""
    return Template(template).substitute(
        fields=",".join(f"{key}:{value}" for key, value in icon_fields(icon))
    ).strip()


def icon_to_key_value(icon: IconRecord, icon_object: str) -> str:
    return f"{quote(icon.slug or '')}:{icon_object}"


@dataclass
class Barrels:
    """Per-icon source fragments, one list per output, in catalog order."""

    index: list[str] = field(default_factory=list)  # 'slug':{...}
    js: list[str] = field(default_factory=list)  # iconFoo:{...},
    mjs: list[str] = field(default_factory=list)  # export const iconFoo={...}
    dts: list[str] = field(default_factory=list)  # export const iconFoo:I;


def build_barrels(icons: list[IconRecord], template: str) -> Barrels:
    """
    Serialize every enriched icon into the fragments of all outputs.

    Raises:
        DuplicateSlugError: If two slugs map to the same export identifier
    """
    barrels = Barrels()
    exported: dict[str, str] = {}

    for icon in icons:
        export_name = slug_to_variable_name(icon.slug or "")
        if export_name in exported:
            raise DuplicateSlugError(
                f"slugs '{exported[export_name]}' and '{icon.slug}' both export as {export_name}"
            )
        exported[export_name] = icon.slug or ""

        icon_object = icon_to_object(icon, template)
        barrels.index.append(icon_to_key_value(icon, icon_object))
        barrels.js.append(f"{export_name}:{icon_object},")
        barrels.mjs.append(f"export const {export_name}={icon_object};")
        barrels.dts.append(f"export const {export_name}:I;")

    return barrels


def deprecation_prelude() -> str:
    return f"const d = () => console.warn({json.dumps(SVG_PROPERTY_DEPRECATION_WARNING)});"


def generate_index_js(barrels: Barrels, template: str) -> str:
    """Fill the generic index template with every icon keyed by slug."""
    return Template(template).substitute(
        prelude=deprecation_prelude(),
        icons=",".join(barrels.index),
    )


def generate_icons_js(barrels: Barrels) -> str:
    return (
        "const {getSvg} = require('./utils.js');"
        + deprecation_prelude()
        + "module.exports={"
        + "".join(barrels.js)
        + "};"
    )


def generate_icons_mjs(barrels: Barrels) -> str:
    return (
        "import {getSvg} from './utils.mjs';"
        + deprecation_prelude()
        + "".join(barrels.mjs)
    )


def generate_icons_dts(barrels: Barrels) -> str:
    return 'import {Icon} from ".";type I = Icon;' + "".join(barrels.dts)
