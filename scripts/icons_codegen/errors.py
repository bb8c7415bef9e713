"""Errors raised while building the icon package."""


class BuildError(Exception):
    """Base class for every build failure."""


class MissingAssetError(BuildError, FileNotFoundError):
    """An icon's SVG file does not exist."""


class ExtractionError(BuildError):
    """No path data could be extracted from an icon's SVG."""


class DuplicateSlugError(BuildError):
    """Two catalog entries share a slug or an export identifier."""


class TransformError(BuildError):
    """esbuild is missing or rejected the generated source."""


class WriteError(BuildError):
    """An output file could not be written."""
