"""
Shared utilities for the icon package build.

This package holds the pieces the build script (build_package.py) is
assembled from: the catalog loader, slug and identifier naming, SVG path
extraction, the JavaScript serializer and the esbuild wrapper.
"""

__version__ = "1.0.0"
