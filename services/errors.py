"""
Exception hierarchy for the site build and the static server.
"""

from pathlib import Path


class SiteError(Exception):
    """Base class for all mdsite errors."""


class BuildError(SiteError):
    """Fatal build error; the whole run is aborted."""


class OutputDirError(BuildError):
    """The output directory could not be cleared or recreated."""


class AssetCopyError(BuildError):
    """Copying the static asset tree failed part-way through."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to copy {path}: {cause}")


class TemplateLoadError(BuildError):
    """Templates could not be loaded at startup."""


class DocumentError(SiteError):
    """Failure that only affects a single content document."""


class ConversionError(DocumentError):
    """Markdown source could not be converted to HTML."""


class RenderError(DocumentError):
    """Page could not be rendered through the template."""


class ServerError(SiteError):
    """The static server could not bind or listen."""
