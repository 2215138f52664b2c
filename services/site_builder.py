"""
Site builder service for static HTML files.
Converts content/**/*.md into out/**/*.html through the root template.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import Optional

from models import BuildResult, Page, SiteConfig
from services.assets import copy_static
from services.errors import BuildError, DocumentError, OutputDirError
from services.markdown_converter import MarkdownConverter
from services.pages import derive_title, is_markup_file, output_path_for
from services.templates import TemplateRegistry

logger = logging.getLogger(__name__)


class SiteBuilder:
    """Builds the static site into the configured output directory."""

    def __init__(self, config: Optional[SiteConfig] = None,
                 registry: Optional[TemplateRegistry] = None,
                 converter: Optional[MarkdownConverter] = None):
        self.config = config or SiteConfig()
        self.registry = registry
        self.converter = converter or MarkdownConverter()

    @property
    def output_dir(self) -> Path:
        return self.config.out_dir

    def build(self) -> BuildResult:
        """
        Run the full build: reset output, copy assets, render every document.

        Fatal problems (output directory, static assets, templates, missing
        content directory) raise BuildError. A failing document is logged
        and recorded in the result; the remaining documents are still built.
        """
        result = BuildResult()

        self._reset_output_dir()
        result.assets = copy_static(self.config.static_dir, self.output_dir)

        if self.registry is None:
            self.registry = TemplateRegistry(self.config.templates_dir, self.config.root_template)

        content_dir = self.config.content_dir
        if not content_dir.is_dir():
            raise BuildError(f"Content directory not found: {content_dir}")

        for source in self._iter_documents(content_dir, result):
            try:
                out_path = self.build_page(source)
            except (DocumentError, OSError) as e:
                logger.error(f"✗ Failed to build {source}: {e}")
                result.failed[source] = str(e)
                continue
            logger.info(f"✓ Generated {out_path}")
            result.generated.append(out_path)

        if result.ok:
            logger.info(f"Site build completed: {result.summary()}")
        else:
            logger.warning(f"Site build completed with {result.failure_count} failures: {result.summary()}")
        return result

    def build_page(self, source: Path) -> Path:
        """Convert a single content document and write its page."""
        data = source.read_bytes()
        html = self.converter.convert(data)

        rel = source.relative_to(self.config.content_dir)
        out_path = output_path_for(rel, self.output_dir)
        out_path.parent.mkdir(parents=True, exist_ok=True)

        page = Page(title=derive_title(rel), content=html)
        return self.registry.render_to(page, out_path)

    def _reset_output_dir(self):
        out = self.output_dir
        try:
            if out.exists():
                shutil.rmtree(out)
            out.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirError(f"Failed to reset output directory {out}: {e}") from e

    @staticmethod
    def _iter_documents(content_dir: Path, result: BuildResult):
        def _record(error: OSError):
            path = Path(error.filename) if error.filename else content_dir
            logger.error(f"✗ Failed to read directory {path}: {error}")
            result.failed[path] = str(error)

        for dirpath, dirnames, filenames in os.walk(content_dir, onerror=_record):
            dirnames.sort()
            for name in sorted(filenames):
                path = Path(dirpath) / name
                if is_markup_file(path):
                    yield path

    def get_built_files(self) -> list[Path]:
        """Get list of built pages."""
        if not self.output_dir.exists():
            return []

        return sorted(self.output_dir.rglob("*.html"))
