"""
Jinja2 template registry used to wrap rendered pages.
"""

import fnmatch
import logging
from pathlib import Path
from typing import Dict, Optional

from jinja2 import Environment, FileSystemLoader, Template, TemplateError, TemplateNotFound, select_autoescape
from markupsafe import Markup

from models import Page, ROOT_TEMPLATE, TEMPLATE_PATTERN
from services.errors import RenderError, TemplateLoadError

logger = logging.getLogger(__name__)


class TemplateRegistry:
    """Loads every page template once and renders pages through them.

    All templates matching the pattern are compiled up front, so a broken
    template fails the run at startup instead of halfway through a build.
    """

    def __init__(self, templates_dir: Path, root_template: str = ROOT_TEMPLATE,
                 pattern: str = TEMPLATE_PATTERN):
        self.templates_dir = Path(templates_dir)
        self.root_template = root_template
        self.pattern = pattern

        if not self.templates_dir.is_dir():
            raise TemplateLoadError(f"Templates directory not found: {self.templates_dir}")

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "htm", "xml"]),
            keep_trailing_newline=True,
        )
        self.templates: Dict[str, Template] = self._load_all()

        if self.root_template not in self.templates:
            raise TemplateLoadError(
                f"Root template '{self.root_template}' not found in {self.templates_dir}"
            )

    def _load_all(self) -> Dict[str, Template]:
        """
        Compile every template in the top level of the templates directory.

        Subdirectories are not scanned up front; templates there can still
        be pulled in with {% include %} or {% extends %} at render time.
        """
        names = self.env.list_templates(
            filter_func=lambda n: "/" not in n and fnmatch.fnmatch(n, self.pattern)
        )
        if not names:
            raise TemplateLoadError(
                f"No templates matching '{self.pattern}' in {self.templates_dir}"
            )

        templates = {}
        for name in names:
            try:
                templates[name] = self.env.get_template(name)
            except TemplateError as e:
                raise TemplateLoadError(f"Failed to load template {name}: {e}") from e
            except (OSError, UnicodeDecodeError) as e:
                raise TemplateLoadError(f"Failed to read template {name}: {e}") from e

        logger.info(f"✓ Loaded {len(templates)} templates from {self.templates_dir}")
        return templates

    def render(self, page: Page, name: Optional[str] = None) -> str:
        """
        Render a page through the named template (root template by default).

        The page content is inserted as-is; the title is escaped.
        """
        name = name or self.root_template
        template = self.templates.get(name)
        if template is None:
            raise RenderError(f"Template '{name}' not found")

        content = Markup(page.content)
        page = page.model_copy(update={"content": content})
        try:
            return template.render(page=page, title=page.title, content=content)
        except TemplateNotFound as e:
            raise RenderError(f"Template '{name}' references missing template: {e}") from e
        except Exception as e:
            raise RenderError(f"Template '{name}' failed: {e}") from e

    def render_to(self, page: Page, out_path: Path, name: Optional[str] = None) -> Path:
        """Render a page and write it to out_path."""
        html = self.render(page, name)
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(html)
        return out_path
