"""
Pydantic models for the site build pipeline.
"""

import os
from pathlib import Path
from typing import Dict, List
from pydantic import BaseModel, Field, field_validator


MARKUP_EXTENSION = ".md"
PAGE_EXTENSION = ".html"
ROOT_TEMPLATE = "base.html"
TEMPLATE_PATTERN = "*.html"
DEFAULT_PORT = 8080


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Page(BaseModel):
    """One rendered output page, built right before template rendering."""
    title: str
    content: str  # rendered HTML, embedded verbatim by the template


class SiteConfig(BaseModel):
    """Directories and server settings for a single run."""
    content_dir: Path = Path("content")
    templates_dir: Path = Path("templates")
    static_dir: Path = Path("static")
    out_dir: Path = Path("public")
    root_template: str = ROOT_TEMPLATE
    host: str = ""
    port: int = DEFAULT_PORT
    listing: bool = True

    @field_validator("port")
    @classmethod
    def _check_port(cls, value: int) -> int:
        # 0 lets the OS pick a free port
        if not (0 <= value <= 65535):
            raise ValueError(f"Port must be between 0 and 65535, got: {value}")
        return value

    @classmethod
    def from_env(cls, **overrides) -> "SiteConfig":
        """
        Build a config from MDSITE_* environment variables.

        Keyword overrides that are not None win over the environment.
        """
        values = {
            "content_dir": os.getenv("MDSITE_CONTENT_DIR", "content"),
            "templates_dir": os.getenv("MDSITE_TEMPLATES_DIR", "templates"),
            "static_dir": os.getenv("MDSITE_STATIC_DIR", "static"),
            "out_dir": os.getenv("MDSITE_OUT_DIR", "public"),
            "host": os.getenv("MDSITE_HOST", ""),
            "port": os.getenv("MDSITE_PORT", str(DEFAULT_PORT)),
            "listing": _env_flag("MDSITE_LISTING", True),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


class BuildResult(BaseModel):
    """Outcome of one full build."""
    generated: List[Path] = Field(default_factory=list)
    failed: Dict[Path, str] = Field(default_factory=dict)
    assets: List[Path] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    @property
    def failure_count(self) -> int:
        return len(self.failed)

    def summary(self) -> str:
        return (
            f"{len(self.generated)} pages generated, "
            f"{self.failure_count} failed, "
            f"{len(self.assets)} assets copied"
        )


class ServeInfo(BaseModel):
    """Address the static server ended up bound to."""
    host: str
    port: int
    directory: Path
    listing: bool = True

    @property
    def url(self) -> str:
        return f"http://{self.host or 'localhost'}:{self.port}"
