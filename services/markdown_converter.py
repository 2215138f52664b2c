"""
Markdown to HTML conversion for content documents.
"""

import logging
from typing import List, Optional

import markdown

from services.errors import ConversionError

logger = logging.getLogger(__name__)

# GitHub-flavoured set: tables, fences, ~~strikethrough~~, bare URL links, task lists
DEFAULT_EXTENSIONS = [
    "tables",
    "fenced_code",
    "sane_lists",
    "pymdownx.tilde",
    "pymdownx.magiclink",
    "pymdownx.tasklist",
]


class MarkdownConverter:
    """Converts Markdown document bytes to HTML.

    Raw HTML embedded in documents is passed through unescaped; nothing is
    sanitised here, so untrusted input must be filtered before it reaches
    the content tree.
    """

    def __init__(self, extensions: Optional[List] = None):
        if extensions is None:
            extensions = list(DEFAULT_EXTENSIONS)
        self.extensions = extensions
        self._md = markdown.Markdown(extensions=self.extensions, output_format="html")

    def convert(self, data: bytes) -> str:
        """
        Convert raw document bytes to an HTML fragment.

        Args:
            data: UTF-8 encoded Markdown source

        Returns:
            Rendered HTML

        Raises:
            ConversionError: If the input cannot be decoded or rendered
        """
        try:
            text = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ConversionError(f"Document is not valid UTF-8: {e}") from e

        try:
            return self._md.reset().convert(text)
        except Exception as e:
            raise ConversionError(f"Markdown conversion failed: {e}") from e
