"""Markdown/MDX parser.

Markdown is rendered to HTML first so that line breaks follow the same
block rules as HTML documents. Markup characters never reach the text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import markdown as md  # type: ignore[import-untyped]

from .base_parser import BaseParser, ParsedDocument
from .html_parser import HTMLParser


class MarkdownParser(BaseParser):
    """Parser for `.md` and `.mdx` files or content strings."""

    extensions = frozenset({".md", ".mdx"})

    def __init__(self) -> None:
        self._html = HTMLParser()
        # No "smarty": quotes must survive verbatim for literal line matching
        self._extensions = [
            "tables",
            "fenced_code",
            "sane_lists",
        ]

    def parse(self, path: Path) -> ParsedDocument:
        text = path.read_text(encoding="utf-8")
        return self.parse_markdown_content(text, metadata={"source_path": str(path)})

    def parse_markdown_content(
        self, markdown_text: str, *, metadata: Optional[Dict[str, Any]] = None
    ) -> ParsedDocument:
        html = md.markdown(markdown_text, extensions=self._extensions)
        return self._html.parse_html_content(html, metadata=metadata or {})
