"""HTML parser that converts HTML into a `ParsedDocument`.

Block-level elements (paragraphs, headings, list items, table cells, ...)
end a line; inline markup stays within the line it belongs to.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup  # type: ignore[import-untyped]

from .base_parser import BaseParser, ParsedDocument

BLOCK_TAGS = [
    "address", "article", "aside", "blockquote", "dd", "div", "dl", "dt",
    "figcaption", "footer", "form", "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "hr", "li", "main", "nav", "ol", "p", "pre", "section",
    "table", "td", "th", "tr", "ul", "title",
]


class HTMLParser(BaseParser):
    """Parser for HTML content."""

    extensions = frozenset({".html", ".htm"})

    def parse(self, path: Path) -> ParsedDocument:
        """Parse an HTML file from disk."""
        html = path.read_text(encoding="utf-8")
        return self.parse_html_content(html, metadata={"source_path": str(path)})

    def parse_html_content(
        self, html: str, *, metadata: Optional[Dict[str, Any]] = None
    ) -> ParsedDocument:
        soup = BeautifulSoup(html, "html.parser")
        for tag in soup(["script", "style", "noscript"]):
            tag.decompose()
        for br in soup.find_all("br"):
            br.replace_with("\n")
        for tag in soup.find_all(BLOCK_TAGS):
            tag.insert_after("\n")

        lines = (line.strip() for line in soup.get_text().splitlines())
        text = "\n".join(line for line in lines if line)
        return ParsedDocument(text=text, metadata=metadata or {})
