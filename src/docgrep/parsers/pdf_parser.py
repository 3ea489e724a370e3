"""PDF parser backed by `pypdf`."""

from __future__ import annotations

from pathlib import Path

from pypdf import PdfReader

from .base_parser import BaseParser, ParsedDocument


class PDFParser(BaseParser):
    """Extract the text layer of every page, pages separated by a newline."""

    extensions = frozenset({".pdf"})

    def parse(self, path: Path) -> ParsedDocument:
        reader = PdfReader(path)
        pages = [page.extract_text() or "" for page in reader.pages]
        return ParsedDocument(
            text="\n".join(pages),
            metadata={"source_path": str(path), "pages": len(pages)},
        )
