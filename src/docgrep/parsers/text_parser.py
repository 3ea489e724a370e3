from __future__ import annotations

from pathlib import Path

from .base_parser import BaseParser, ParsedDocument


class TextParser(BaseParser):
    """Plain UTF-8 text, returned as-is."""

    extensions = frozenset({".txt"})

    def parse(self, path: Path) -> ParsedDocument:
        text = path.read_text(encoding="utf-8")
        return ParsedDocument(text=text, metadata={"source_path": str(path)})
