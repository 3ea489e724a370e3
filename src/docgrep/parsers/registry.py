"""Extension-based dispatch over the available parsers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from docgrep.exceptions import ParsingError

from .base_parser import BaseParser, ParsedDocument
from .html_parser import HTMLParser
from .markdown_parser import MarkdownParser
from .pdf_parser import PDFParser
from .text_parser import TextParser

logger = logging.getLogger(__name__)


class ParserRegistry:
    """Pick the first parser that accepts a path and normalize its failures."""

    def __init__(self, parsers: Optional[Iterable[BaseParser]] = None) -> None:
        if parsers is None:
            parsers = [PDFParser(), MarkdownParser(), HTMLParser(), TextParser()]
        self._parsers: List[BaseParser] = list(parsers)

    def parser_for(self, path: Path) -> Optional[BaseParser]:
        for parser in self._parsers:
            if parser.can_parse(path):
                return parser
        return None

    def supports(self, path: Path) -> bool:
        return self.parser_for(path) is not None

    def parse(self, path: Path) -> ParsedDocument:
        """Parse ``path`` with the matching parser.

        Raises `ParsingError` for unsupported files and for any failure raised
        by the parser, chained to the original exception.
        """
        parser = self.parser_for(path)
        if parser is None:
            raise ParsingError(f"No parser available for '{path.name}'")
        logger.debug("Parsing %s with %s", path.name, type(parser).__name__)
        try:
            return parser.parse(path)
        except ParsingError:
            raise
        except Exception as e:
            raise ParsingError(f"Failed to parse '{path.name}': {e}") from e
