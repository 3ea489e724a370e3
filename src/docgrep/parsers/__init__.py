"""Document parsers keyed by file extension."""

from .base_parser import BaseParser, ParsedDocument
from .html_parser import HTMLParser
from .markdown_parser import MarkdownParser
from .pdf_parser import PDFParser
from .registry import ParserRegistry
from .text_parser import TextParser

__all__ = [
    "BaseParser",
    "ParsedDocument",
    "HTMLParser",
    "MarkdownParser",
    "PDFParser",
    "ParserRegistry",
    "TextParser",
]
