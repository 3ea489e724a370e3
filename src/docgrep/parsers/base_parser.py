"""Abstract base classes and data structures for document parsers.

Parsers are responsible for extracting raw text and metadata from supported
document types (PDF, Markdown, HTML, plain text).

Concrete implementations should subclass `BaseParser` and implement
`can_parse()` and `parse()`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict


@dataclass(slots=True)
class ParsedDocument:
    """Container for parsed document outputs.

    ``text`` keeps the line structure of the source: one logical line of the
    document per line of text.
    """

    text: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)


class BaseParser(ABC):
    """Abstract parser interface."""

    extensions: frozenset[str] = frozenset()

    def can_parse(self, path: Path) -> bool:
        """Return True if this parser can handle the given file/path."""
        return path.suffix.lower() in self.extensions

    @abstractmethod
    def parse(self, path: Path) -> ParsedDocument:
        """Parse the file and return a `ParsedDocument`.

        Implementations may raise any exception on unreadable or corrupt input;
        `ParserRegistry.parse` normalizes them to `docgrep.exceptions.ParsingError`.
        """
        raise NotImplementedError
