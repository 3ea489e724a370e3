"""Core data structures shared by the extraction pipeline and the query engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Dict, List, Tuple, Union


def split_lines(text: str) -> Tuple[str, ...]:
    """Split text on line breaks, dropping blank and whitespace-only lines.

    Order is preserved and kept lines are not stripped.
    """
    return tuple(line for line in text.splitlines() if line.strip())


@dataclass(frozen=True, slots=True)
class Document:
    """An immutable indexed unit derived from one source file.

    Attributes
    ----------
    id: str
        Unique identifier, the source filename.
    title: str
        The filename without its extension.
    body: str
        Full extracted text, unmodified.
    lines: tuple[str, ...]
        Non-blank lines of ``body`` in their original order.
    """

    id: str
    title: str
    body: str
    lines: Tuple[str, ...] = ()

    @classmethod
    def from_text(cls, filename: str, text: str) -> "Document":
        return cls(
            id=filename,
            title=PurePath(filename).stem,
            body=text,
            lines=split_lines(text),
        )


@dataclass(frozen=True, slots=True)
class ExtractionFailure:
    """A file that could not be turned into a Document."""

    file: str
    cause: BaseException


ExtractionOutcome = Union[Document, ExtractionFailure]


@dataclass(frozen=True, slots=True)
class FieldWeights:
    """Multipliers applied to each field's contribution to the ranked score."""

    title: float = 1.0
    body: float = 2.0
    lines: float = 3.0

    def __post_init__(self) -> None:
        for name in ("title", "body", "lines"):
            if getattr(self, name) < 0:
                raise ValueError(f"Field weight '{name}' must be non-negative")

    def as_boosts(self) -> Dict[str, float]:
        return {"title": self.title, "body": self.body, "lines": self.lines}


@dataclass(frozen=True, slots=True)
class SearchResult:
    """A ranked document together with the lines that literally match the query."""

    ref: str
    score: float
    matching_lines: Tuple[str, ...]


@dataclass(slots=True)
class BootstrapReport:
    """Summary of one bootstrap run."""

    documents: int = 0
    failures: List[ExtractionFailure] = field(default_factory=list)
