"""Abstract search interface for indexing and querying documents.

Defines the minimal surface for search backends (e.g., Whoosh), enabling
extensibility and testability via a common contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from docgrep.models import Document, FieldWeights

RankedHit = Tuple[str, float]


class BaseSearch(ABC):
    """Abstract interface for a build-once, read-many search index."""

    @abstractmethod
    def add_document(self, doc: Document) -> None:
        """Index the title, body and lines fields of a document."""

    @abstractmethod
    def commit(self) -> None:
        """Finish writing; the index is read-only afterwards."""

    @abstractmethod
    def ranked_lookup(
        self, query: str, weights: Optional[FieldWeights] = None
    ) -> List[RankedHit]:
        """Return ``(document id, score)`` pairs, best first."""
        raise NotImplementedError
