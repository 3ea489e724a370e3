"""In-memory authoritative mapping from document id to Document.

The store lives for the process lifetime only; nothing is persisted.
"""

from __future__ import annotations

from typing import Dict, Iterator

from docgrep.exceptions import IndexInsertionConflict
from docgrep.models import Document


class DocumentStore:
    """Id-keyed document lookup with insert-once semantics."""

    def __init__(self) -> None:
        self._docs: Dict[str, Document] = {}

    def add(self, doc: Document) -> None:
        if doc.id in self._docs:
            raise IndexInsertionConflict(doc.id)
        self._docs[doc.id] = doc

    def get(self, doc_id: str) -> Document:
        """Return the document with ``doc_id``; raises KeyError when absent."""
        return self._docs[doc_id]

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._docs

    def __len__(self) -> int:
        return len(self._docs)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._docs.values())
