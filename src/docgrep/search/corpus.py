"""Bootstrap-time builder for the document store and its inverted index."""

from __future__ import annotations

from dataclasses import dataclass

from docgrep.exceptions import IndexInsertionConflict, SearchError
from docgrep.models import Document
from docgrep.storage import DocumentStore

from .base_search import BaseSearch
from .whoosh_index import WhooshIndex


@dataclass(frozen=True)
class Corpus:
    """The finished, read-only pair of store and index."""

    store: DocumentStore
    index: BaseSearch

    def __len__(self) -> int:
        return len(self.store)


class IndexBuilder:
    """Accumulates documents into a store and an index, then freezes both."""

    def __init__(self, index: BaseSearch | None = None) -> None:
        self._store = DocumentStore()
        self._index = index if index is not None else WhooshIndex()
        self._built = False

    def add_document(self, doc: Document) -> None:
        """Index and store ``doc``.

        Raises `IndexInsertionConflict` if the id is already present; the
        store and index are left untouched in that case.
        """
        if self._built:
            raise SearchError("Corpus is already built")
        if doc.id in self._store:
            raise IndexInsertionConflict(doc.id)
        self._index.add_document(doc)
        self._store.add(doc)

    def build(self) -> Corpus:
        if self._built:
            raise SearchError("Corpus is already built")
        self._index.commit()
        self._built = True
        return Corpus(store=self._store, index=self._index)
