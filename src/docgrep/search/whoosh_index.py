"""In-memory Whoosh index over the title, body and lines of each Document.

The index is written once during bootstrap and only searched afterwards.
Field weights are applied at query time as parser field boosts, so the same
index serves any weighting.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from whoosh import scoring
from whoosh.analysis import StemmingAnalyzer
from whoosh.fields import ID, TEXT, Schema
from whoosh.filedb.filestore import RamStorage
from whoosh.qparser import FieldsPlugin, MultifieldParser, OperatorsPlugin, OrGroup

from docgrep.exceptions import SearchError
from docgrep.models import Document, FieldWeights

from .base_search import BaseSearch, RankedHit

logger = logging.getLogger(__name__)

SEARCH_FIELDS = ["title", "body", "lines"]


def _make_schema() -> Schema:
    analyzer = StemmingAnalyzer()
    return Schema(
        docid=ID(stored=True, unique=True),
        title=TEXT(analyzer=analyzer),
        body=TEXT(analyzer=analyzer),
        lines=TEXT(analyzer=analyzer),
    )


class WhooshIndex(BaseSearch):
    """Weighted inverted index scored with BM25F."""

    def __init__(self) -> None:
        self._index = RamStorage().create_index(_make_schema())
        self._writer = self._index.writer(limitmb=32)
        self._committed = False

    @property
    def committed(self) -> bool:
        return self._committed

    def add_document(self, doc: Document) -> None:
        if self._committed:
            raise SearchError("Index is read-only once committed")
        self._writer.add_document(
            docid=doc.id,
            title=doc.title,
            body=doc.body,
            lines="\n".join(doc.lines),
        )

    def commit(self) -> None:
        if self._committed:
            return
        self._writer.commit()
        self._committed = True
        logger.debug("Committed index with %d documents", self._index.doc_count())

    def _parser(self, weights: FieldWeights) -> MultifieldParser:
        parser = MultifieldParser(
            SEARCH_FIELDS,
            schema=self._index.schema,
            fieldboosts=weights.as_boosts(),
            group=OrGroup,
        )
        # Plain terms only: no "field:value" prefixes, no AND/OR/NOT operators
        parser.remove_plugin_class(FieldsPlugin)
        parser.remove_plugin_class(OperatorsPlugin)
        return parser

    def ranked_lookup(
        self, query: str, weights: Optional[FieldWeights] = None
    ) -> List[RankedHit]:
        if not self._committed:
            raise SearchError("Index has not been committed yet")
        if not query or not query.strip():
            return []

        parser = self._parser(weights or FieldWeights())
        try:
            q = parser.parse(query)
        except Exception:
            # On parse failure, fall back to raw string as a phrase query
            q = parser.parse('"' + query.replace('"', " ") + '"')

        with self._index.searcher(weighting=scoring.BM25F()) as searcher:
            results = searcher.search(q, limit=None)
            return [(hit["docid"], max(0.0, float(hit.score or 0.0))) for hit in results]
