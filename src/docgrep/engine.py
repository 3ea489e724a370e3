"""Readiness-gated query execution.

A query runs in two stages: a tokenized, weighted ranked lookup against the
index, then a literal, case-sensitive substring filter over each ranked
document's stored lines. Documents without a literally matching line are
dropped; the ranked order of the survivors is kept.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, List, Optional, Tuple

from docgrep.exceptions import QueryExecutionFault
from docgrep.models import FieldWeights, SearchResult
from docgrep.readiness import ReadinessGate
from docgrep.search import Corpus, RankedHit

logger = logging.getLogger(__name__)


def filter_lines(lines: Iterable[str], needle: str) -> Tuple[str, ...]:
    """Lines containing ``needle`` verbatim, in their original order."""
    return tuple(line for line in lines if needle in line)


class QueryEngine:
    """Read-only search over the corpus published by a `ReadinessGate`."""

    def __init__(self, gate: ReadinessGate, weights: Optional[FieldWeights] = None) -> None:
        self._gate = gate
        self._weights = weights or FieldWeights()

    async def search(
        self, query_text: str, *, weights: Optional[FieldWeights] = None
    ) -> List[SearchResult]:
        """Return ranked results whose lines literally contain ``query_text``.

        Raises `ServiceNotReady` before bootstrap completes and
        `QueryExecutionFault` if the index or store fails.
        """
        corpus = self._gate.require_ready()
        if not query_text or not query_text.strip():
            return []

        try:
            ranked = await asyncio.to_thread(
                corpus.index.ranked_lookup, query_text, weights or self._weights
            )
        except Exception as e:
            raise QueryExecutionFault(f"Ranked lookup failed: {e}") from e

        results = self._collect(corpus, ranked, query_text)
        logger.debug(
            "Query %r: %d ranked, %d with matching lines", query_text, len(ranked), len(results)
        )
        return results

    @staticmethod
    def _collect(corpus: Corpus, ranked: List[RankedHit], query_text: str) -> List[SearchResult]:
        results: List[SearchResult] = []
        for ref, score in ranked:
            try:
                doc = corpus.store.get(ref)
            except Exception as e:
                raise QueryExecutionFault(f"Document '{ref}' missing from store: {e}") from e
            matching = filter_lines(doc.lines, query_text)
            if matching:
                results.append(SearchResult(ref=ref, score=score, matching_lines=matching))
        return results
