from typing import List, Optional

import pytest

from docgrep.engine import QueryEngine, filter_lines
from docgrep.exceptions import QueryExecutionFault, ServiceNotReady
from docgrep.models import Document, FieldWeights
from docgrep.readiness import ReadinessGate
from docgrep.search import BaseSearch, IndexBuilder, RankedHit


class FixedIndex(BaseSearch):
    """Index double returning a predetermined ranking."""

    def __init__(self, hits: List[RankedHit], error: Optional[Exception] = None) -> None:
        self.hits = hits
        self.error = error

    def add_document(self, doc: Document) -> None:
        pass

    def commit(self) -> None:
        pass

    def ranked_lookup(self, query: str, weights: Optional[FieldWeights] = None) -> List[RankedHit]:
        if self.error is not None:
            raise self.error
        return list(self.hits)


def ready_gate(*docs: Document, index: Optional[BaseSearch] = None) -> ReadinessGate:
    builder = IndexBuilder(index=index)
    for doc in docs:
        builder.add_document(doc)
    gate = ReadinessGate()
    gate.mark_ready(builder.build())
    return gate


def test_filter_lines_is_literal_and_case_sensitive() -> None:
    lines = ("The quick fox", "QUICK", "quickly now", "slow")
    assert filter_lines(lines, "quick") == ("The quick fox", "quickly now")


@pytest.mark.asyncio
async def test_search_returns_only_literally_matching_lines() -> None:
    gate = ready_gate(
        Document.from_text("a", "The quick fox\nJumps high\n"),
        Document.from_text("b", "No match here\n"),
    )

    results = await QueryEngine(gate).search("quick")

    assert len(results) == 1
    assert results[0].ref == "a"
    assert results[0].matching_lines == ("The quick fox",)
    assert results[0].score >= 0


@pytest.mark.asyncio
async def test_search_before_ready_raises_service_not_ready() -> None:
    with pytest.raises(ServiceNotReady):
        await QueryEngine(ReadinessGate()).search("quick")


@pytest.mark.asyncio
async def test_title_only_match_is_dropped() -> None:
    gate = ready_gate(
        Document.from_text("budget.txt", "Totals for the year\n"),
        Document.from_text("notes.txt", "see budget for details\n"),
    )

    results = await QueryEngine(gate).search("budget")

    assert [r.ref for r in results] == ["notes.txt"]


@pytest.mark.asyncio
async def test_ranked_but_case_mismatched_document_is_dropped() -> None:
    gate = ready_gate(Document.from_text("a", "Quick start guide\n"))
    # The tokenized index lowercases, the line filter does not
    assert await QueryEngine(gate).search("quick") == []


@pytest.mark.asyncio
async def test_filtering_preserves_ranked_order() -> None:
    docs = [
        Document.from_text("one", "alpha beta\n"),
        Document.from_text("two", "nothing\n"),
        Document.from_text("three", "alpha\nalpha again\n"),
    ]
    index = FixedIndex([("three", 3.0), ("two", 2.0), ("one", 1.0)])
    gate = ready_gate(*docs, index=index)

    results = await QueryEngine(gate).search("alpha")

    assert [(r.ref, r.score) for r in results] == [("three", 3.0), ("one", 1.0)]
    assert results[0].matching_lines == ("alpha", "alpha again")


@pytest.mark.asyncio
async def test_lookup_failure_becomes_query_execution_fault() -> None:
    gate = ready_gate(index=FixedIndex([], error=ValueError("segment corrupted")))

    with pytest.raises(QueryExecutionFault) as exc_info:
        await QueryEngine(gate).search("anything")

    assert isinstance(exc_info.value.__cause__, ValueError)


@pytest.mark.asyncio
async def test_missing_store_entry_becomes_query_execution_fault() -> None:
    gate = ready_gate(index=FixedIndex([("ghost", 1.0)]))
    with pytest.raises(QueryExecutionFault):
        await QueryEngine(gate).search("anything")


@pytest.mark.asyncio
async def test_blank_query_returns_empty_once_ready() -> None:
    gate = ready_gate(Document.from_text("a", "text\n"))
    assert await QueryEngine(gate).search("  ") == []


@pytest.mark.asyncio
async def test_query_with_operator_keyword_matches_literal_line() -> None:
    gate = ready_gate(
        Document.from_text("a.txt", "Page NOT found\n"),
        Document.from_text("b.txt", "unrelated words\n"),
    )

    results = await QueryEngine(gate).search("NOT found")

    assert [r.ref for r in results] == ["a.txt"]
    assert results[0].matching_lines == ("Page NOT found",)
