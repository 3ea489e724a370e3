"""Custom exception hierarchy for docgrep.

These exceptions allow callers to discriminate error categories
and handle them appropriately while preserving the original context.
"""

from __future__ import annotations


class DocgrepError(Exception):
    """Base class for all docgrep exceptions."""


class ConfigError(DocgrepError):
    """Raised when configuration loading or validation fails."""


class ParsingError(DocgrepError):
    """Raised when a document fails to parse."""


class SearchError(DocgrepError):
    """Raised for search indexing/query issues.

    Subclasses carry a stable ``kind`` used by transports to pick a status,
    and a ``retryable`` hint for callers.
    """

    kind: str = "search_error"
    retryable: bool = False


class ServiceNotReady(SearchError):
    """Raised when a query arrives before the corpus finished bootstrapping."""

    kind = "service_not_ready"
    retryable = True

    def __init__(self, message: str = "Search index is not ready yet, retry later") -> None:
        super().__init__(message)


class QueryExecutionFault(SearchError):
    """Raised when the ranked lookup or the document store fails unexpectedly."""

    kind = "query_execution_fault"


class IndexInsertionConflict(SearchError):
    """Raised when a document id is inserted into the index twice."""

    kind = "index_insertion_conflict"

    def __init__(self, doc_id: str) -> None:
        super().__init__(f"Document '{doc_id}' is already indexed")
        self.doc_id = doc_id
