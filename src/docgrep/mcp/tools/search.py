"""Search tools for FastMCP.

The tool is a relay: it forwards the query to `SearchService.search` and
returns the success or error payload verbatim.
"""
from __future__ import annotations

from typing import Any, Callable, Dict

from fastmcp import FastMCP


def register_search_tools(mcp: FastMCP, get_state: Callable[[], Any]) -> None:
    """Register search tools on the given FastMCP instance.

    The `get_state` callable should return an object with attribute
    `service` exposing `async search(query_text)`.
    """

    @mcp.tool
    async def search(query: str) -> Dict[str, Any]:
        """Search the document corpus for lines containing `query`.

        Returns `{"results": [{"ref", "score", "matchingLines"}]}` on success,
        or `{"error", "kind", "retryable", "details"?}` on failure. A
        `service_not_ready` error means the corpus is still being indexed.
        """
        state = get_state()
        if state is None or getattr(state, "service", None) is None:
            raise RuntimeError("Search service is not configured.")
        payload = await state.service.search(query)
        return payload.to_dict()
