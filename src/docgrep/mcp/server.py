"""docgrep MCP server entrypoint using FastMCP.

Indexing starts in the background as soon as the server comes up; tools are
served immediately and answer `service_not_ready` until it finishes.
Run with:
  - poetry run docgrep-mcp
  - or: python -m docgrep.mcp.server (ensure PYTHONPATH includes ./src)
"""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

from fastmcp import FastMCP

from docgrep.config import Settings, load_settings
from docgrep.mcp.tools import register_search_tools
from docgrep.models import BootstrapReport
from docgrep.service import SearchService

logger = logging.getLogger(__name__)


class AppState:
    """Application state shared by MCP tools."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.service = SearchService.from_settings(settings)
        self.bootstrap_task: Optional[asyncio.Task[BootstrapReport]] = None

    def start_bootstrap(self) -> asyncio.Task[BootstrapReport]:
        """Schedule corpus indexing on the running loop."""
        if self.bootstrap_task is None:
            self.bootstrap_task = asyncio.create_task(self.service.bootstrap())
            self.bootstrap_task.add_done_callback(_log_bootstrap_outcome)
        return self.bootstrap_task


def _log_bootstrap_outcome(task: asyncio.Task[BootstrapReport]) -> None:
    if task.cancelled():
        logger.warning("Bootstrap was cancelled; search will stay unavailable")
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Bootstrap failed; search will stay unavailable", exc_info=exc)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Global state and server instance
_state: Optional[AppState] = None
mcp = FastMCP("docgrep MCP Server")


# ----- Tools -----

@mcp.tool
def health() -> str:
    """Simple health check tool."""
    return "ok"


# ----- Entrypoint -----

async def _serve(state: AppState) -> None:
    settings = state.settings
    state.start_bootstrap()
    # Choose transport based on configuration: stdio (default), http, or sse
    transport = settings.app.transport
    if transport in ("http", "sse"):
        await mcp.run_async(transport=transport, host=settings.app.host, port=settings.app.port)
    else:
        await mcp.run_async()


def main() -> None:
    """Initialize state, start indexing and run the MCP server."""
    global _state
    settings = load_settings()
    configure_logging(settings.app.log_level)
    state = AppState(settings)
    _state = state
    register_search_tools(mcp, get_state=lambda: _state)
    asyncio.run(_serve(state))


if __name__ == "__main__":  # pragma: no cover
    main()
