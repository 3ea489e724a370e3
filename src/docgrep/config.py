from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from docgrep.models import FieldWeights


class AppConfig(BaseModel):
    """Application-specific configuration values."""

    name: str = "docgrep"
    env: str = "development"
    # Verbose diagnostics: error details are logged and returned to callers
    debug: bool = False
    port: int = 8000
    log_level: str = "INFO"
    # Transport settings for FastMCP: "stdio" (default), "http", or "sse"
    transport: Literal["stdio", "http", "sse"] = "stdio"
    host: str = "127.0.0.1"


class CorpusConfig(BaseModel):
    """Source documents read once at startup."""

    path: str = "./documents"
    extensions: str = ".pdf, .md, .mdx, .html, .htm, .txt"  # Comma-separated
    # Upper bound on files extracted at the same time
    concurrency: int = 8

    def extension_set(self) -> List[str]:
        out: List[str] = []
        for part in self.extensions.split(","):
            ext = part.strip().lower()
            if not ext:
                continue
            if not ext.startswith("."):
                ext = "." + ext
            out.append(ext)
        return out


class SearchConfig(BaseModel):
    """Query-time field weights for the ranked lookup."""

    title_weight: float = 1.0
    body_weight: float = 2.0
    lines_weight: float = 3.0

    def weights(self) -> FieldWeights:
        return FieldWeights(
            title=self.title_weight, body=self.body_weight, lines=self.lines_weight
        )


class Settings(BaseSettings):
    """Top-level settings loaded from environment variables and .env only."""

    model_config = SettingsConfigDict(
        env_prefix="DOCGREP_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    app: AppConfig = AppConfig()
    corpus: CorpusConfig = CorpusConfig()
    search: SearchConfig = SearchConfig()


def load_settings() -> Settings:
    """Load settings from environment variables and .env only."""
    return Settings()  # type: ignore[call-arg]
