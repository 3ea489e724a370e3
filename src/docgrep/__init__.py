"""docgrep: line-level full-text search over a static document corpus."""

__version__ = "0.1.0"
