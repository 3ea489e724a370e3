from .store import DocumentStore

__all__ = ["DocumentStore"]
