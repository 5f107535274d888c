"""
Storage abstractions.

- DocumentStore -> InMemoryDocumentStore (dev/tests) or SqliteDocumentStore
"""

from __future__ import annotations

from urllib.parse import urlparse

from bloglist.storage.base import DocumentStore, Collections
from bloglist.storage.local import InMemoryDocumentStore
from bloglist.storage.sqlite import SqliteDocumentStore


def create_storage(database_url: str) -> DocumentStore:
    """
    Build a (not yet connected) store from a database URL.

    Supported:
        memory://                  in-process, non-persistent
        sqlite:///relative.db      SQLite file
        sqlite:////abs/path.db     SQLite file, absolute path
    """
    url = (database_url or "memory://").strip()
    scheme = urlparse(url).scheme.lower()

    if scheme in ("", "memory"):
        return InMemoryDocumentStore()
    if scheme == "sqlite":
        path = url[len("sqlite:///"):] or ":memory:"
        return SqliteDocumentStore(path)

    raise ValueError(f"Unsupported database URL: {database_url}")


__all__ = [
    "DocumentStore",
    "Collections",
    "InMemoryDocumentStore",
    "SqliteDocumentStore",
    "create_storage",
]
