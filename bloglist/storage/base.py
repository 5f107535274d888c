"""
Storage abstraction layer.

All persistence goes through the DocumentStore interface. This allows
swapping implementations (in-memory -> SQLite -> a hosted document
database) without changing application code.

Documents are plain dicts keyed by an "id" field that the store
generates on create.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable


# =============================================================================
# Storage Interface
# =============================================================================


class DocumentStore(ABC):
    """
    Storage for structured documents (accounts, posts).

    Lifecycle: `connect()` once at app startup, `close()` at shutdown.
    Each single-document write is atomic; nothing spans documents.
    """

    async def connect(self) -> None:
        """Open underlying connections. No-op by default."""

    async def close(self) -> None:
        """Release underlying connections. No-op by default."""

    @abstractmethod
    async def find_all(self, kind: str) -> list[dict[str, Any]]:
        """Return every document of a kind, in insertion order."""
        pass

    @abstractmethod
    async def find_by_id(self, kind: str, id: str) -> dict[str, Any] | None:
        """Get a document by ID."""
        pass

    @abstractmethod
    async def create(self, kind: str, doc: dict[str, Any]) -> dict[str, Any]:
        """Insert a document, assigning a fresh ID. Returns the stored document."""
        pass

    @abstractmethod
    async def update_by_id(
        self, kind: str, id: str, patch: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Merge `patch` into a document. Returns the updated document or None."""
        pass

    @abstractmethod
    async def delete_by_id(self, kind: str, id: str) -> dict[str, Any] | None:
        """Delete a document. Returns the deleted document or None."""
        pass

    async def find_one(
        self, kind: str, filters: dict[str, Any]
    ) -> dict[str, Any] | None:
        """First document whose fields equal every value in `filters`."""
        for doc in await self.find_all(kind):
            if all(doc.get(key) == value for key, value in filters.items()):
                return doc
        return None

    async def populate(
        self,
        doc: dict[str, Any],
        relation: str,
        kind: str,
        fields: Iterable[str],
    ) -> dict[str, Any]:
        """
        Expand a reference field into (projected) referenced documents.

        `doc[relation]` may hold a single ID or a list of IDs. Single
        references to missing documents become None; missing entries in
        a list are dropped. Returns a new dict, `doc` is left untouched.
        """
        fields = list(fields)
        ref = doc.get(relation)
        out = dict(doc)

        if isinstance(ref, list):
            expanded = []
            for ref_id in ref:
                target = await self.find_by_id(kind, str(ref_id))
                if target is not None:
                    expanded.append(_project(target, fields))
            out[relation] = expanded
        elif ref is not None:
            target = await self.find_by_id(kind, str(ref))
            out[relation] = _project(target, fields) if target is not None else None

        return out


def _project(doc: dict[str, Any], fields: list[str]) -> dict[str, Any]:
    return {f: doc.get(f) for f in fields}


# =============================================================================
# Collection Names
# =============================================================================


class Collections:
    """Standard collection/table names."""

    USERS = "users"
    BLOGS = "blogs"
