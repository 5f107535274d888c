"""
In-memory storage implementation for development and tests.

Works without any external services; everything is lost on restart.
"""

from __future__ import annotations

import copy
from typing import Any

from bloglist.core.utils import generate_id
from bloglist.storage.base import DocumentStore


class InMemoryDocumentStore(DocumentStore):
    """In-memory document storage."""

    def __init__(self):
        self._data: dict[str, dict[str, dict[str, Any]]] = {}

    async def close(self) -> None:
        self._data.clear()

    async def find_all(self, kind: str) -> list[dict[str, Any]]:
        return [copy.deepcopy(doc) for doc in self._data.get(kind, {}).values()]

    async def find_by_id(self, kind: str, id: str) -> dict[str, Any] | None:
        doc = self._data.get(kind, {}).get(id)
        return copy.deepcopy(doc) if doc is not None else None

    async def create(self, kind: str, doc: dict[str, Any]) -> dict[str, Any]:
        stored = {**copy.deepcopy(doc), "id": generate_id()}
        self._data.setdefault(kind, {})[stored["id"]] = stored
        return copy.deepcopy(stored)

    async def update_by_id(
        self, kind: str, id: str, patch: dict[str, Any]
    ) -> dict[str, Any] | None:
        doc = self._data.get(kind, {}).get(id)
        if doc is None:
            return None
        doc.update({k: copy.deepcopy(v) for k, v in patch.items() if k != "id"})
        return copy.deepcopy(doc)

    async def delete_by_id(self, kind: str, id: str) -> dict[str, Any] | None:
        doc = self._data.get(kind, {}).pop(id, None)
        return copy.deepcopy(doc) if doc is not None else None
