"""
SQLite-backed document storage.

Each document is a JSON blob in a single `documents` table keyed by
(collection, id). Good enough for a single-process deployment.

sqlite3 is blocking, so every call runs in a worker thread via
`asyncio.to_thread`. One connection is shared by those threads and a lock
serializes access to it; read-modify-write operations hold the lock for the
whole sequence.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sqlite3
import threading
from pathlib import Path
from typing import Any

from bloglist.core.errors import InfrastructureError
from bloglist.core.utils import generate_id
from bloglist.storage.base import DocumentStore

logger = logging.getLogger(__name__)


_SCHEMA = """
CREATE TABLE IF NOT EXISTS documents (
    collection TEXT NOT NULL,
    id TEXT NOT NULL,
    body TEXT NOT NULL,
    PRIMARY KEY (collection, id)
)
"""


class SqliteDocumentStore(DocumentStore):
    """Document storage on a local SQLite file (or ":memory:")."""

    def __init__(self, path: str):
        self.path = path
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    async def connect(self) -> None:
        if self._conn is not None:
            return
        await asyncio.to_thread(self._open)
        logger.info("Connected to SQLite database at %s", self.path)

    async def close(self) -> None:
        if self._conn is not None:
            await asyncio.to_thread(self._close)
            logger.info("Closed SQLite database at %s", self.path)

    def _open(self) -> None:
        if self.path != ":memory:":
            Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        try:
            # Used from asyncio.to_thread workers, never concurrently.
            conn = sqlite3.connect(self.path, check_same_thread=False)
            conn.execute(_SCHEMA)
            conn.commit()
        except sqlite3.Error as e:
            raise InfrastructureError(f"cannot open database {self.path}: {e}") from e
        with self._lock:
            self._conn = conn

    def _close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    # -------------------------------------------------------------------------
    # Blocking helpers; callers hold self._lock
    # -------------------------------------------------------------------------

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        if self._conn is None:
            raise InfrastructureError("database is not connected")
        try:
            cur = self._conn.execute(sql, params)
            self._conn.commit()
            return cur
        except sqlite3.Error as e:
            raise InfrastructureError(f"database error: {e}") from e

    def _get(self, kind: str, id: str) -> dict[str, Any] | None:
        row = self._execute(
            "SELECT body FROM documents WHERE collection=? AND id=?",
            (kind, id),
        ).fetchone()
        return json.loads(row[0]) if row else None

    def _find_all(self, kind: str) -> list[dict[str, Any]]:
        with self._lock:
            rows = self._execute(
                "SELECT body FROM documents WHERE collection=? ORDER BY rowid",
                (kind,),
            ).fetchall()
        return [json.loads(row[0]) for row in rows]

    def _find_by_id(self, kind: str, id: str) -> dict[str, Any] | None:
        with self._lock:
            return self._get(kind, id)

    def _create(self, kind: str, doc: dict[str, Any]) -> dict[str, Any]:
        stored = {**doc, "id": generate_id()}
        with self._lock:
            self._execute(
                "INSERT INTO documents (collection, id, body) VALUES (?,?,?)",
                (kind, stored["id"], json.dumps(stored)),
            )
        return stored

    def _update(self, kind: str, id: str, patch: dict[str, Any]) -> dict[str, Any] | None:
        with self._lock:
            doc = self._get(kind, id)
            if doc is None:
                return None
            doc.update({k: v for k, v in patch.items() if k != "id"})
            self._execute(
                "UPDATE documents SET body=? WHERE collection=? AND id=?",
                (json.dumps(doc), kind, id),
            )
        return doc

    def _delete(self, kind: str, id: str) -> dict[str, Any] | None:
        with self._lock:
            doc = self._get(kind, id)
            if doc is None:
                return None
            self._execute(
                "DELETE FROM documents WHERE collection=? AND id=?",
                (kind, id),
            )
        return doc

    # -------------------------------------------------------------------------
    # DocumentStore
    # -------------------------------------------------------------------------

    async def find_all(self, kind: str) -> list[dict[str, Any]]:
        return await asyncio.to_thread(self._find_all, kind)

    async def find_by_id(self, kind: str, id: str) -> dict[str, Any] | None:
        return await asyncio.to_thread(self._find_by_id, kind, id)

    async def create(self, kind: str, doc: dict[str, Any]) -> dict[str, Any]:
        return await asyncio.to_thread(self._create, kind, doc)

    async def update_by_id(
        self, kind: str, id: str, patch: dict[str, Any]
    ) -> dict[str, Any] | None:
        return await asyncio.to_thread(self._update, kind, id, patch)

    async def delete_by_id(self, kind: str, id: str) -> dict[str, Any] | None:
        return await asyncio.to_thread(self._delete, kind, id)
