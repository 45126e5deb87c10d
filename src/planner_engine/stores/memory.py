"""In-memory document store.

Keeps documents in a dict, counts writes and can be told to fail reads
or writes, which makes it the store used by the tests and by callers
that persist elsewhere.
"""

from __future__ import annotations

import copy
from typing import Any

from planner_engine.exceptions import StoreReadError, StoreWriteError
from planner_engine.stores.base import DocumentStore, Path


class MemoryStore(DocumentStore):
    def __init__(self) -> None:
        self._documents: dict[Path, dict[str, Any]] = {}
        self.writes = 0
        self.fail_reads = False
        self.fail_writes = False

    async def _read_document(self, path: Path) -> dict[str, Any] | None:
        if self.fail_reads:
            raise StoreReadError(f"Store unavailable reading {'/'.join(path)}")
        doc = self._documents.get(path)
        return copy.deepcopy(doc) if doc is not None else None

    async def _write_document(self, path: Path, document: dict[str, Any], merge: bool = False) -> None:
        if self.fail_writes:
            raise StoreWriteError(f"Store unavailable writing {'/'.join(path)}")
        new_doc = copy.deepcopy(document)
        existing = self._documents.get(path)
        if merge and existing is not None:
            merged = dict(existing)
            merged.update(new_doc)
            if existing.get("createdAt"):
                merged["createdAt"] = existing["createdAt"]
            new_doc = merged
        self._documents[path] = new_doc
        self.writes += 1

    async def _list_documents(self, collection: Path) -> dict[str, dict[str, Any]]:
        if self.fail_reads:
            raise StoreReadError(f"Store unavailable listing {'/'.join(collection)}")
        depth = len(collection)
        return {
            path[depth]: copy.deepcopy(doc)
            for path, doc in self._documents.items()
            if len(path) == depth + 1 and path[:depth] == collection
        }

    # ------------------------------------------------------------------
    # Synchronous helpers for seeding and inspection
    # ------------------------------------------------------------------

    def seed(self, path: Path, document: dict[str, Any]) -> None:
        """Place a raw document without counting it as a write."""
        self._documents[tuple(path)] = copy.deepcopy(document)

    def raw(self, path: Path) -> dict[str, Any] | None:
        doc = self._documents.get(tuple(path))
        return copy.deepcopy(doc) if doc is not None else None
