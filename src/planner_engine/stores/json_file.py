"""JSON-file document store: one ``.json`` file per document under a root directory."""

from __future__ import annotations

import asyncio
import json
import logging
import os
from pathlib import Path as FsPath
from typing import Any

from planner_engine.exceptions import StoreReadError, StoreWriteError
from planner_engine.stores.base import DocumentStore, Path

logger = logging.getLogger(__name__)


class JsonFileStore(DocumentStore):
    """Stores ``("users", uid, "dailyLogs", "2025-03-10")`` at
    ``<root>/users/<uid>/dailyLogs/2025-03-10.json``.

    File I/O runs in a worker thread so the event loop stays responsive.
    """

    def __init__(self, root: FsPath | str) -> None:
        self._root = FsPath(root).expanduser()

    @property
    def root(self) -> FsPath:
        return self._root

    def _file_for(self, path: Path) -> FsPath:
        for part in path:
            if not part or "/" in part or "\\" in part or part in (".", ".."):
                raise ValueError(f"Invalid path component: {part!r}")
        return self._root.joinpath(*path[:-1], f"{path[-1]}.json")

    async def _read_document(self, path: Path) -> dict[str, Any] | None:
        return await asyncio.to_thread(self._read_file, self._file_for(path))

    async def _write_document(self, path: Path, document: dict[str, Any], merge: bool = False) -> None:
        await asyncio.to_thread(self._write_file, self._file_for(path), document, merge)

    async def _list_documents(self, collection: Path) -> dict[str, dict[str, Any]]:
        directory = self._root.joinpath(*collection)
        return await asyncio.to_thread(self._list_dir, directory)

    # ------------------------------------------------------------------
    # Blocking helpers (run in a thread)
    # ------------------------------------------------------------------

    @staticmethod
    def _read_file(file: FsPath) -> dict[str, Any] | None:
        if not file.exists():
            return None
        try:
            with open(file, encoding="utf-8") as f:
                doc = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise StoreReadError(f"Cannot read {file}: {exc}") from exc
        if not isinstance(doc, dict):
            raise StoreReadError(f"{file} does not hold a JSON object")
        return doc

    @classmethod
    def _write_file(cls, file: FsPath, document: dict[str, Any], merge: bool) -> None:
        doc = dict(document)
        if merge:
            try:
                existing = cls._read_file(file)
            except StoreReadError as exc:
                raise StoreWriteError(f"Cannot merge into {file}: {exc}") from exc
            if existing is not None:
                merged = dict(existing)
                merged.update(doc)
                if existing.get("createdAt"):
                    merged["createdAt"] = existing["createdAt"]
                doc = merged
        tmp = file.with_suffix(".json.tmp")
        try:
            file.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(doc, f, indent=2)
            os.replace(tmp, file)
        except (OSError, TypeError, ValueError) as exc:
            raise StoreWriteError(f"Cannot write {file}: {exc}") from exc
        logger.debug("Wrote %s", file)

    @classmethod
    def _list_dir(cls, directory: FsPath) -> dict[str, dict[str, Any]]:
        if not directory.is_dir():
            return {}
        docs: dict[str, dict[str, Any]] = {}
        for file in sorted(directory.glob("*.json")):
            doc = cls._read_file(file)
            if doc is not None:
                docs[file.stem] = doc
        return docs
