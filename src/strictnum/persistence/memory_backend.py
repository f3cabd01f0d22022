"""In-memory backend for unit tests: dict-backed fake."""

from __future__ import annotations

import json
from typing import Any

from strictnum.core.exceptions import CatalogNotFoundError


class MemoryCatalogStore:
    """Dict-backed ICatalogStore for unit tests."""

    def __init__(self) -> None:
        self._files: dict[str, bytes] = {}
        self.reads: list[str] = []

    def put(self, path: str, data: bytes) -> None:
        self._files[path] = data

    def put_catalog(self, path: str, entries: dict[str, Any]) -> None:
        self._files[path] = json.dumps(entries).encode("utf-8")

    def read(self, path: str) -> bytes:
        self.reads.append(path)
        try:
            return self._files[path]
        except KeyError as exc:
            raise CatalogNotFoundError(path) from exc

    def exists(self, path: str) -> bool:
        return path in self._files
