"""Local directory backend implementing ICatalogStore."""

from __future__ import annotations

from pathlib import Path

from strictnum.core.exceptions import CatalogError, CatalogNotFoundError


class FilesystemCatalogStore:
    """ICatalogStore reading files below a root directory."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def _path(self, path: str) -> Path:
        full = (self._root / path).resolve()
        if not full.is_relative_to(self._root):
            raise CatalogError(f"Catalog path {path!r} escapes {str(self._root)!r}")
        return full

    def read(self, path: str) -> bytes:
        full = self._path(path)
        try:
            return full.read_bytes()
        except FileNotFoundError as exc:
            raise CatalogNotFoundError(path) from exc
        except OSError as exc:
            raise CatalogError(f"Catalog read failed for {path!r}: {exc}") from exc

    def exists(self, path: str) -> bool:
        return self._path(path).is_file()
