"""TextService: language catalog lookups with %PLACEHOLDER% interpolation.

Catalogs are JSON objects of key -> text stored as ``{lang}/{file}.json``.
Layers select where a catalog lives:

- ``"app"``: ``language/{lang}/{file}.json`` in the main store.
- a registered namespace (e.g. ``"strictnum/core"``): ``{lang}/{file}.json``
  in the store registered for it.
- any other ``"vendor/package"`` slug:
  ``vendor/{vendor}/{package}/language/{lang}/{file}.json`` in the main store.

A missing catalog or key is fail-soft: the caller's default is returned and
a warning is logged. Unsafe names and broken catalogs are fail-fast.

Example:

    txt.get("headline", "member/profile", "app", "Hi!", {"name": "Sarah"})
    # "Hej Sarah!" with language/da/member/profile.json = {"headline": "Hej %NAME%!"}
"""

from __future__ import annotations

import json
import logging
import re
import threading
from importlib import resources
from pathlib import Path
from typing import Any, Mapping

from strictnum.core.config import AppSettings
from strictnum.core.exceptions import (
    CatalogError,
    CatalogNotFoundError,
    ConfigError,
    TextLookupError,
)
from strictnum.core.protocols import ICatalogStore
from strictnum.core.types import CatalogKey, Layer
from strictnum.persistence import create_catalog_store
from strictnum.persistence.filesystem_backend import FilesystemCatalogStore

logger = logging.getLogger(__name__)

BUILTIN_NAMESPACE = "strictnum/core"

_LANGUAGE = re.compile(r"[a-z]{2}(?:_[A-Z]{2})?")
_FILE = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9/_-]*[A-Za-z0-9])?")
_SLUG = re.compile(r"[a-z0-9._-]+/[a-z0-9._-]+", re.IGNORECASE)


def interpolate(text: str, variables: Mapping[str, Any] | None) -> str:
    """Replace ``%NAME%`` placeholders in one pass; keys are upper-cased."""
    if not variables:
        return text
    table = {f"%{str(k).upper()}%": str(v) for k, v in variables.items()}
    pattern = re.compile("|".join(re.escape(p) for p in sorted(table, key=len, reverse=True)))
    return pattern.sub(lambda m: table[m.group(0)], text)


class FallbackText:
    """ITextLookup that never reads catalogs; returns the interpolated default."""

    def get(
        self,
        key: CatalogKey,
        file: str,
        layer: Layer = "app",
        default: str = "",
        variables: Mapping[str, Any] | None = None,
    ) -> str:
        return interpolate(default, variables)


class TextService:
    """ITextLookup backed by JSON catalogs in an ICatalogStore."""

    def __init__(
        self,
        store: ICatalogStore,
        language: str,
        namespaces: Mapping[str, ICatalogStore] | None = None,
    ) -> None:
        if not _LANGUAGE.fullmatch(language or ""):
            raise ConfigError(
                f"Invalid locale.language {language!r}. Expected 'xx' or 'xx_YY' (e.g. 'da' or 'da_DK')."
            )
        self._store = store
        self._language = language
        self._namespaces: dict[str, ICatalogStore] = dict(namespaces or {})
        self._catalogs: dict[tuple[int, str], dict[str, str]] = {}
        self._lock = threading.Lock()

    @property
    def language(self) -> str:
        return self._language

    def register_namespace(self, slug: str, store: ICatalogStore) -> None:
        """Serve ``slug`` from its own store instead of the vendor tree."""
        self._namespaces[slug.strip("/")] = store

    def get(
        self,
        key: CatalogKey,
        file: str,
        layer: Layer = "app",
        default: str = "",
        variables: Mapping[str, Any] | None = None,
    ) -> str:
        """Return the catalog text for ``key`` or ``default`` when missing.

        Raises:
            TextLookupError: Unsafe ``file`` or malformed ``layer``.
            CatalogError: Catalog exists but cannot be read or parsed.
        """
        if not file or ".." in file or not _FILE.fullmatch(file):
            raise TextLookupError(f"Invalid language file name {file!r}.")

        store, path = self._resolve(layer, file)
        catalog = self._load(store, path)

        text = catalog.get(key)
        if text is None:
            logger.warning(
                "Text key missing",
                extra={"context": {"key": key, "file": file, "layer": layer, "path": path}},
            )
            text = default
        return interpolate(text, variables)

    def _resolve(self, layer: str, file: str) -> tuple[ICatalogStore, str]:
        relative = f"{self._language}/{file}.json"
        if layer == "app":
            return self._store, f"language/{relative}"

        slug = layer.strip("/")
        if slug in self._namespaces:
            return self._namespaces[slug], relative

        if ".." in slug or not _SLUG.fullmatch(slug):
            raise TextLookupError(
                f"Invalid text layer {layer!r}. Expected 'vendor/package', e.g. 'acme/auth'."
            )
        return self._store, f"vendor/{slug}/language/{relative}"

    def _load(self, store: ICatalogStore, path: str) -> dict[str, str]:
        cache_key = (id(store), path)
        with self._lock:
            cached = self._catalogs.get(cache_key)
        if cached is not None:
            return cached

        try:
            raw = store.read(path)
        except CatalogNotFoundError:
            logger.warning("Text catalog missing", extra={"context": {"path": path}})
            catalog: dict[str, str] = {}
        else:
            catalog = _parse_catalog(raw, path)

        with self._lock:
            self._catalogs[cache_key] = catalog
        return catalog


def _parse_catalog(raw: bytes, path: str) -> dict[str, str]:
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise CatalogError(f"Catalog {path!r} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise CatalogError(f"Catalog {path!r} must be a JSON object")
    for key, value in data.items():
        if not isinstance(value, str):
            raise CatalogError(f"Catalog {path!r} key {key!r} must map to a string")
    return data


def builtin_catalog_root() -> Path:
    """Directory holding the catalogs bundled with strictnum."""
    return Path(str(resources.files("strictnum") / "language"))


def create_text_service(settings: AppSettings | None = None) -> TextService:
    """Create a TextService wired to the configured store and bundled catalogs."""
    if settings is None:
        settings = AppSettings()

    return TextService(
        store=create_catalog_store(settings),
        language=settings.locale.language,
        namespaces={BUILTIN_NAMESPACE: FilesystemCatalogStore(builtin_catalog_root())},
    )
