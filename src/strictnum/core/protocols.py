"""Protocol interfaces for strictnum abstractions.

All inter-layer communication uses these Protocols: structural typing,
no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Text lookup
# ---------------------------------------------------------------------------

@runtime_checkable
class ITextLookup(Protocol):
    """Localized text by key, with a default and %PLACEHOLDER% substitution."""

    def get(
        self,
        key: str,
        file: str,
        layer: str = "app",
        default: str = "",
        variables: Mapping[str, Any] | None = None,
    ) -> str: ...


# ---------------------------------------------------------------------------
# Persistence: Catalog Store
# ---------------------------------------------------------------------------

@runtime_checkable
class ICatalogStore(Protocol):
    """Read-only storage for JSON text catalogs."""

    def read(self, path: str) -> bytes: ...

    def exists(self, path: str) -> bool: ...
