"""Shared test doubles: re-export in-memory backends."""

from __future__ import annotations

from strictnum.persistence.memory_backend import MemoryCatalogStore
from strictnum.services.txt import FallbackText

__all__ = ["FallbackText", "MemoryCatalogStore"]
