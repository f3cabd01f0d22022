"""Type aliases used across strictnum."""

from __future__ import annotations

UiNumber = str  # "1.234,56", "1 234,56", "-0,5"
DbNumber = str  # "1234.56", "-0.50"
CatalogKey = str  # "err_format_number_invalid_scale"
Layer = str  # "app" or "vendor/package"
