"""strictnum: strict, lossless conversion between UI and DB decimal strings."""

from __future__ import annotations

from strictnum.core.exceptions import ErrorKind, NumberFormatError
from strictnum.services.format_number import NumberFormatter, from_db, to_db

__all__ = ["ErrorKind", "NumberFormatError", "NumberFormatter", "from_db", "to_db"]
