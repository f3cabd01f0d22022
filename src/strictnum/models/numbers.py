"""Request/response models for the number conversion endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class ToDbRequest(BaseModel):
    """UI string to convert; precision/scale fall back to FormatConfig."""

    value: Optional[str] = None
    precision: Optional[int] = None
    scale: Optional[int] = None


class ToDbResponse(BaseModel):
    value: Optional[str] = None  # None when the input was empty


class FromDbRequest(BaseModel):
    """DB string to render; unset fields fall back to FormatConfig."""

    value: Optional[str] = None
    scale: Optional[int] = None
    thousands_sep: Optional[str] = None
    decimal_sep: Optional[str] = None


class FromDbResponse(BaseModel):
    value: str = ""


class NumberErrorResponse(BaseModel):
    """Body returned with HTTP 422 when a number is rejected."""

    error: str  # ErrorKind value, e.g. "DotDecimalNotSupported"
    key: str
    message: str
