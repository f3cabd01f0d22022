"""Number conversion endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request

from strictnum.models.numbers import (
    FromDbRequest,
    FromDbResponse,
    NumberErrorResponse,
    ToDbRequest,
    ToDbResponse,
)

router = APIRouter(tags=["numbers"], responses={422: {"model": NumberErrorResponse}})


@router.post("/to-db", response_model=ToDbResponse)
async def to_db(body: ToDbRequest, request: Request) -> ToDbResponse:
    """Convert a UI number string to a DB dot-decimal string."""
    defaults = request.app.state.settings.format
    value = request.app.state.formatter.to_db(
        body.value,
        defaults.precision if body.precision is None else body.precision,
        defaults.scale if body.scale is None else body.scale,
    )
    return ToDbResponse(value=value)


@router.post("/from-db", response_model=FromDbResponse)
async def from_db(body: FromDbRequest, request: Request) -> FromDbResponse:
    """Render a DB dot-decimal string for the UI."""
    defaults = request.app.state.settings.format
    value = request.app.state.formatter.from_db(
        body.value,
        defaults.scale if body.scale is None else body.scale,
        defaults.thousands_sep if body.thousands_sep is None else body.thousands_sep,
        defaults.decimal_sep if body.decimal_sep is None else body.decimal_sep,
    )
    return FromDbResponse(value=value)
