"""Builders for the ``{status, message, count?, data?}`` response envelope."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from portfolio_cms.api.schemas.common import Envelope


def envelope(
    message: str,
    *,
    data: Any = None,
    count: int | None = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """Return a success envelope; ``count``/``data`` are omitted when None."""
    body = Envelope(status="success", message=message, count=count, data=data)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body.model_dump(exclude_none=True)),
    )


def listing(message: str, records: list[Any]) -> JSONResponse:
    """Success envelope for a list, with its length as ``count``."""
    return envelope(message, data=records, count=len(records))


def error_response(
    status_code: int, message: str, headers: Mapping[str, str] | None = None
) -> JSONResponse:
    body = Envelope(status="error", message=message)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=dict(headers) if headers else None,
    )
