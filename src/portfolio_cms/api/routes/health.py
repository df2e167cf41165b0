"""Health check routes."""

from __future__ import annotations

from fastapi import APIRouter

from portfolio_cms.data.db import check_connection

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict[str, str]:
    """Return the status of the API and its database."""
    database = "connected" if check_connection() else "unavailable"
    return {"status": "healthy", "database": database}
