"""FastAPI application entry point for the Portfolio CMS API."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from portfolio_cms.api.errors import register_exception_handlers
from portfolio_cms.api.routes import contacts, health, hobbies, profile, projects, skills

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable, Callable

load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize resources on startup and clean up on shutdown."""
    from portfolio_cms.data.db import init_db

    try:
        init_db()
    except SQLAlchemyError:
        # Requests still answer with "Database connection failed" until it is reachable
        logger.exception("Database initialization failed")
    yield


app = FastAPI(
    title="Portfolio CMS API",
    description="Content management API for a personal portfolio website",
    version="0.1.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def short_circuit_options(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Answer bare OPTIONS requests with an empty 200."""
    if request.method == "OPTIONS":
        return Response(status_code=200)
    return await call_next(request)


# Outermost layer: CORS preflight is answered before the OPTIONS short-circuit
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    max_age=3600,
)

register_exception_handlers(app)

app.include_router(health.router)
app.include_router(profile.router)
app.include_router(skills.router)
app.include_router(projects.router)
app.include_router(hobbies.router)
app.include_router(contacts.router)


def main() -> None:
    """Start the development server."""
    import uvicorn

    logging.basicConfig(
        level=os.getenv("PORTFOLIO_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "portfolio_cms.api.main:app",
        host=os.getenv("PORTFOLIO_HOST", "0.0.0.0"),
        port=int(os.getenv("PORTFOLIO_PORT", "8000")),
        reload=True,
    )


if __name__ == "__main__":
    main()
