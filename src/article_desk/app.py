"""FastAPI application factory and process entry point."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from article_desk.changes.ledger import ChangeLedger
from article_desk.config import load_settings
from article_desk.database.client import CosmosClient
from article_desk.errors import WorkflowError
from article_desk.logging import configure_logging
from article_desk.routes import admin, author, feed, reviewer, status
from article_desk.services.health import check_emulators

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable, Callable

    from fastapi import Response

    from article_desk.config import Settings

logger = logging.getLogger(__name__)


async def init_database(settings: Settings) -> CosmosClient:
    """Connect to Cosmos DB and make sure the containers exist."""
    cosmos = CosmosClient(settings.cosmos)
    await cosmos.initialize()
    await cosmos.ensure_containers()
    return cosmos


async def handle_workflow_error(request: Request, exc: WorkflowError) -> JSONResponse:
    """Render a rejected workflow operation as a typed JSON error."""
    logger.info(
        "Request rejected: method=%s path=%s error=%s detail=%s",
        request.method,
        request.url.path,
        exc.code,
        exc.message,
    )
    return JSONResponse(exc.to_dict(), status_code=exc.status_code)


def create_app() -> FastAPI:
    """Build the web application."""
    settings = load_settings()
    configure_logging(settings.app.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Web app starting: env=%s", settings.app.env)
        if settings.app.is_development and not await check_emulators(settings):
            raise RuntimeError("Cosmos DB is not reachable")
        cosmos = await init_database(settings)
        app.state.cosmos = cosmos
        app.state.ledger = ChangeLedger()
        try:
            yield
        finally:
            pending = len(app.state.ledger)
            if pending:
                logger.warning("Shutting down with %d undecided change set(s); their decisions are lost", pending)
            await cosmos.close()
            logger.info("Web app stopped")

    secret_key = settings.app.secret_key
    if not secret_key:
        if not settings.app.is_development:
            raise RuntimeError("SESSION_SECRET_KEY must be set outside development")
        secret_key = "development-only-secret"

    app = FastAPI(title="article-desk", lifespan=lifespan)
    app.state.settings = settings
    app.add_middleware(SessionMiddleware, secret_key=secret_key)
    app.add_exception_handler(WorkflowError, handle_workflow_error)

    @app.middleware("http")
    async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        started_at = time.monotonic()
        response = await call_next(request)
        duration_ms = (time.monotonic() - started_at) * 1000
        log = logger.warning if duration_ms > settings.app.slow_request_ms else logger.debug
        log(
            "Request handled: method=%s path=%s status=%d duration_ms=%.0f",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    for module in (status, author, admin, reviewer, feed):
        app.include_router(module.router)
    return app


def main() -> None:
    """Entry point for the web process."""
    uvicorn.run("article_desk.app:create_app", factory=True, host="0.0.0.0", port=8000)  # noqa: S104


if __name__ == "__main__":
    main()
