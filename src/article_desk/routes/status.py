"""Status routes: liveness and database connectivity."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter(tags=["status"])


@router.get("/health")
async def health() -> dict:
    return {"status": "ok", "service": "article-desk"}


@router.get("/health/db")
async def database_health(request: Request) -> JSONResponse:
    """Report whether Cosmos DB answers."""
    cosmos = request.app.state.cosmos
    if await cosmos.ping():
        return JSONResponse({"db": "connected"})
    return JSONResponse({"db": "error"}, status_code=503)
