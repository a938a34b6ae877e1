"""
Health check endpoints.

Readiness means the saved-deck table can be queried; deck code endpoints
need no database and stay available either way.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from kcgdeck.db.database import get_session
from kcgdeck.models.db import SavedDeckDB

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    database: str | None = None
    saved_decks: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(
    response: Response,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> HealthResponse:
    """
    Report whether saved decks can be read.

    Returns 503 if the saved-deck table is missing or the database is
    unavailable.
    """
    try:
        result = await session.execute(select(func.count()).select_from(SavedDeckDB))
    except SQLAlchemyError:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="not ready", database="unavailable")

    return HealthResponse(status="ready", database="connected", saved_decks=result.scalar_one())
