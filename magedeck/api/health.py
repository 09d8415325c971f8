"""
Health check endpoints.

Liveness, plus a readiness probe that reports whether the catalog can be
queried and how many printings it holds.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from magedeck.db.store import CatalogStore, get_store
from magedeck.models.failure import StorageError

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    catalog: str | None = None
    cards: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness probe. Does not touch the catalog."""
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(
    response: Response,
    store: Annotated[CatalogStore, Depends(get_store)],
) -> HealthResponse:
    """
    Readiness probe.

    An empty catalog is still ready (prices come back as no entry) but is
    flagged so a missing sync is visible. 503 if the catalog cannot be read.
    """
    try:
        cards = await store.count()
    except StorageError:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="not ready", catalog="unavailable")

    return HealthResponse(status="ready", catalog="synced" if cards else "empty", cards=cards)
