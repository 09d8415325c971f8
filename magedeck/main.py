from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from magedeck.api import health_router, prices_router
from magedeck.config import settings
from magedeck.db.store import get_store
from magedeck.models.failure import KnownError


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    store = get_store()
    await store.init()
    yield
    await store.close()


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("magedeck"),
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(prices_router)


@app.exception_handler(KnownError)
async def known_error_handler(_request: Request, exc: KnownError) -> JSONResponse:
    """Render known failures as plain descriptive messages."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "kind": exc.kind.value,
            "detail": exc.message,
            "suggestion": exc.suggestion,
        },
    )
