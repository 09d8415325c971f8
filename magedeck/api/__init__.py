from magedeck.api.health import router as health_router
from magedeck.api.prices import router as prices_router

__all__ = [
    "health_router",
    "prices_router",
]
