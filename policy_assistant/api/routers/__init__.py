"""API routers."""

from .ask import router as ask_router
from .health import router as health_router
from .upload import router as upload_router

__all__ = [
    "ask_router",
    "health_router",
    "upload_router",
]
