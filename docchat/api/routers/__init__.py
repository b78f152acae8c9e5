"""API routers."""

from .analysis import router as analysis_router
from .chat import router as chat_router
from .documents import router as documents_router
from .health import router as health_router
from .prompts import router as prompts_router

__all__ = [
    "analysis_router",
    "chat_router",
    "documents_router",
    "health_router",
    "prompts_router",
]
