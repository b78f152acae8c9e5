"""
Observability module.

Provides logging configuration, correlation ID tracking, and request
logging middleware.
"""

from docchat.observability.correlation import get_correlation_id, set_correlation_id
from docchat.observability.logger import configure_logging
from docchat.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

__all__ = [
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
    "CorrelationMiddleware",
    "RequestLoggingMiddleware",
]
