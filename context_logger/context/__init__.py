"""
Ambient context module

Provides the default request-scoped context the logger reads identifiers from.
"""

from context_logger.context.request_context import (
    RequestContext,
    current_context,
    TRACE_ID,
    REQUEST_ID,
    USER_ID,
)

__all__ = [
    "RequestContext",
    "current_context",
    "TRACE_ID",
    "REQUEST_ID",
    "USER_ID",
]
