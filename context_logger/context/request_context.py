"""
Request-scoped ambient context

Default context collaborator for the logger, backed by contextvars so that
concurrent threads and asyncio tasks each see only the scope they entered.
"""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from typing import Any, Awaitable, Callable, Dict, Iterator, Mapping, Optional, TypeVar

T = TypeVar("T")

TRACE_ID = "traceId"
REQUEST_ID = "requestId"
USER_ID = "userId"

_current_context: contextvars.ContextVar[Optional["RequestContext"]] = contextvars.ContextVar(
    "request_context", default=None
)


class RequestContext:
    """
    Key-value bag bound to the currently executing request flow.

    Example:
        with RequestContext.scope(traceId="trace-1", userId="alice"):
            logger.info("User logged in")  # carries traceId and userId
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values: Dict[str, Any] = dict(values or {})

    def get(self, key: str, default: Any = None) -> Any:
        """Value stored under key, or default."""
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Store a value visible to the rest of this scope."""
        self._values[key] = value

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __repr__(self) -> str:
        return f"RequestContext({self._values!r})"

    @classmethod
    def current(cls) -> Optional["RequestContext"]:
        """The context of the active scope, or None outside any scope."""
        return _current_context.get()

    @classmethod
    @contextmanager
    def scope(cls, values: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Iterator["RequestContext"]:
        """
        Enter a new context scope.

        Nested scopes start from a copy of the enclosing scope's values,
        overridden by the new ones. Leaving the scope restores the outer one.

        Args:
            values: Initial key-value pairs
            **kwargs: Additional key-value pairs

        Yields:
            The RequestContext active inside the block
        """
        parent = _current_context.get()
        merged: Dict[str, Any] = parent.to_dict() if parent is not None else {}
        merged.update(values or {})
        merged.update(kwargs)

        context = cls(merged)
        token = _current_context.set(context)
        try:
            yield context
        finally:
            _current_context.reset(token)

    @classmethod
    def run(cls, values: Optional[Mapping[str, Any]], func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Call func inside a new scope and return its result."""
        with cls.scope(values):
            return func(*args, **kwargs)

    @classmethod
    async def run_async(
        cls,
        values: Optional[Mapping[str, Any]],
        func: Callable[..., Awaitable[T]],
        *args: Any,
        **kwargs: Any,
    ) -> T:
        """Await func(*args, **kwargs) inside a new scope."""
        with cls.scope(values):
            return await func(*args, **kwargs)


def current_context() -> Optional[RequestContext]:
    """Default context provider used by LoggerConfig."""
    return RequestContext.current()
