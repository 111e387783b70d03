"""
Error serialization

Turns whatever was handed to Logger.error() into a structured error detail.
"""

import traceback
from typing import Any, Dict, Optional

RESERVED_ERROR_KEYS = ("name", "message", "stack")


def format_stack(error: BaseException) -> str:
    """Formatted traceback text for an exception, header line included."""
    return "".join(
        traceback.format_exception(type(error), error, error.__traceback__)
    ).rstrip("\n")


def _render(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__} object>"


def serialize_error(error: Any, include_stack_trace: bool = True) -> Optional[Dict[str, Any]]:
    """
    Serialize an error value for logging.

    Args:
        error: Exception instance or any other value
        include_stack_trace: Add the formatted traceback under "stack"

    Returns:
        None for None, a {name, message, stack?, ...} dict for exceptions,
        {"message": str(value)} for anything else

    Example:
        >>> serialize_error("just a string")
        {'message': 'just a string'}
    """
    if error is None:
        return None

    if not isinstance(error, BaseException):
        return {"message": _render(error)}

    serialized: Dict[str, Any] = {
        "name": type(error).__name__,
        "message": _render(error),
    }

    if include_stack_trace:
        serialized["stack"] = format_stack(error)

    # Custom attributes set on the exception instance (e.g. an error code)
    for key, value in getattr(error, "__dict__", {}).items():
        if key.startswith("_") or key in RESERVED_ERROR_KEYS:
            continue
        serialized[key] = value

    return serialized
