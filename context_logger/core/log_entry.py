"""
Log entry data structure

A single structured record, immutable once built.
"""

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from context_logger.core.log_level import LogLevel


def format_timestamp(timestamp: datetime) -> str:
    """Render a timestamp as ISO 8601 UTC with millisecond precision."""
    return (
        timestamp.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def parse_timestamp(value: str) -> datetime:
    """Inverse of format_timestamp."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


@dataclass(frozen=True)
class LogEntry:
    """
    Log entry data structure.

    Contains all information about a single log message. Optional fields
    are None when not applicable and are omitted from the wire form.
    """

    level: LogLevel
    message: str
    timestamp: datetime
    metadata: Optional[Dict[str, Any]] = None
    trace_id: Optional[str] = None
    request_id: Optional[str] = None
    user_id: Optional[str] = None
    error: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            object.__setattr__(self, "message", str(self.message))

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to its wire dictionary.

        Returns:
            Dictionary with absent optional fields left out
        """
        data: Dict[str, Any] = {
            "level": str(self.level),
            "message": self.message,
            "timestamp": format_timestamp(self.timestamp),
        }
        if self.trace_id:
            data["traceId"] = self.trace_id
        if self.request_id:
            data["requestId"] = self.request_id
        if self.user_id:
            data["userId"] = self.user_id
        if self.metadata:
            data["metadata"] = dict(self.metadata)
        if self.error:
            data["error"] = dict(self.error) if isinstance(self.error, Mapping) else self.error
        return data

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON text; values JSON cannot encode are rendered with str."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False, default=str)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogEntry":
        """
        Create log entry from its wire dictionary.

        Args:
            data: Dictionary with log entry data

        Returns:
            New LogEntry instance
        """
        return cls(
            level=LogLevel.from_string(data["level"]),
            message=data["message"],
            timestamp=parse_timestamp(data["timestamp"]),
            metadata=data.get("metadata"),
            trace_id=data.get("traceId"),
            request_id=data.get("requestId"),
            user_id=data.get("userId"),
            error=data.get("error"),
        )

    def __str__(self) -> str:
        """String representation."""
        prefix = f"[{format_timestamp(self.timestamp)}] [{str(self.level).upper():5}]"
        if self.trace_id:
            prefix += f" [{self.trace_id}]"
        return f"{prefix} {self.message}"
