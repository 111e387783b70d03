"""
Log entry construction

Assembles a LogEntry from a level, a message, the layered metadata and
the ambient request context.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from context_logger.context.request_context import TRACE_ID, REQUEST_ID, USER_ID
from context_logger.core.error_serializer import serialize_error
from context_logger.core.log_entry import LogEntry
from context_logger.core.log_level import LogLevel
from context_logger.core.logger_config import LoggerConfig

ERROR_KEY = "error"

# Context key -> LogEntry field
CONTEXT_FIELDS = {
    TRACE_ID: "trace_id",
    REQUEST_ID: "request_id",
    USER_ID: "user_id",
}


class EntryBuilder:
    """Builds immutable log entries for a logger configuration."""

    def __init__(self, config: LoggerConfig):
        self._config = config

    def build(
        self,
        level: LogLevel,
        message: str,
        child_metadata: Optional[Mapping[str, Any]] = None,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> LogEntry:
        """
        Build a log entry.

        Metadata is merged default -> child -> per-call, later sources
        winning. The reserved "error" key is moved to the entry's error field.

        Args:
            level: Entry severity
            message: Log message
            child_metadata: Metadata accumulated through child loggers
            metadata: Per-call metadata

        Returns:
            New LogEntry
        """
        timestamp = datetime.now(timezone.utc)

        context_data: Dict[str, str] = {}
        if self._config.enrich_with_context:
            context_data = self.extract_context_data()

        merged: Dict[str, Any] = {
            **self._config.default_metadata,
            **(child_metadata or {}),
            **(metadata or {}),
        }
        error = self.normalize_error(merged.pop(ERROR_KEY, None))

        return LogEntry(
            level=level,
            message=message,
            timestamp=timestamp,
            metadata=merged or None,
            error=error,
            **context_data,
        )

    def normalize_error(self, error: Any) -> Optional[Dict[str, Any]]:
        """
        Turn the value found under the reserved "error" key into an error detail.

        Mappings are copied so records never share them with the config;
        anything else goes through serialize_error(). Falsy values mean no error.
        """
        if not error:
            return None
        if isinstance(error, Mapping):
            return dict(error)
        return serialize_error(error, self._config.include_stack_trace)

    def extract_context_data(self) -> Dict[str, str]:
        """
        Read request identifiers from the ambient context.

        Returns:
            LogEntry keyword arguments for the identifiers that are set;
            empty when no context is active or the lookup fails
        """
        try:
            context = self._config.context_provider()
            if context is None:
                return {}

            context_data = {}
            for key, field_name in CONTEXT_FIELDS.items():
                value = context.get(key)
                if value:
                    context_data[field_name] = value
            return context_data
        except Exception:
            # Used outside of any request scope, or an incompatible provider
            return {}
