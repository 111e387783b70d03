"""
Main Logger class - Context-aware structured logger

Every record is enriched with the traceId, requestId and userId of the
request scope it was logged from.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from context_logger.core.entry_builder import EntryBuilder, ERROR_KEY
from context_logger.core.error_serializer import serialize_error
from context_logger.core.log_level import LogLevel
from context_logger.core.logger_config import LoggerConfig, OutputSink
from context_logger.core.logger_interface import BaseLogger, Metadata
from context_logger.writers.console_writer import ConsoleWriter


class Logger(BaseLogger):
    """
    Context-aware structured logger.

    Example:
        logger = Logger()

        with RequestContext.scope(traceId="trace-1", userId="alice"):
            logger.info("User logged in", {"username": "alice"})

        try:
            connect()
        except ConnectionError as e:
            logger.error("Database connection failed", e, {"table": "users"})

    Exceptions raised by the output sink propagate to the caller.
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        child_metadata: Optional[Mapping[str, Any]] = None,
    ):
        self._config = config or LoggerConfig.default()
        self._child_metadata: Dict[str, Any] = dict(child_metadata or {})
        self._builder = EntryBuilder(self._config)
        self._output: OutputSink = self._config.output or ConsoleWriter(
            pretty_print=self._config.pretty_print
        )

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def child_metadata(self) -> Dict[str, Any]:
        return dict(self._child_metadata)

    def is_enabled_for(self, level: Union[LogLevel, str]) -> bool:
        """Check if a level passes the minimum level."""
        return LogLevel.coerce(level) >= self._config.min_level

    def log(
        self,
        level: Union[LogLevel, str],
        message: str,
        metadata: Optional[Metadata] = None,
    ) -> None:
        """Log a message."""
        level = LogLevel.coerce(level)
        if not self.is_enabled_for(level):
            return

        entry = self._builder.build(level, message, self._child_metadata, metadata)
        self._output(entry)

    def debug(self, message: str, metadata: Optional[Metadata] = None) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, message, metadata)

    def info(self, message: str, metadata: Optional[Metadata] = None) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, message, metadata)

    def warn(self, message: str, metadata: Optional[Metadata] = None) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, message, metadata)

    warning = warn

    def error(
        self,
        message: str,
        error: Any = None,
        metadata: Optional[Metadata] = None,
    ) -> None:
        """Log error message, serializing error under the "error" key."""
        merged: Dict[str, Any] = dict(metadata or {})
        error_data = serialize_error(error, self._config.include_stack_trace)
        if error_data is not None:
            merged[ERROR_KEY] = error_data

        self.log(LogLevel.ERROR, message, merged)

    def child(self, metadata: Metadata) -> "Logger":
        """Create a child logger sharing this logger's config."""
        return Logger(self._config, {**self._child_metadata, **(metadata or {})})

    def __repr__(self) -> str:
        return (
            f"Logger(min_level={self._config.min_level}, "
            f"child_metadata={self._child_metadata!r})"
        )


def create_logger(config: Optional[LoggerConfig] = None, **options: Any) -> Logger:
    """
    Create a logger.

    Args:
        config: Complete configuration; mutually exclusive with options
        **options: LoggerConfig fields, snake_case or camelCase

    Example:
        logger = create_logger(minLevel="debug", defaultMetadata={"service": "api"})
    """
    if config is not None and options:
        raise ValueError("Pass either config or options, not both")
    if config is None:
        config = LoggerConfig.from_dict(options)
    return Logger(config)


# Default logger instance for convenience
logger = create_logger()
