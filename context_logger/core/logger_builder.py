"""Logger builder pattern"""

from typing import Any, Callable, Dict, Mapping, Optional, Union

from context_logger.core.log_level import LogLevel
from context_logger.core.logger import Logger
from context_logger.core.logger_config import LoggerConfig, OutputSink
from context_logger.formatters.base_formatter import BaseFormatter
from context_logger.writers.console_writer import ConsoleWriter


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._options: Dict[str, Any] = {}
        self._default_metadata: Dict[str, Any] = {}
        self._console_formatter: Optional[BaseFormatter] = None
        self._console_streams: Optional[Dict[LogLevel, object]] = None
        self._console_enabled = False

    def with_level(self, level: Union[LogLevel, str]) -> "LoggerBuilder":
        """Set minimum log level."""
        self._options["min_level"] = LogLevel.coerce(level)
        return self

    def with_pretty_print(self, enabled: bool = True) -> "LoggerBuilder":
        """Indent JSON output of the default console sink."""
        self._options["pretty_print"] = enabled
        return self

    def with_stack_trace(self, enabled: bool = True) -> "LoggerBuilder":
        """Include/omit stack traces in serialized errors."""
        self._options["include_stack_trace"] = enabled
        return self

    def with_default_metadata(self, metadata: Optional[Mapping[str, Any]] = None, **fields: Any) -> "LoggerBuilder":
        """
        Add metadata merged into every record.

        Repeated calls accumulate; later keys override earlier ones.

        Example:
            logger = (LoggerBuilder()
                .with_default_metadata({"service": "api-gateway"})
                .with_default_metadata(version="2.1.0")
                .build())
        """
        self._default_metadata.update(metadata or {})
        self._default_metadata.update(fields)
        return self

    def with_output(self, output: OutputSink) -> "LoggerBuilder":
        """
        Set a custom output sink.

        Args:
            output: Callable receiving each finished LogEntry

        Returns:
            Self for method chaining
        """
        self._options["output"] = output
        self._console_enabled = False
        return self

    def with_console(
        self,
        formatter: Optional[BaseFormatter] = None,
        streams: Optional[Dict[LogLevel, object]] = None,
    ) -> "LoggerBuilder":
        """
        Write to the console, optionally with a custom formatter or
        severity -> stream mapping.

        Example:
            from context_logger.formatters import TextFormatter

            logger = (LoggerBuilder()
                .with_console(formatter=TextFormatter(),
                              streams={LogLevel.WARN: "stdout"})
                .build())
        """
        self._options.pop("output", None)
        self._console_enabled = True
        self._console_formatter = formatter
        self._console_streams = streams
        return self

    def with_context_enrichment(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable ambient context lookup."""
        self._options["enrich_with_context"] = enabled
        return self

    def with_context_provider(self, provider: Callable[[], Any]) -> "LoggerBuilder":
        """
        Read identifiers from a custom context provider.

        Args:
            provider: Zero-argument callable returning an object with
                      get(key) or None when no context is active
        """
        self._options["context_provider"] = provider
        return self

    def build_config(self) -> LoggerConfig:
        """Build the configuration without creating a logger."""
        options = dict(self._options)
        options["default_metadata"] = dict(self._default_metadata)

        if self._console_enabled:
            options["output"] = ConsoleWriter(
                pretty_print=options.get("pretty_print", False),
                formatter=self._console_formatter,
                streams=self._console_streams,
            )

        return LoggerConfig(**options)

    def build(self) -> Logger:
        """Build and return configured logger."""
        return Logger(self.build_config())
