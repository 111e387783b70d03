"""
Logger configuration management

Set once at construction and shared by reference between a logger and
all of its children.
"""

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Union

from context_logger.context.request_context import current_context
from context_logger.core.log_entry import LogEntry
from context_logger.core.log_level import LogLevel

OutputSink = Callable[[LogEntry], Any]
ContextProvider = Callable[[], Any]

# Option names as accepted by from_dict()
OPTION_ALIASES: Dict[str, str] = {
    "minLevel": "min_level",
    "prettyPrint": "pretty_print",
    "includeStackTrace": "include_stack_trace",
    "defaultMetadata": "default_metadata",
    "enrichWithContext": "enrich_with_context",
    "contextProvider": "context_provider",
}


@dataclass(frozen=True)
class LoggerConfig:
    """
    Logger configuration.

    The output sink defaults to None, which the logger resolves to a
    ConsoleWriter honouring pretty_print.
    """

    # Filtering
    min_level: Union[LogLevel, str] = LogLevel.INFO

    # Rendering
    pretty_print: bool = False
    include_stack_trace: bool = True

    # Record content
    default_metadata: Mapping[str, Any] = field(default_factory=dict)
    enrich_with_context: bool = True
    context_provider: ContextProvider = current_context

    # Sink
    output: Optional[OutputSink] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        object.__setattr__(self, "min_level", LogLevel.coerce(self.min_level))

        if self.default_metadata is None:
            object.__setattr__(self, "default_metadata", {})
        if not isinstance(self.default_metadata, Mapping):
            raise TypeError("default_metadata must be a mapping")
        object.__setattr__(
            self, "default_metadata", MappingProxyType(dict(self.default_metadata))
        )

        if self.output is not None and not callable(self.output):
            raise TypeError("output must be callable")
        if not callable(self.context_provider):
            raise TypeError("context_provider must be callable")

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for local debugging."""
        return cls(
            min_level=LogLevel.DEBUG,
            pretty_print=True,
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            min_level=LogLevel.INFO,
            pretty_print=False,
            include_stack_trace=True,
        )

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "LoggerConfig":
        """
        Create configuration from an options mapping.

        Accepts both snake_case and camelCase option names
        (e.g. "min_level" or "minLevel").

        Raises:
            ValueError: If an option name is not recognised
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in options.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown logger option: {key}")
            kwargs[name] = value
        return cls(**kwargs)
