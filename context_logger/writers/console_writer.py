"""Console writer selecting the output stream by severity"""

import sys
from typing import Dict, Optional, TextIO, Union

from context_logger.core.log_entry import LogEntry
from context_logger.core.log_level import LogLevel
from context_logger.formatters.base_formatter import BaseFormatter
from context_logger.formatters.json_formatter import JSONFormatter

STDOUT = "stdout"
STDERR = "stderr"

# Severity -> standard stream name
DEFAULT_STREAMS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: STDOUT,
    LogLevel.INFO: STDOUT,
    LogLevel.WARN: STDERR,
    LogLevel.ERROR: STDERR,
}


class ConsoleWriter:
    """Write logs as JSON to stdout/stderr depending on level."""

    def __init__(
        self,
        pretty_print: bool = False,
        formatter: Optional[BaseFormatter] = None,
        streams: Optional[Dict[Union[LogLevel, str], object]] = None,
    ):
        """
        Initialize console writer.

        Args:
            pretty_print: Indent JSON output (ignored when formatter is given)
            formatter: Log formatter (default: JSONFormatter)
            streams: Severity -> stream mapping, keyed by LogLevel or level
                     name. Values are "stdout", "stderr" or a file-like
                     object. Missing levels use the defaults (debug/info to stdout, warn/error to stderr).
        """
        self.pretty_print = pretty_print
        self.formatter = formatter or JSONFormatter(indent=2 if pretty_print else None)
        self.streams = {
            **DEFAULT_STREAMS,
            **{LogLevel.coerce(level): target for level, target in (streams or {}).items()},
        }

    def stream_for(self, level: LogLevel) -> TextIO:
        """Resolve the stream for a level at write time."""
        target = self.streams.get(level, STDOUT)
        if target == STDOUT:
            return sys.stdout
        if target == STDERR:
            return sys.stderr
        return target

    def write(self, entry: LogEntry) -> None:
        """Write log entry to console."""
        stream = self.stream_for(entry.level)
        stream.write(self.formatter.render(entry))
        stream.flush()

    def flush(self) -> None:
        """Flush streams."""
        for level in self.streams:
            self.stream_for(level).flush()

    def __call__(self, entry: LogEntry) -> None:
        """Allow the writer to be used directly as an output sink."""
        self.write(entry)

    def __repr__(self) -> str:
        return f"ConsoleWriter(pretty_print={self.pretty_print}, formatter={self.formatter!r})"
