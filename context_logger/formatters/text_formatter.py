"""
Text formatter with customizable template

Formats log entries using a template string with placeholders
"""

from typing import Mapping, Optional

from context_logger.core.log_entry import LogEntry, format_timestamp
from context_logger.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format log entries using a customizable template.

    Metadata and error details are appended as key=value pairs.
    """

    DEFAULT_TEMPLATE = "[{timestamp}] [{level:5}] [{trace_id}] {message}"

    def __init__(self, template: Optional[str] = None, include_metadata: bool = True):
        """
        Initialize text formatter.

        Args:
            template: Format template with placeholders.
                     Available placeholders:
                     - {timestamp}: ISO 8601 timestamp
                     - {level}: Log level name (upper case)
                     - {message}: Log message
                     - {trace_id}: Trace ID or "-"
                     - {request_id}: Request ID or "-"
                     - {user_id}: User ID or "-"
            include_metadata: Append metadata and error fields

        Example:
            formatter = TextFormatter("{level} {user_id} - {message}")
        """
        self.template = template or self.DEFAULT_TEMPLATE
        self.include_metadata = include_metadata

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry using the template.

        Args:
            entry: Log entry to format

        Returns:
            Formatted string
        """
        format_dict = {
            "timestamp": format_timestamp(entry.timestamp),
            "level": str(entry.level).upper(),
            "message": entry.message,
            "trace_id": entry.trace_id or "-",
            "request_id": entry.request_id or "-",
            "user_id": entry.user_id or "-",
        }

        try:
            line = self.template.format(**format_dict)
        except KeyError as e:
            # Fallback if template has unknown placeholder
            line = f"[FORMAT ERROR: {e}] {entry.message}"

        if self.include_metadata:
            pairs = [f"{k}={v!r}" for k, v in (entry.metadata or {}).items()]
            if entry.error:
                detail = entry.error.get("message") if isinstance(entry.error, Mapping) else entry.error
                pairs.append(f"error={detail!r}")
            if pairs:
                line = f"{line} {' '.join(pairs)}"

        return line

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(template='{self.template}')"
