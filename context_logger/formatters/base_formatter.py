"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from context_logger.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert LogEntry objects into text. Writers call render(),
    which terminates the formatted text with a newline.
    """

    terminator = "\n"

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """
        Format a log entry into a string.

        Args:
            entry: The log entry to format

        Returns:
            Formatted string representation of the log entry
        """
        pass

    def render(self, entry: LogEntry) -> str:
        """Formatted entry followed by the line terminator."""
        return self.format(entry) + self.terminator

    def __call__(self, entry: LogEntry) -> str:
        """Allow formatters to be callable."""
        return self.format(entry)
