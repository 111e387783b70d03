"""
Logger interface

Public surface shared by Logger and any alternate implementation.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

Metadata = Mapping[str, Any]


class BaseLogger(ABC):
    """Abstract base class for context-aware structured loggers."""

    @abstractmethod
    def debug(self, message: str, metadata: Optional[Metadata] = None) -> None:
        """
        Log a debug message.

        Args:
            message: Log message
            metadata: Additional metadata
        """

    @abstractmethod
    def info(self, message: str, metadata: Optional[Metadata] = None) -> None:
        """Log an info message."""

    @abstractmethod
    def warn(self, message: str, metadata: Optional[Metadata] = None) -> None:
        """Log a warning message."""

    @abstractmethod
    def error(
        self,
        message: str,
        error: Any = None,
        metadata: Optional[Metadata] = None,
    ) -> None:
        """
        Log an error message.

        Args:
            message: Log message
            error: Exception or any other value describing the failure
            metadata: Additional metadata
        """

    @abstractmethod
    def child(self, metadata: Metadata) -> "BaseLogger":
        """
        Create a child logger with additional context.

        Args:
            metadata: Metadata added to all logs from the child logger
        """
