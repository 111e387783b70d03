"""
Log level enumeration

Severity ranks used for threshold filtering.
"""

from enum import IntEnum
from typing import Dict, Union


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values are the severity rank; a record is emitted when its rank is
    greater than or equal to the logger's minimum level.
    """

    DEBUG = 0   # Debug information
    INFO = 1    # Informational messages
    WARN = 2    # Warning messages
    ERROR = 3   # Error messages

    def __str__(self) -> str:
        """Wire representation of log level."""
        return self.name.lower()

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        name = level_str.strip().upper()
        name = LEVEL_ALIASES.get(name, name)
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Invalid log level: {level_str}")

    @classmethod
    def coerce(cls, value: Union["LogLevel", str]) -> "LogLevel":
        """Accept a LogLevel or its name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        raise TypeError(f"level must be LogLevel or str, got {type(value).__name__}")


LEVEL_ALIASES: Dict[str, str] = {
    "WARNING": "WARN",
}
