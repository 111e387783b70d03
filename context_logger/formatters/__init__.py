"""
Log formatters module

Provides formatter implementations for controlling log output format.
"""

from context_logger.formatters.base_formatter import BaseFormatter
from context_logger.formatters.text_formatter import TextFormatter
from context_logger.formatters.json_formatter import JSONFormatter

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "JSONFormatter",
]
