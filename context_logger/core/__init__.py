"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Context-aware structured logger
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Immutable log record
- LogLevel: Severity rank enumeration
- LoggerConfig: Configuration management
- EntryBuilder: Record construction with context enrichment
"""

from context_logger.core.logger import Logger, create_logger
from context_logger.core.logger_builder import LoggerBuilder
from context_logger.core.logger_interface import BaseLogger
from context_logger.core.log_entry import LogEntry
from context_logger.core.log_level import LogLevel
from context_logger.core.logger_config import LoggerConfig
from context_logger.core.entry_builder import EntryBuilder
from context_logger.core.error_serializer import serialize_error

__all__ = [
    "Logger",
    "create_logger",
    "LoggerBuilder",
    "BaseLogger",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "EntryBuilder",
    "serialize_error",
]
