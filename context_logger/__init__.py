"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Context Logger - Context-aware structured logging
Records are enriched with the traceId, requestId and userId of the
current request scope.
"""

__version__ = "0.1.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

VERSION = __version__

from context_logger.core.logger import Logger, create_logger, logger
from context_logger.core.logger_builder import LoggerBuilder
from context_logger.core.logger_interface import BaseLogger
from context_logger.core.log_entry import LogEntry
from context_logger.core.log_level import LogLevel
from context_logger.core.logger_config import LoggerConfig
from context_logger.context.request_context import RequestContext

# Import submodules (not all classes by default)
from context_logger import formatters
from context_logger import writers

__all__ = [
    "Logger",
    "create_logger",
    "logger",
    "LoggerBuilder",
    "BaseLogger",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "RequestContext",
    "formatters",
    "writers",
    "VERSION",
]
