"""Writers module - Log output sinks"""

from context_logger.writers.console_writer import ConsoleWriter, DEFAULT_STREAMS

__all__ = ["ConsoleWriter", "DEFAULT_STREAMS"]
