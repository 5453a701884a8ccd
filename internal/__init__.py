from internal.logging import get_logger, LogLevel, StructuredLogger

__all__ = [
    "get_logger",
    "LogLevel",
    "StructuredLogger",
]
