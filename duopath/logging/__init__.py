"""Structured logging for duopath."""

from .structured import StructuredLogger, LogLevel, create_logger
from .redaction import DataRedactor

__all__ = [
    "StructuredLogger",
    "LogLevel",
    "create_logger",
    "DataRedactor",
]
