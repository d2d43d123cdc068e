"""
Logging Infrastructure

Structured logging setup and performance logging helpers.
"""

from .logging_config import (
    LoggingConfig,
    LoggingConfigOptions,
    PerformanceLogger,
    get_structured_logger,
    setup_logging,
)

__all__ = [
    "LoggingConfig",
    "LoggingConfigOptions",
    "PerformanceLogger",
    "get_structured_logger",
    "setup_logging",
]
