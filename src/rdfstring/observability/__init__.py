"""Observability module for rdfstring.

Provides structured logging:
- JSON formatter for log aggregation
- Console formatter for interactive use
"""

from rdfstring.observability.logging import (
    ConsoleFormatter,
    JsonFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "JsonFormatter",
    "ConsoleFormatter",
]
