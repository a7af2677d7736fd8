"""Shared utilities for the strategy probe."""

from strategyprobe.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "StructuredJSONFormatter",
    "configure_logging",
    "get_logger",
]
