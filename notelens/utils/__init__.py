"""Utility modules for NoteLens."""

from notelens.utils.clock import Clock, utc_now
from notelens.utils.exceptions import (
    ConfigurationError,
    NoteLensError,
    StoreError,
    ValidationError,
)
from notelens.utils.id_generator import generate_edge_id, generate_insight_id
from notelens.utils.logger import get_logger, setup_logging

__all__ = [
    # Clock
    "Clock",
    "utc_now",
    # Logging
    "get_logger",
    "setup_logging",
    # ID Generators
    "generate_insight_id",
    "generate_edge_id",
    # Exceptions
    "NoteLensError",
    "ValidationError",
    "ConfigurationError",
    "StoreError",
]
