"""Utility modules for logging and display formatting."""

from phishimpact.utils.formatting import format_currency, format_percentage
from phishimpact.utils.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger", "format_currency", "format_percentage"]
