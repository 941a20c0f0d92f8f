"""Observability – structlog configuration and logger helpers."""
from catalog_query.observability.logging.factory import JsonLoggerFactory, configure_logging
from catalog_query.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "configure_logging", "get_logger"]
