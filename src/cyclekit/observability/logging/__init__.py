"""Observability – structlog configuration and helpers."""
from cyclekit.observability.logging.factory import LoggerFactory, configure_logging
from cyclekit.observability.logging.processors import JobInfoProcessor, get_logger

__all__ = [
    "JobInfoProcessor",
    "LoggerFactory",
    "configure_logging",
    "get_logger",
]
