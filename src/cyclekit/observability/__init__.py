"""Observability – structured logging."""

from cyclekit.observability.logging import JobInfoProcessor, LoggerFactory, configure_logging, get_logger

__all__ = ["JobInfoProcessor", "LoggerFactory", "configure_logging", "get_logger"]
