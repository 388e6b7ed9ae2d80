"""Observability – LoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from cyclekit.observability.logging.processors import JobInfoProcessor


class LoggerFactory:
    """Route structlog and stdlib logging through one root handler."""

    @staticmethod
    def configure(level: int | str = logging.INFO, json: bool = True) -> None:
        """Install a root handler rendering JSON lines (or console output when *json* is false).

        Records from ``logging.getLogger`` loggers and from structlog loggers
        share the same processors, so library log lines and job hook events
        end up in one stream.
        """
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            JobInfoProcessor(),
        ]
        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


def configure_logging(settings: Any) -> None:
    """Apply ``log_level`` and ``json_logs`` from a settings object such as
    :class:`~cyclekit.cycle.settings.CycleSettings`."""
    LoggerFactory.configure(settings.log_level, json=settings.json_logs)


__all__ = ["LoggerFactory", "configure_logging"]
