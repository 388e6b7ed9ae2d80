"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class JobInfoProcessor:
    """structlog processor flattening a ``job`` entry into plain fields.

    A :class:`~cyclekit.cycle.job.JobInfo` (or :class:`~cyclekit.cycle.job.Job`)
    bound under ``job`` becomes ``job_name`` and ``job_status``, so renderers
    never have to serialise the object itself.

    Usage::

        structlog.configure(processors=[JobInfoProcessor(), ...])
        log.info("job.started", job=job.info())
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        job = event_dict.get("job")
        if job is None or not hasattr(job, "name"):
            return event_dict
        del event_dict["job"]
        event_dict.setdefault("job_name", job.name)
        status = getattr(job, "status", None)
        event_dict.setdefault("job_status", getattr(status, "value", status))
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["JobInfoProcessor", "get_logger"]
