"""Cycle – reusable lifecycle callback bundles."""
from __future__ import annotations

import dataclasses
import time
from typing import Any

from cyclekit.cycle.errors import PreviousExecutionNotCompleteError
from cyclekit.cycle.job import ErrorFn, InfoFn, Job, JobInfo, Runnable
from cyclekit.cycle.supervisor import prepare
from cyclekit.kernel.errors import BaseError
from cyclekit.observability.logging import get_logger

__all__ = ["JobHooks"]


@dataclasses.dataclass(frozen=True)
class JobHooks:
    """The optional ``before`` / ``after`` / ``on_error`` callbacks of :func:`prepare`."""

    before: InfoFn | None = None
    after: InfoFn | None = None
    on_error: ErrorFn | None = None

    def prepare(self, job: Job) -> Runnable:
        return prepare(job, self.before, self.after, self.on_error)

    @classmethod
    def logged(cls, logger: Any = None, *, soft_fail: bool = True) -> "JobHooks":
        """Hooks emitting ``job.started``, ``job.completed`` and ``job.failed`` events.

        With ``soft_fail=False`` no ``on_error`` is installed, so failures
        still propagate (and cancel the cycle); they are then only logged by
        the supervisor itself.
        """
        log = logger if logger is not None else get_logger("cyclekit.jobs")
        started: dict[str, float] = {}

        def before(info: JobInfo) -> None:
            started[info.name] = time.monotonic()
            log.debug("job.started", job=info)

        def after(info: JobInfo) -> None:
            log.info("job.completed", job=info, duration_ms=_elapsed_ms(started, info.name))

        def on_error(info: JobInfo, exc: BaseException) -> None:
            error = exc.to_dict() if isinstance(exc, BaseError) else repr(exc)
            # A rejected tick never ran `before`; the start time belongs to the
            # execution still in flight.
            rejected = isinstance(exc, PreviousExecutionNotCompleteError)
            log.error(
                "job.failed",
                job=info,
                error=error,
                error_type=type(exc).__name__,
                duration_ms=None if rejected else _elapsed_ms(started, info.name),
            )

        return cls(before, after, on_error if soft_fail else None)


def _elapsed_ms(started: dict[str, float], name: str) -> float | None:
    t0 = started.pop(name, None)
    if t0 is None:
        return None
    return round((time.monotonic() - t0) * 1000, 3)
