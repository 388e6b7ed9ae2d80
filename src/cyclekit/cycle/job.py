"""Cycle – Job descriptor, JobInfo projection and JobStatus enum."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Awaitable, Callable

__all__ = [
    "DoFn",
    "ErrorFn",
    "InfoFn",
    "Job",
    "JobInfo",
    "JobStatus",
    "Runnable",
]


class JobStatus(str, Enum):
    """Last observed lifecycle state of a job. ``None`` on a job means never run."""

    PENDING = "pending"
    RUNNING = "running"
    ERROR = "error"


Runnable = Callable[[], Awaitable[None]]
DoFn = Runnable


@dataclasses.dataclass(frozen=True)
class JobInfo:
    """Read-only snapshot of a job handed to lifecycle callbacks."""

    name: str
    status: JobStatus | None = None


InfoFn = Callable[[JobInfo], None]
ErrorFn = Callable[[JobInfo, BaseException], None]


@dataclasses.dataclass
class Job:
    """A named unit of periodic work.

    ``interval``, ``defer`` and ``timeout`` are expressed in seconds.
    ``status`` belongs to whichever supervisor wraps the job (see
    :func:`cyclekit.cycle.prepare`); callers should treat it as read-only.
    """

    do: DoFn
    name: str
    interval: float
    defer: float | None = None
    timeout: float | None = None
    status: JobStatus | None = None
    enabled: bool = True

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Job must have a non-empty 'name'")
        if self.interval is None or self.interval <= 0:
            raise ValueError(f"Job '{self.name}' must have a positive 'interval'")
        if self.defer is not None and self.defer < 0:
            raise ValueError(f"Job '{self.name}' cannot have a negative 'defer'")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"Job '{self.name}' must have a positive 'timeout' when set")

    def info(self) -> JobInfo:
        return JobInfo(name=self.name, status=self.status)
