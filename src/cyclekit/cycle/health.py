"""Cycle – health check over the last observed status of supervised jobs."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Iterable

from cyclekit.cycle.job import Job, JobStatus

__all__ = ["HealthStatus", "JobHealthCheck"]


@dataclass
class HealthStatus:
    healthy: bool
    detail: str | None = None
    latency_ms: float = 0.0


class JobHealthCheck:
    """Reports unhealthy while any job's last execution ended in ``error``.

    Point it at the jobs passed to :func:`~cyclekit.cycle.prepare`; those are
    the descriptors whose ``status`` the supervisor keeps up to date.
    """

    def __init__(self, jobs: Iterable[Job], name: str = "cycle") -> None:
        self._jobs = list(jobs)
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def report(self) -> dict[str, JobStatus | None]:
        return {job.name: job.status for job in self._jobs}

    async def check(self) -> HealthStatus:
        start = time.monotonic()
        failing = sorted(job.name for job in self._jobs if job.status == JobStatus.ERROR)
        status = HealthStatus(
            healthy=not failing,
            detail=f"failing jobs: {', '.join(failing)}" if failing else None,
        )
        status.latency_ms = (time.monotonic() - start) * 1000
        return status

    def to_dict(self) -> dict:
        return {
            "name": self._name,
            "jobs": {
                name: status.value if status is not None else None
                for name, status in self.report().items()
            },
        }
