"""Cycle – job execution errors."""
from __future__ import annotations

from typing import Any

from cyclekit.cycle.job import JobStatus
from cyclekit.kernel.errors import ApplicationError
from cyclekit.kernel.errors import TimeoutError as AppTimeoutError


class CycleError(ApplicationError):
    """Base class for failures raised by the job supervisor.

    Attributes
    ----------
    job_name:
        Name of the job the error relates to.
    status:
        Job status observed when the error was raised (``None`` if never run).
    """

    default_code = "cycle_error"

    def __init__(
        self,
        job_name: str,
        status: JobStatus | None,
        message: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.job_name = job_name
        self.status = status

    def context(self) -> dict[str, Any]:
        return {
            **super().context(),
            "job_name": self.job_name,
            "status": self.status.value if self.status is not None else None,
        }


class PreviousExecutionNotCompleteError(CycleError):
    """A tick was attempted while the previous execution of the job was still running."""

    default_code = "previous_execution_not_complete"

    def __init__(self, job_name: str, status: JobStatus | None, message: str | None = None) -> None:
        super().__init__(
            job_name,
            status,
            message or f"Previous execution of job '{job_name}' has not completed",
        )


class JobTimeoutError(CycleError, AppTimeoutError):
    """A job did not complete within its timeout.

    **This does not mean the job has been cleaned up.** The task body keeps
    running in the background; if these errors occur regularly, either the
    timeout is too low or the job has a problem.
    """

    default_code = "job_timeout"

    def __init__(
        self,
        job_name: str,
        status: JobStatus | None,
        timeout: float,
        message: str | None = None,
    ) -> None:
        # ``timeout`` travels up the MRO to the kernel TimeoutError.
        super().__init__(
            job_name,
            status,
            message or f"Job '{job_name}' timed out after {timeout}s",
            timeout=timeout,
        )


__all__ = ["CycleError", "JobTimeoutError", "PreviousExecutionNotCompleteError"]
