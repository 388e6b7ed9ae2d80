"""Cycle – recurring jobs with overlap guards, timeouts and cascading cancellation."""
from cyclekit.cycle.errors import CycleError, JobTimeoutError, PreviousExecutionNotCompleteError
from cyclekit.cycle.health import HealthStatus, JobHealthCheck
from cyclekit.cycle.hooks import JobHooks
from cyclekit.cycle.job import DoFn, ErrorFn, InfoFn, Job, JobInfo, JobStatus, Runnable
from cyclekit.cycle.orchestrator import run
from cyclekit.cycle.sequence import sequence
from cyclekit.cycle.settings import CycleSettings, apply_settings
from cyclekit.cycle.supervisor import prepare

__all__ = [
    "CycleError",
    "CycleSettings",
    "DoFn",
    "ErrorFn",
    "HealthStatus",
    "InfoFn",
    "Job",
    "JobHealthCheck",
    "JobHooks",
    "JobInfo",
    "JobStatus",
    "JobTimeoutError",
    "PreviousExecutionNotCompleteError",
    "Runnable",
    "apply_settings",
    "prepare",
    "run",
    "sequence",
]
