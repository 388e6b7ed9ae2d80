"""Cycle – job supervisor.

:func:`prepare` wraps a job's task with status management, an overlap guard,
an optional timeout and lifecycle callbacks.  The wrapped job becomes a
*runnable*: a zero-argument coroutine function representing one execution.

If an ``on_error`` handler is given the runnable *soft fails*: errors are
passed to the handler and never reach the caller.  Without a handler every
error propagates (*hard fail*), which under :func:`cyclekit.cycle.run`
cancels the whole cycle.
"""
from __future__ import annotations

import asyncio
import functools
import logging
from typing import Any

from cyclekit.cycle.errors import JobTimeoutError, PreviousExecutionNotCompleteError
from cyclekit.cycle.job import DoFn, ErrorFn, InfoFn, Job, JobStatus, Runnable

__all__ = ["prepare"]

logger = logging.getLogger(__name__)

# Strong references to task bodies abandoned by a timeout, until they finish.
_detached: set[asyncio.Future[Any]] = set()


def prepare(
    job: Job,
    before: InfoFn | None = None,
    after: InfoFn | None = None,
    on_error: ErrorFn | None = None,
) -> Runnable:
    """Wrap *job* in a runnable that supervises each execution.

    Parameters
    ----------
    job:
        The job to supervise.  Its ``status`` field is owned by the returned
        runnable from now on.
    before:
        Called with a :class:`~cyclekit.cycle.job.JobInfo` just before the
        task starts.
    after:
        Called with a :class:`~cyclekit.cycle.job.JobInfo` after the task
        completes successfully.
    on_error:
        Called with the job info and the error when an execution is rejected,
        times out or fails.  Its presence turns failures into soft fails.

    Notes
    -----
    A timeout only abandons *waiting* for the task.  The task itself is not
    cancelled and keeps running in the background; its outcome is logged at
    DEBUG level and otherwise ignored.
    """
    do_job = job.do

    async def runnable() -> None:
        if job.status == JobStatus.RUNNING:
            rejected = PreviousExecutionNotCompleteError(job.name, job.status)
            logger.warning("cycle.job.overlap name=%s", job.name)
            if on_error is None:
                raise rejected
            on_error(job.info(), rejected)
            return

        if before is not None:
            before(job.info())
        job.status = JobStatus.RUNNING
        try:
            if job.timeout is not None:
                await _await_within(job, do_job, job.timeout)
            else:
                await do_job()
        except Exception as exc:
            job.status = JobStatus.ERROR
            logger.warning("cycle.job.failed name=%s error=%r", job.name, exc)
            if on_error is None:
                raise
            on_error(job.info(), exc)
            return
        except BaseException as exc:
            # Cancellation and interpreter exits bypass on_error.
            job.status = JobStatus.ERROR
            logger.info("cycle.job.aborted name=%s error=%r", job.name, exc)
            raise

        job.status = JobStatus.PENDING
        if after is not None:
            after(job.info())

    return runnable


async def _await_within(job: Job, do_job: DoFn, timeout: float) -> None:
    task = asyncio.ensure_future(do_job())
    try:
        done, _ = await asyncio.wait({task}, timeout=timeout)
    except asyncio.CancelledError:
        _detach(job.name, task)
        raise
    if task not in done:
        _detach(job.name, task)
        logger.warning("cycle.job.timeout name=%s timeout=%s", job.name, timeout)
        raise JobTimeoutError(job.name, job.status, timeout)
    task.result()


def _detach(job_name: str, task: asyncio.Future[Any]) -> None:
    _detached.add(task)
    task.add_done_callback(functools.partial(_on_detached_done, job_name))


def _on_detached_done(job_name: str, task: asyncio.Future[Any]) -> None:
    _detached.discard(task)
    if task.cancelled():
        logger.debug("cycle.job.detached_cancelled name=%s", job_name)
        return
    exc = task.exception()
    if exc is not None:
        logger.debug("cycle.job.detached_failed name=%s error=%r", job_name, exc)
    else:
        logger.debug("cycle.job.detached_completed name=%s", job_name)
