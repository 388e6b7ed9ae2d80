"""Cycle – orchestrator running any number of jobs in concert.

Each job gets its own repeating timer.  Slots missed while the loop was
busy are dropped, not replayed: a late wake-up fires one tick.  The first
unhandled failure from any tick stops every timer and is raised from
:func:`run`.  Ticks already in flight at that moment are neither cancelled
nor awaited.
"""
from __future__ import annotations

import asyncio
import dataclasses
import functools
import logging
from typing import Any, Iterable, Mapping, NoReturn

from cyclekit.cycle.job import Job, JobStatus

__all__ = ["run"]

logger = logging.getLogger(__name__)


async def run(jobs: Iterable[Job] | Mapping[str, Job]) -> NoReturn:
    """Run a cycle of *jobs* until one of them fails.

    Every tick calls the job's ``do`` directly.  Overlap protection, timeouts
    and soft-fail error handling are not applied here: wrap ``do`` with
    :func:`cyclekit.cycle.prepare` before building the job to get them.

    Jobs are copied with ``status`` reset to ``pending``; the caller's
    descriptors are left untouched.  Disabled jobs are skipped.

    Raises
    ------
    ValueError
        When there is no enabled job to run.
    Exception
        The first error raised by any tick, after all timers are stopped.
    """
    if isinstance(jobs, Mapping):
        jobs = jobs.values()
    working = [
        dataclasses.replace(job, status=JobStatus.PENDING)
        for job in jobs
        if job.enabled
    ]
    if not working:
        raise ValueError("A cycle needs at least one enabled job")

    loop = asyncio.get_running_loop()
    failed: asyncio.Future[NoReturn] = loop.create_future()
    drivers: list[asyncio.Task[None]] = []
    in_flight: set[asyncio.Future[Any]] = set()

    def fail(job: Job, exc: BaseException) -> None:
        if failed.done():
            logger.debug("cycle.failure_discarded name=%s error=%r", job.name, exc)
            return
        logger.error("cycle.failed name=%s error=%r", job.name, exc)
        for driver in drivers:
            driver.cancel()
        failed.set_exception(exc)

    def on_tick_done(job: Job, tick: asyncio.Future[Any]) -> None:
        in_flight.discard(tick)
        if tick.cancelled():
            return
        exc = tick.exception()
        if exc is not None:
            fail(job, exc)

    async def drive(job: Job) -> None:
        if job.defer:
            logger.debug("cycle.job.deferred name=%s defer=%s", job.name, job.defer)
            await asyncio.sleep(job.defer)
        next_at = loop.time()
        while True:
            tick = asyncio.ensure_future(_tick(job))
            in_flight.add(tick)
            tick.add_done_callback(functools.partial(on_tick_done, job))
            next_at += job.interval
            now = loop.time()
            if next_at <= now:
                # Missed slots collapse into the tick just fired; restart the
                # schedule from it.
                logger.debug("cycle.job.ticks_skipped name=%s late=%.3f", job.name, now - next_at)
                next_at = now + job.interval
            await asyncio.sleep(next_at - now)

    logger.info("cycle.started jobs=%s", [job.name for job in working])
    for job in working:
        drivers.append(asyncio.create_task(drive(job), name=f"cycle:{job.name}"))
    try:
        await failed
    finally:
        for driver in drivers:
            driver.cancel()
        await asyncio.gather(*drivers, return_exceptions=True)
        logger.info("cycle.stopped jobs=%s", [job.name for job in working])


async def _tick(job: Job) -> None:
    await job.do()
