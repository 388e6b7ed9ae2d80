"""Example: a small cycle of supervised jobs.

Run with::

    pip install -e .
    CYCLE_LOG_LEVEL=DEBUG python docs/examples/heartbeat.py

``heartbeat`` soft fails through logged hooks, so its timeouts never stop
the cycle.  ``sync`` hard fails: the first error it raises stops every job
and is raised from :func:`cyclekit.cycle.run`.  Set
``CYCLE_DISABLED_JOBS=sync`` to keep the cycle running indefinitely.
"""

from __future__ import annotations

import asyncio
import random

from cyclekit.cycle import CycleSettings, Job, JobHooks, apply_settings, prepare, run, sequence


async def ping() -> None:
    await asyncio.sleep(random.uniform(0.05, 0.3))


async def fetch() -> None:
    await asyncio.sleep(0.1)


async def store() -> None:
    if random.random() < 0.1:
        raise RuntimeError("store rejected the batch")


def build_jobs() -> list[Job]:
    hooks = JobHooks.logged()

    heartbeat = Job(do=ping, name="heartbeat", interval=1.0, timeout=0.2)
    sync = Job(do=sequence(fetch, store), name="sync", interval=2.0, defer=0.5)

    return [
        Job(do=hooks.prepare(heartbeat), name=heartbeat.name, interval=heartbeat.interval),
        Job(do=prepare(sync), name=sync.name, interval=sync.interval, defer=sync.defer),
    ]


async def main() -> None:
    settings = CycleSettings.from_env()
    settings.configure_logging()
    await run(apply_settings(build_jobs(), settings))


if __name__ == "__main__":
    asyncio.run(main())
