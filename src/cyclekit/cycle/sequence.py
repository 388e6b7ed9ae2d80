"""Cycle – compose runnables into a single sequential runnable."""
from __future__ import annotations

from cyclekit.cycle.job import Runnable

__all__ = ["sequence"]


def sequence(*runnables: Runnable) -> Runnable:
    """Return a runnable awaiting each of *runnables* in order.

    The first failure stops the sequence and propagates; later steps are
    not run.  An empty sequence completes immediately.
    """
    steps = tuple(runnables)

    async def run_sequence() -> None:
        for step in steps:
            await step()

    return run_sequence
