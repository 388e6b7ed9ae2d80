"""Unit tests for sequence()."""
from __future__ import annotations

import asyncio

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cyclekit.cycle import Job, JobStatus, prepare, sequence


def _step(log: list[str], name: str, error: BaseException | None = None):
    async def step():
        log.append(name)
        if error is not None:
            raise error
    return step


class TestSequence:
    def test_runs_steps_in_order(self):
        log: list[str] = []
        asyncio.run(sequence(_step(log, "a"), _step(log, "b"), _step(log, "c"))())
        assert log == ["a", "b", "c"]

    def test_failure_stops_remaining_steps(self):
        log: list[str] = []
        boom = RuntimeError("b failed")
        composed = sequence(_step(log, "a"), _step(log, "b", boom), _step(log, "c"))
        with pytest.raises(RuntimeError) as exc_info:
            asyncio.run(composed())
        assert exc_info.value is boom
        assert log == ["a", "b"]

    def test_empty_sequence_succeeds(self):
        asyncio.run(sequence()())

    def test_steps_do_not_overlap(self):
        async def _run():
            active: list[str] = []
            overlap: list[bool] = []

            def slow(name: str):
                async def step():
                    overlap.append(bool(active))
                    active.append(name)
                    await asyncio.sleep(0.01)
                    active.remove(name)
                return step

            await sequence(slow("a"), slow("b"), slow("c"))()
            assert overlap == [False, False, False]
        asyncio.run(_run())

    def test_composes_prepared_jobs(self):
        async def _run():
            log: list[str] = []
            fetch = Job(do=_step(log, "fetch"), name="fetch", interval=1.0)
            store = Job(do=_step(log, "store"), name="store", interval=1.0)
            await sequence(prepare(fetch), prepare(store))()
            assert log == ["fetch", "store"]
            assert fetch.status == store.status == JobStatus.PENDING
        asyncio.run(_run())

    @given(names=st.lists(st.text(min_size=1, max_size=5), max_size=8), data=st.data())
    def test_only_steps_up_to_the_failure_run(self, names: list[str], data: st.DataObject):
        fail_at = data.draw(st.one_of(st.none(), st.integers(0, max(len(names) - 1, 0))))
        if not names:
            fail_at = None
        log: list[str] = []
        steps = [
            _step(log, name, RuntimeError(name) if i == fail_at else None)
            for i, name in enumerate(names)
        ]
        composed = sequence(*steps)
        if fail_at is None:
            asyncio.run(composed())
            assert log == names
        else:
            with pytest.raises(RuntimeError):
                asyncio.run(composed())
            assert log == names[: fail_at + 1]
