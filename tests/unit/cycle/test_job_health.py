"""Unit tests for JobHealthCheck."""
from __future__ import annotations

import asyncio

from cyclekit.cycle import Job, JobHealthCheck, JobStatus, prepare


async def _ok() -> None:
    pass


async def _fail() -> None:
    raise RuntimeError("down")


class TestJobHealthCheck:
    def test_healthy_before_any_run(self):
        check = JobHealthCheck([Job(do=_ok, name="a", interval=1.0)])
        status = asyncio.run(check.check())
        assert status.healthy is True
        assert status.detail is None
        assert check.report() == {"a": None}

    def test_unhealthy_when_a_job_errored(self):
        async def _run():
            good = Job(do=_ok, name="good", interval=1.0)
            bad = Job(do=_fail, name="bad", interval=1.0)
            check = JobHealthCheck([good, bad], name="workers")
            await prepare(good)()
            await prepare(bad, on_error=lambda info, err: None)()
            status = await check.check()
            assert check.name == "workers"
            assert status.healthy is False
            assert "bad" in status.detail
            assert check.report() == {"good": JobStatus.PENDING, "bad": JobStatus.ERROR}
            assert check.to_dict() == {
                "name": "workers",
                "jobs": {"good": "pending", "bad": "error"},
            }
        asyncio.run(_run())

    def test_recovers_after_successful_run(self):
        async def _run():
            calls: list[int] = []

            async def task():
                calls.append(1)
                if len(calls) == 1:
                    raise RuntimeError("first")

            job = Job(do=task, name="retrying", interval=1.0)
            runnable = prepare(job, on_error=lambda info, err: None)
            check = JobHealthCheck([job])
            await runnable()
            assert (await check.check()).healthy is False
            await runnable()
            assert (await check.check()).healthy is True
        asyncio.run(_run())
