"""Unit tests for JobHooks."""
from __future__ import annotations

import asyncio
from typing import Any

import structlog

from cyclekit.cycle import Job, JobHooks, JobInfo, JobStatus


class RecordingLogger:
    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def _log(self, level: str, event: str, **kw: Any) -> None:
        self.records.append((level, event, kw))

    def debug(self, event: str, **kw: Any) -> None:
        self._log("debug", event, **kw)

    def info(self, event: str, **kw: Any) -> None:
        self._log("info", event, **kw)

    def error(self, event: str, **kw: Any) -> None:
        self._log("error", event, **kw)


class TestJobHooks:
    def test_empty_hooks_prepare_plain_supervisor(self):
        async def _run():
            async def task():
                pass

            job = Job(do=task, name="plain", interval=1.0)
            await JobHooks().prepare(job)()
            assert job.status == JobStatus.PENDING
        asyncio.run(_run())

    def test_logged_hooks_record_lifecycle(self):
        async def _run():
            log = RecordingLogger()

            async def task():
                await asyncio.sleep(0.01)

            job = Job(do=task, name="sync", interval=1.0)
            await JobHooks.logged(log).prepare(job)()
            assert [(lvl, evt) for lvl, evt, _ in log.records] == [
                ("debug", "job.started"),
                ("info", "job.completed"),
            ]
            completed = log.records[1][2]
            assert completed["job"] == JobInfo(name="sync", status=JobStatus.PENDING)
            assert completed["duration_ms"] >= 5
        asyncio.run(_run())

    def test_logged_hooks_soft_fail_and_log_error(self):
        async def _run():
            log = RecordingLogger()

            async def task():
                await asyncio.sleep(1)

            job = Job(do=task, name="slow", interval=1.0, timeout=0.01)
            await JobHooks.logged(log).prepare(job)()  # must not raise
            level, event, fields = log.records[-1]
            assert (level, event) == ("error", "job.failed")
            assert fields["error_type"] == "JobTimeoutError"
            assert fields["error"]["job_name"] == "slow"
        asyncio.run(_run())

    def test_rejected_tick_keeps_in_flight_duration(self):
        async def _run():
            log = RecordingLogger()
            release = asyncio.Event()

            async def task():
                await release.wait()

            job = Job(do=task, name="slow", interval=1.0)
            runnable = JobHooks.logged(log).prepare(job)
            first = asyncio.create_task(runnable())
            await asyncio.sleep(0.01)
            await runnable()  # rejected, soft fail
            release.set()
            await first

            events = [(evt, fields) for _, evt, fields in log.records]
            assert [evt for evt, _ in events] == ["job.started", "job.failed", "job.completed"]
            assert events[1][1]["error_type"] == "PreviousExecutionNotCompleteError"
            assert events[1][1]["duration_ms"] is None
            assert events[2][1]["duration_ms"] >= 5
        asyncio.run(_run())

    def test_logged_hooks_can_keep_hard_fail(self):
        hooks = JobHooks.logged(RecordingLogger(), soft_fail=False)
        assert hooks.before is not None
        assert hooks.on_error is None

    def test_logged_hooks_default_to_structlog(self):
        async def _run():
            async def task():
                raise RuntimeError("boom")

            job = Job(do=task, name="flaky", interval=1.0)
            with structlog.testing.capture_logs() as logs:
                await JobHooks.logged().prepare(job)()
            failed = [entry for entry in logs if entry["event"] == "job.failed"]
            assert len(failed) == 1
            assert failed[0]["log_level"] == "error"
            assert "boom" in failed[0]["error"]
        asyncio.run(_run())
