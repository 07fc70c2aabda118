"""Tests for the APScheduler wiring of the content sync job."""

from __future__ import annotations

import pytest
from apscheduler.triggers.date import DateTrigger
from apscheduler.triggers.interval import IntervalTrigger

from backend.app.core.scheduler import STARTUP_SYNC_JOB_ID, SYNC_JOB_ID, ContentSyncScheduler
from backend.app.services.sync_service import SyncResult


class StubSyncService:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.correlation_ids: list[str] = []

    async def run_cycle(self, correlation_id=None) -> SyncResult:
        self.correlation_ids.append(correlation_id)
        if self.error is not None:
            raise self.error
        return SyncResult(success=True, message="ok", articles_count=8, correlation_id=correlation_id)


def test_setup_jobs_registers_interval_and_startup_jobs(monkeypatch):
    monkeypatch.setenv("SYNC_INTERVAL_HOURS", "2")
    scheduler = ContentSyncScheduler(sync_service=StubSyncService())

    scheduler.setup_jobs()

    jobs = {job.id: job for job in scheduler.scheduler.get_jobs()}
    assert set(jobs) == {SYNC_JOB_ID, STARTUP_SYNC_JOB_ID}
    interval_job = jobs[SYNC_JOB_ID]
    assert isinstance(interval_job.trigger, IntervalTrigger)
    assert interval_job.trigger.interval.total_seconds() == 2 * 3600
    assert interval_job.max_instances == 1
    assert isinstance(jobs[STARTUP_SYNC_JOB_ID].trigger, DateTrigger)


def test_job_status_when_stopped():
    scheduler = ContentSyncScheduler(sync_service=StubSyncService())

    assert scheduler.get_job_status() == {"status": "stopped", "jobs": []}
    assert scheduler.is_running is False


@pytest.mark.asyncio
async def test_sync_job_never_raises():
    service = StubSyncService(error=RuntimeError("boom"))
    scheduler = ContentSyncScheduler(sync_service=service)

    await scheduler._sync_job()

    assert len(service.correlation_ids) == 1
    assert service.correlation_ids[0]


@pytest.mark.asyncio
async def test_run_sync_now_returns_cycle_result():
    scheduler = ContentSyncScheduler(sync_service=StubSyncService())

    result = await scheduler.run_sync_now()

    assert result.success is True
    assert result.articles_count == 8


@pytest.mark.asyncio
async def test_start_and_shutdown():
    scheduler = ContentSyncScheduler(sync_service=StubSyncService())

    scheduler.start()
    try:
        status = scheduler.get_job_status()
        assert status["status"] == "running"
        assert {job["id"] for job in status["jobs"]} == {SYNC_JOB_ID, STARTUP_SYNC_JOB_ID}
    finally:
        scheduler.shutdown()

    assert scheduler.is_running is False
