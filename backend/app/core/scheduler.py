"""
Scheduler module for coordinating periodic tasks.

This module provides APScheduler integration for running the content sync
cycle on a fixed interval, plus a one-time kick shortly after startup.
"""

import uuid
from datetime import datetime, timedelta, timezone

import structlog
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.date import DateTrigger
from apscheduler.triggers.interval import IntervalTrigger

from ..services.sync_service import ContentSyncService, SyncResult, get_sync_service
from .config import get_settings

SYNC_JOB_ID = "content_sync"
STARTUP_SYNC_JOB_ID = "content_sync_startup"

logger = structlog.get_logger()


class ContentSyncScheduler:
    """Scheduler for ChillVibes background tasks."""

    def __init__(self, sync_service: ContentSyncService | None = None):
        """Initialize scheduler with configuration."""
        self.settings = get_settings()
        self.scheduler = AsyncIOScheduler()
        self._sync_service = sync_service
        self._is_running = False

    @property
    def sync_service(self) -> ContentSyncService:
        if self._sync_service is None:
            self._sync_service = get_sync_service()
        return self._sync_service

    @property
    def is_running(self) -> bool:
        return self._is_running

    def setup_jobs(self) -> None:
        """Set up scheduled jobs."""
        self.scheduler.add_job(
            func=self._sync_job,
            trigger=IntervalTrigger(hours=self.settings.sync_interval_hours),
            id=SYNC_JOB_ID,
            name="Content Sync",
            replace_existing=True,
            max_instances=1  # Prevent overlapping executions
        )

        run_at = datetime.now(timezone.utc) + timedelta(seconds=self.settings.sync_startup_delay_seconds)
        self.scheduler.add_job(
            func=self._sync_job,
            trigger=DateTrigger(run_date=run_at),
            id=STARTUP_SYNC_JOB_ID,
            name="Startup Content Sync",
            replace_existing=True,
        )

        logger.info("Scheduled jobs configured",
                   sync_interval_hours=self.settings.sync_interval_hours,
                   startup_delay_seconds=self.settings.sync_startup_delay_seconds)

    async def _sync_job(self) -> None:
        """Job function for the content sync cycle with correlation ID."""
        correlation_id = str(uuid.uuid4())
        job_logger = logger.bind(correlation_id=correlation_id, job=SYNC_JOB_ID)

        try:
            job_logger.info("Starting content sync job")
            result = await self.sync_service.run_cycle(correlation_id=correlation_id)

            if result.skipped:
                job_logger.warning("Content sync job skipped", reason=result.message)
            elif result.success:
                job_logger.info("Content sync job completed successfully",
                              articles=result.articles_count,
                              failed_chunks=result.failed_chunks)
            else:
                job_logger.warning("Content sync job completed with errors", message=result.message)

        except Exception as e:
            job_logger.error("Content sync job failed", error=str(e))
            # Don't re-raise - let scheduler continue with next execution

    def start(self) -> None:
        """Start the scheduler."""
        if not self._is_running:
            self.setup_jobs()
            self.scheduler.start()
            self._is_running = True
            logger.info("Scheduler started")

    def shutdown(self) -> None:
        """Shutdown the scheduler gracefully."""
        if self._is_running:
            self.scheduler.shutdown(wait=False)
            self._is_running = False
            logger.info("Scheduler stopped")

    def get_job_status(self) -> dict:
        """Get status of scheduled jobs."""
        if not self._is_running:
            return {"status": "stopped", "jobs": []}

        jobs = []
        for job in self.scheduler.get_jobs():
            jobs.append({
                "id": job.id,
                "name": job.name,
                "next_run": job.next_run_time.isoformat() if job.next_run_time else None,
                "trigger": str(job.trigger)
            })

        return {
            "status": "running",
            "jobs": jobs
        }

    async def run_sync_now(self) -> SyncResult:
        """Manually trigger a sync cycle (for the admin endpoint)."""
        correlation_id = str(uuid.uuid4())
        logger.info("Manual content sync triggered", correlation_id=correlation_id)
        return await self.sync_service.run_cycle(correlation_id=correlation_id)


# Global scheduler instance
_scheduler: ContentSyncScheduler | None = None


def get_scheduler() -> ContentSyncScheduler:
    """Get the global scheduler instance (singleton pattern)."""
    global _scheduler
    if _scheduler is None:
        _scheduler = ContentSyncScheduler()
    return _scheduler
