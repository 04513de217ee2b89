"""
Pipeline Context

Per-run state handed to BasePipeline.execute(): a bound logger, timing and
the record counter that ends up in the PipelineResult.
"""

import uuid
from datetime import datetime

import pytz

from core.logging import get_logger
from core.settings import settings
from schemas.common import ApiStatus
from schemas.pipeline import PipelineResult


class PipelineContext:
    """Tracks a single pipeline run."""

    def __init__(self, pipeline_name: str):
        self.pipeline_name = pipeline_name
        self.run_id = uuid.uuid4().hex[:12]
        self.tz = pytz.timezone(settings.timezone)
        self.started_at: datetime | None = None
        self.records_processed = 0
        self.log = get_logger("pipeline").bind(
            pipeline=pipeline_name,
            run_id=self.run_id,
        )

    def start_tracking(self) -> None:
        self.started_at = datetime.now(self.tz)
        self.log.info("pipeline_started", started_at=self.started_at.isoformat())

    def increment_records(self, count: int = 1) -> None:
        self.records_processed += count

    def _timing(self) -> tuple[str, str, float]:
        if self.started_at is None:
            self.started_at = datetime.now(self.tz)
        completed_at = datetime.now(self.tz)
        duration = (completed_at - self.started_at).total_seconds()
        return self.started_at.isoformat(), completed_at.isoformat(), round(duration, 3)

    def mark_success(self) -> PipelineResult:
        started_at, completed_at, duration = self._timing()
        self.log.info(
            "pipeline_completed",
            records=self.records_processed,
            duration_seconds=duration,
        )
        return PipelineResult(
            status=ApiStatus.SUCCESS,
            message=f"{self.pipeline_name} imported {self.records_processed} records",
            started_at=started_at,
            completed_at=completed_at,
            duration_seconds=duration,
            records_processed=self.records_processed,
        )

    def mark_skipped(self, existing: dict[str, int]) -> PipelineResult:
        """The target tables already hold data; nothing was read or written."""
        started_at, completed_at, duration = self._timing()
        self.log.info("pipeline_skipped", existing=existing)
        summary = ", ".join(f"{count} {table}" for table, count in existing.items())
        return PipelineResult(
            status=ApiStatus.SUCCESS,
            message=f"Skipped: {summary} already exist",
            started_at=started_at,
            completed_at=completed_at,
            duration_seconds=duration,
            records_processed=0,
            skipped=True,
        )

    def mark_failed(self, error: Exception) -> PipelineResult:
        started_at, completed_at, duration = self._timing()
        self.log.error(
            "pipeline_failed",
            error=str(error),
            error_type=type(error).__name__,
            records=self.records_processed,
            exc_info=True,
        )
        return PipelineResult(
            status=ApiStatus.ERROR,
            message=f"{self.pipeline_name} failed",
            started_at=started_at,
            completed_at=completed_at,
            duration_seconds=duration,
            records_processed=self.records_processed,
            error=str(error),
        )
