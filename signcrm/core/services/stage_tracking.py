"""
Job stage auditing and progress display.

Any stage may follow any other; nothing here rejects a transition. The
only enforced behavior is that a save which changes the stage appends
exactly one changelog entry.
"""

from datetime import datetime, timezone

from pydantic import BaseModel

from signcrm.core.entities.job import ChangelogEntry, Job, ProductionStage

# Order offered in the stage picker
STAGE_OPTIONS: tuple[ProductionStage, ...] = (
    ProductionStage.QUOTATION_SENT,
    ProductionStage.QUOTATION_APPROVED,
    ProductionStage.INVOICE_SENT,
    ProductionStage.CLIENT_PAID_DEPOSIT,
    ProductionStage.DESIGN,
    ProductionStage.FABRICATION,
    ProductionStage.PRINTING,
    ProductionStage.CLIENT_PAID_FULL,
    ProductionStage.INSTALLATION_SCHEDULED,
    ProductionStage.COMPLETED,
    ProductionStage.ON_HOLD,
)

# Linear progression drawn as a progress bar; On Hold has no position
PROGRESS_STAGES: tuple[ProductionStage, ...] = tuple(
    stage for stage in STAGE_OPTIONS if stage != ProductionStage.ON_HOLD
)


class StageProgress(BaseModel):
    """Where a stage sits on the progress bar."""

    stage: ProductionStage
    position: int  # 1-based
    total: int

    @property
    def percent(self) -> float:
        return self.position / self.total * 100


def stage_progress(stage: ProductionStage) -> StageProgress | None:
    """Progress bar data, or None for stages outside the progression."""
    if stage not in PROGRESS_STAGES:
        return None
    return StageProgress(
        stage=stage,
        position=PROGRESS_STAGES.index(stage) + 1,
        total=len(PROGRESS_STAGES),
    )


def record_stage_change(
    previous_job: Job | None,
    new_job: Job,
    acting_user_id: str,
    now: datetime | None = None,
) -> list[ChangelogEntry]:
    """
    Changelog for ``new_job`` after a save.

    Args:
        previous_job: The stored job before the save, or None on creation.
        new_job: The job being saved.
        acting_user_id: Who is saving.
        now: Save timestamp; defaults to the current UTC time.

    Returns:
        A new list: ``new_job.changelog`` plus one entry when the stage
        differs from ``previous_job.stage``. Neither job is modified.
    """
    changelog = list(new_job.changelog)
    if previous_job is None or previous_job.stage == new_job.stage:
        return changelog

    changelog.append(
        ChangelogEntry(
            user_id=acting_user_id,
            timestamp=now or datetime.now(timezone.utc),
            from_stage=previous_job.stage,
            to_stage=new_job.stage,
        )
    )
    return changelog
