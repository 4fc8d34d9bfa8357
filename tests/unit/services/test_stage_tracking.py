"""Tests for stage changelog and progress."""

from datetime import datetime, timezone

import pytest

from signcrm.core.entities.job import ChangelogEntry, Job, ProductionStage
from signcrm.core.services.stage_tracking import (
    PROGRESS_STAGES,
    STAGE_OPTIONS,
    record_stage_change,
    stage_progress,
)

NOW = datetime(2023, 11, 20, 9, 30, tzinfo=timezone.utc)


class TestStageLists:
    def test_options_cover_every_stage(self):
        assert set(STAGE_OPTIONS) == set(ProductionStage)
        assert STAGE_OPTIONS[0] == ProductionStage.QUOTATION_SENT
        assert STAGE_OPTIONS[-1] == ProductionStage.ON_HOLD

    def test_progression_excludes_on_hold(self):
        assert len(PROGRESS_STAGES) == 10
        assert ProductionStage.ON_HOLD not in PROGRESS_STAGES


class TestStageProgress:
    def test_first_stage(self):
        progress = stage_progress(ProductionStage.QUOTATION_SENT)
        assert (progress.position, progress.total) == (1, 10)
        assert progress.percent == pytest.approx(10)

    def test_completed_is_full(self):
        assert stage_progress(ProductionStage.COMPLETED).percent == pytest.approx(100)

    def test_on_hold_has_no_bar(self):
        assert stage_progress(ProductionStage.ON_HOLD) is None


class TestRecordStageChange:
    def test_unchanged_stage_appends_nothing(self):
        job = Job(id="job-1", stage=ProductionStage.DESIGN)
        assert record_stage_change(job, job.model_copy(), "user-1", now=NOW) == []

    def test_changed_stage_appends_one_entry(self):
        before = Job(id="job-1", stage=ProductionStage.DESIGN)
        after = before.model_copy(update={"stage": ProductionStage.PRINTING})

        changelog = record_stage_change(before, after, "user-2", now=NOW)

        assert changelog == [
            ChangelogEntry(
                user_id="user-2",
                timestamp=NOW,
                from_stage=ProductionStage.DESIGN,
                to_stage=ProductionStage.PRINTING,
            )
        ]

    def test_existing_entries_kept_in_order(self):
        first = ChangelogEntry(
            user_id="user-1",
            timestamp=NOW,
            from_stage=ProductionStage.QUOTATION_SENT,
            to_stage=ProductionStage.DESIGN,
        )
        before = Job(id="job-1", stage=ProductionStage.DESIGN, changelog=[first])
        after = before.model_copy(update={"stage": ProductionStage.ON_HOLD})

        changelog = record_stage_change(before, after, "user-1", now=NOW)

        assert changelog[0] == first
        assert changelog[1].to_stage == ProductionStage.ON_HOLD
        assert len(changelog) == 2

    def test_creation_records_nothing(self):
        job = Job(stage=ProductionStage.COMPLETED)
        assert record_stage_change(None, job, "user-1") == []

    def test_inputs_not_mutated(self):
        before = Job(id="job-1", stage=ProductionStage.DESIGN)
        after = before.model_copy(update={"stage": ProductionStage.COMPLETED})
        record_stage_change(before, after, "user-1", now=NOW)
        assert before.changelog == []
        assert after.changelog == []

    def test_backwards_transition_allowed(self):
        before = Job(id="job-1", stage=ProductionStage.COMPLETED)
        after = before.model_copy(update={"stage": ProductionStage.QUOTATION_SENT})
        assert len(record_stage_change(before, after, "user-1", now=NOW)) == 1

    def test_default_timestamp_is_utc(self):
        before = Job(id="job-1", stage=ProductionStage.DESIGN)
        after = before.model_copy(update={"stage": ProductionStage.PRINTING})
        entry = record_stage_change(before, after, "user-1")[0]
        assert entry.timestamp.tzinfo is not None
