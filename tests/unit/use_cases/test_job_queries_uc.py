"""Tests for ListJobsUseCase and DeleteJobUseCase."""

import pytest

from signcrm.application.use_cases.delete_job import DeleteJobUseCase
from signcrm.application.use_cases.list_jobs import ListJobsUseCase
from signcrm.core.exceptions import JobNotFoundError, PermissionDeniedError


class TestListJobsUseCase:
    def test_lists_all_in_store_order(self, stores, designer):
        jobs = ListJobsUseCase(stores.jobs).execute(designer)
        assert [j.id for j in jobs] == ["job-1", "job-2", "job-3", "job-4", "job-5"]

    @pytest.mark.parametrize(
        "term,expected",
        [
            ("coffee", ["job-1"]),
            ("VEHICLE", ["job-4"]),
            ("sign", ["job-1", "job-2", "job-3", "job-5"]),
            ("   ", ["job-1", "job-2", "job-3", "job-4", "job-5"]),
            ("nothing matches", []),
        ],
    )
    def test_search(self, stores, admin, term, expected):
        jobs = ListJobsUseCase(stores.jobs).execute(admin, search=term)
        assert [j.id for j in jobs] == expected

    def test_requires_view(self, stores, designer):
        designer.permissions.jobs.view = False
        with pytest.raises(PermissionDeniedError):
            ListJobsUseCase(stores.jobs).execute(designer)


class TestDeleteJobUseCase:
    def test_admin_deletes(self, stores, admin):
        removed = DeleteJobUseCase(stores.jobs).execute("job-2", admin)
        assert removed.id == "job-2"
        assert stores.jobs.get_job("job-2") is None

    def test_owner_with_flag_still_denied(self, stores, sales_user):
        sales_user.permissions.jobs.delete = True
        with pytest.raises(PermissionDeniedError):
            DeleteJobUseCase(stores.jobs).execute("job-2", sales_user)
        assert stores.jobs.get_job("job-2") is not None

    def test_unknown_job(self, stores, admin):
        with pytest.raises(JobNotFoundError):
            DeleteJobUseCase(stores.jobs).execute("job-404", admin)
