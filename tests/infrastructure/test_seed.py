"""Tests for fixture seeding."""

from signcrm.core.entities.job import ProductionStage
from signcrm.core.entities.user import DEFAULT_PASSWORD, UserRole
from signcrm.core.services.financial_aggregation import total_monthly_fixed_costs
from signcrm.infrastructure.seed import initial_jobs, initial_users, seed_stores
from signcrm.infrastructure.storage.memory import InMemoryStores


class TestSeedStores:
    def test_counts(self, stores):
        assert len(stores.catalog.list_categories()) == 4
        assert len(stores.catalog.list_items()) == 7
        assert len(stores.fixed_costs.list_fixed_costs()) == 5
        assert len(stores.users.list_users()) == 5
        assert len(stores.jobs.list_jobs()) == 5

    def test_fixed_cost_total(self, stores):
        assert total_monthly_fixed_costs(stores.fixed_costs.list_fixed_costs()) == 8850

    def test_independent_workspaces(self):
        first = seed_stores(InMemoryStores())
        second = seed_stores(InMemoryStores())
        first.jobs.delete_job("job-1")
        assert second.jobs.get_job("job-1") is not None

    def test_users_have_role_defaults(self):
        users = {u.id: u for u in initial_users()}
        assert users["user-1"].role == UserRole.ADMIN
        assert users["user-2"].permissions.jobs.create
        assert all(u.password == DEFAULT_PASSWORD for u in users.values())

    def test_job_fixtures(self):
        jobs = {j.id: j for j in initial_jobs()}
        assert jobs["job-1"].stage == ProductionStage.COMPLETED
        assert jobs["job-3"].balance == -1400
        assert jobs["job-5"].quotation_details.line_items == []
