"""Tests for the workspace factory and the management CLI."""

import manage
from signcrm.application.services import create_workspace


class TestCreateWorkspace:
    def test_seeded_by_default(self):
        workspace = create_workspace()
        assert len(workspace.stores.jobs.list_jobs()) == 5

    def test_unseeded(self):
        workspace = create_workspace(seed=False)
        assert workspace.stores.jobs.list_jobs() == []
        assert workspace.stores.users.list_users() == []

    def test_workspaces_are_independent(self):
        first = create_workspace()
        second = create_workspace()
        admin = first.stores.users.get_user("user-1")
        first.delete_job.execute("job-1", admin)
        assert second.stores.jobs.get_job("job-1") is not None

    def test_custom_renderer_is_used(self):
        class StubRenderer:
            def render(self, report):
                return b"%PDF-stub"

        workspace = create_workspace(renderer=StubRenderer())
        result = workspace.job_report.execute("job-1")
        assert result.pdf_bytes == b"%PDF-stub"


class TestManageCli:
    def test_jobs_lists_seeded_clients(self, capsys):
        assert manage.main(["jobs"]) == 0
        out = capsys.readouterr().out
        assert "Coffee Corner" in out
        assert "job-1" in out

    def test_jobs_search_filters(self, capsys):
        assert manage.main(["jobs", "--search", "coffee"]) == 0
        out = capsys.readouterr().out
        rows = [line for line in out.splitlines() if line.startswith("job-")]
        assert len(rows) == 1
        assert "Coffee Corner" in rows[0]

    def test_dashboard_for_month(self, capsys):
        assert manage.main(["dashboard", "--month", "2023-10"]) == 0
        out = capsys.readouterr().out
        assert "Oct 23" in out
        assert "£8,850.00" in out

    def test_report_writes_pdf(self, tmp_path, capsys):
        out = tmp_path / "report.pdf"
        assert manage.main(["report", "job-1", "--out", str(out)]) == 0
        assert out.read_bytes().startswith(b"%PDF")

    def test_unknown_job_returns_error(self, capsys):
        assert manage.main(["report", "job-404"]) == 1
        assert "job-404" in capsys.readouterr().err

    def test_invalid_settings_reported(self, monkeypatch, capsys):
        monkeypatch.setenv("PRICING_MAX_PAYMENT_SLOTS", "0")
        assert manage.main(["jobs"]) == 1
        assert "Invalid settings" in capsys.readouterr().err
