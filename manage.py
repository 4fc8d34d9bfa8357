#!/usr/bin/env python3
"""
SignCRM management CLI.

Runs against a freshly seeded in-memory workspace, acting as the seeded
admin account.

Usage:
    python manage.py jobs [--search TERM]      List jobs with quote/paid/balance
    python manage.py dashboard [--month YYYY-MM]  Monthly financial summary
    python manage.py report JOB_ID [--out FILE]   Write a job report PDF
"""

import argparse
import sys
from datetime import date, datetime
from pathlib import Path

from signcrm.application.services import Workspace, create_workspace
from signcrm.application.views import build_job_rows
from signcrm.config import bind_acting_user, clear_acting_user, configure_logging
from signcrm.core.entities.user import User
from signcrm.core.exceptions import SignCRMError
from signcrm.core.formatting import format_currency

ADMIN_ID = "user-1"


def _admin(workspace: Workspace) -> User:
    user = workspace.stores.users.get_user(ADMIN_ID)
    if user is None:
        raise SystemExit("Seeded admin account is missing")
    bind_acting_user(user.id, user.role.value)
    return user


def cmd_jobs(workspace: Workspace, args: argparse.Namespace) -> None:
    admin = _admin(workspace)
    jobs = workspace.list_jobs.execute(admin, search=args.search or "")
    rows = build_job_rows(jobs, workspace.stores.catalog.list_items(), admin)

    print(f"{'ID':<8} {'Client':<24} {'Stage':<24} {'Quote':>12} {'Paid':>12} {'Balance':>12}")
    for row in rows:
        print(
            f"{row.job_id or '':<8} {row.client_name[:24]:<24} {row.stage.value:<24} "
            f"{row.quote_display:>12} {format_currency(row.total_paid):>12} "
            f"{row.balance_display:>12}"
        )


def cmd_dashboard(workspace: Workspace, args: argparse.Namespace) -> None:
    as_of = date.today()
    if args.month:
        as_of = datetime.strptime(args.month, "%Y-%m").date()

    use_case = workspace.financial_dashboard
    response = use_case.to_response(use_case.execute(_admin(workspace), as_of=as_of))

    current = response.current
    print(f"Month:            {current.label}")
    print(f"Revenue:          {current.revenue} ({response.percentage_change} vs last month)")
    print(f"Fixed costs:      {current.total_fixed_costs}")
    print(f"Profit:           {current.profit}")
    print(f"Breakeven:        {current.progress_percentage:.1f}%")
    print(f"Overhead default: {response.overhead_contribution_percentage:g}%")
    print("Trend:")
    for point in response.trend:
        print(f"  {point.label}  {format_currency(point.value):>14}")


def cmd_report(workspace: Workspace, args: argparse.Namespace) -> None:
    result = workspace.job_report.execute(args.job_id)
    out = Path(args.out or result.file_name)
    out.write_bytes(result.pdf_bytes)
    print(f"Wrote {out} ({result.file_size} bytes)")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="SignCRM management CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    jobs = sub.add_parser("jobs", help="List jobs")
    jobs.add_argument("--search", help="Filter by client name or description")
    jobs.set_defaults(func=cmd_jobs)

    dashboard = sub.add_parser("dashboard", help="Monthly financial summary")
    dashboard.add_argument("--month", help="Month as YYYY-MM (default: current)")
    dashboard.set_defaults(func=cmd_dashboard)

    report = sub.add_parser("report", help="Write a job report PDF")
    report.add_argument("job_id")
    report.add_argument("--out", help="Output path (default: job_report_<id>.pdf)")
    report.set_defaults(func=cmd_report)

    args = parser.parse_args(argv)

    try:
        configure_logging(stream=sys.stderr)
        args.func(create_workspace(), args)
    except SignCRMError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    finally:
        clear_acting_user()
    return 0


if __name__ == "__main__":
    sys.exit(main())
