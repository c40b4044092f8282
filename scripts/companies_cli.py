"""
Manage companies against a running server through the same view-model the UI uses.

Usage:
  python scripts/companies_cli.py list
  python scripts/companies_cli.py add "Acme" --description "Widgets"
  python scripts/companies_cli.py edit <id> "Acme Corp" [--description TEXT]
  python scripts/companies_cli.py delete <id>

Base URL comes from --base-url or COMPANIES_API_URL (default http://localhost:8080).
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.saas.modules.companies.client import CompaniesApiClient  # noqa: E402
from app.saas.modules.companies.view import CompaniesView, Notification  # noqa: E402


def _print_notification(n: Notification) -> None:
    stream = sys.stderr if n.variant == "error" else sys.stdout
    print(f"{n.title}: {n.description}", file=stream)


def _print_companies(view: CompaniesView) -> None:
    for c in view.companies:
        desc = f" - {c['description']}" if c.get("description") else ""
        print(f"{c['id']}  {c['name']}{desc}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage companies over the HTTP API.")
    parser.add_argument("--base-url", default=os.environ.get("COMPANIES_API_URL") or "http://localhost:8080")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list")

    p_add = sub.add_parser("add")
    p_add.add_argument("name")
    p_add.add_argument("--description", default="")

    p_edit = sub.add_parser("edit")
    p_edit.add_argument("id")
    p_edit.add_argument("name")
    p_edit.add_argument("--description", default=None, help="Omit to keep the current description")

    p_del = sub.add_parser("delete")
    p_del.add_argument("id")
    return parser


def run(argv: list[str] | None = None, *, client: CompaniesApiClient | None = None) -> int:
    args = build_parser().parse_args(argv)
    view = CompaniesView(client or CompaniesApiClient(base_url=args.base_url), notify=_print_notification)

    if not view.load():
        return 1

    if args.command == "list":
        _print_companies(view)
        return 0

    if args.command == "add":
        view.open_create()
        view.name = args.name
        view.description = args.description
        return 0 if view.submit() else 1

    if args.command == "edit":
        company = view.get(args.id)
        if company is None:
            print(f"Error: unknown company id {args.id}", file=sys.stderr)
            return 1
        view.start_edit(company)
        view.name = args.name
        if args.description is not None:
            view.description = args.description
        return 0 if view.submit() else 1

    return 0 if view.delete(args.id) else 1


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
