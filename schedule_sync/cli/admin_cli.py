"""
Admin CLI for inspecting the owner collection and import history.

Usage:
    python -m schedule_sync.cli.admin_cli owners [--search <term>] [--import <file.csv> ...] [options]
    python -m schedule_sync.cli.admin_cli schedules --owner <owner_id> [--import <file.csv> ...] [options]
    python -m schedule_sync.cli.admin_cli stats [--import <file.csv> ...] [--demo] [options]
"""

import argparse
import json
import sys

from schedule_sync.batch import PayloadAcquisitionError, apply_import, build_demo_report
from schedule_sync.cli.common import (
    add_common_arguments,
    build_pipeline,
    build_state,
    load_settings,
    run_imports,
)
from schedule_sync.core.models import AdminState
from schedule_sync.core.stats import search_owners, summarize_history, summarize_owners
from schedule_sync.observability.logger import get_logger
from schedule_sync.utils.validation import InputValidationError, validate_owner_id

logger = get_logger(__name__)


def prepare_state(args: argparse.Namespace) -> AdminState:
    """
    Seed the session and replay the requested imports in order.

    Raises:
        PayloadAcquisitionError: If an --import file cannot be read
    """
    settings = load_settings(args)
    state = build_state(settings)

    if args.imports:
        run_imports(build_pipeline(settings), state, args.imports)
    if getattr(args, "demo", False):
        apply_import(state, build_demo_report())
    return state


def owners_command(args: argparse.Namespace) -> int:
    """List owners, optionally filtered by a search term."""
    state = prepare_state(args)
    owners = search_owners(state.owners, args.search) if args.search else state.owners

    if not owners:
        print("\nNo owners found.")
        return 0

    print(f"\n{'ID':<8} {'NAME':<25} {'EMAIL':<28} {'DEPARTMENT':<15} {'SCHEDULES':>9}")
    print("-" * 89)
    for owner in owners:
        print(
            f"{owner.id:<8} {owner.name:<25} {owner.email:<28} "
            f"{owner.department:<15} {len(owner.schedules):>9}"
        )
    return 0


def schedules_command(args: argparse.Namespace) -> int:
    """Show the schedule of one owner."""
    owner_id = validate_owner_id(args.owner, "owner")
    state = prepare_state(args)

    owner = state.find_owner(owner_id)
    if owner is None:
        print(f"\nNo owner with ID: {owner_id}")
        return 1

    print(f"\nSchedules of {owner.name or owner.id}")
    if not owner.schedules:
        print("No schedules assigned.")
        return 0

    print(f"\n{'DATE':<12} {'HOURS':<14} {'ACTIVITY':<30} {'STATUS':<10}")
    print("-" * 68)
    for record in owner.schedules:
        hours = f"{record.start_time} - {record.end_time}"
        print(f"{record.date:<12} {hours:<14} {record.activity:<30} {record.status.value:<10}")
    return 0


def stats_command(args: argparse.Namespace) -> int:
    """Print dashboard and import history totals."""
    state = prepare_state(args)
    stats = {
        "owners": summarize_owners(state.owners),
        "imports": summarize_history(state.history),
    }

    if args.json:
        print(json.dumps(stats, indent=2))
        return 0

    owner_stats = stats["owners"]
    import_stats = stats["imports"]
    print(f"\n{'=' * 40}")
    print("DASHBOARD")
    print(f"{'=' * 40}")
    print(f"Owners:            {owner_stats['total_owners']}")
    print(f"Schedules:         {owner_stats['total_schedules']}")
    print(f"Active schedules:  {owner_stats['active_schedules']}")
    print(f"Departments:       {owner_stats['departments']}")
    print(f"Imports:           {import_stats['total_imports']}")
    print(f"Records imported:  {import_stats['records_imported']}")
    print(f"Import errors:     {import_stats['total_errors']}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Admin console views over owners and imports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    owners_parser = subparsers.add_parser("owners", help="List owners")
    owners_parser.add_argument("--search", default=None, help="Filter by name, email or department")

    schedules_parser = subparsers.add_parser("schedules", help="Show one owner's schedules")
    schedules_parser.add_argument("--owner", required=True, help="Owner ID")

    stats_parser = subparsers.add_parser("stats", help="Dashboard totals")
    stats_parser.add_argument("--demo", action="store_true", help="Apply the demo import first")
    stats_parser.add_argument("--json", action="store_true", help="Print totals as JSON")

    for sub in (owners_parser, schedules_parser, stats_parser):
        sub.add_argument(
            "--import",
            dest="imports",
            action="append",
            default=[],
            help="Payload file to import before showing the view (repeatable)"
        )
        add_common_arguments(sub)

    return parser


COMMANDS = {
    "owners": owners_command,
    "schedules": schedules_command,
    "stats": stats_command,
}


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        return COMMANDS[args.command](args)
    except PayloadAcquisitionError as e:
        logger.error(f"Import aborted: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except InputValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
