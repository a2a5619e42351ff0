"""
Command-line interface for schedule imports.

Usage:
    python -m schedule_sync.cli.import_cli import --input <file.csv> [--input <file.csv> ...] [options]
    python -m schedule_sync.cli.import_cli demo [options]
"""

import argparse
import sys

from schedule_sync.batch import (
    PayloadAcquisitionError,
    ReportWriter,
    apply_import,
    build_demo_report,
    unmatched_records,
)
from schedule_sync.cli.common import (
    add_common_arguments,
    build_pipeline,
    build_state,
    load_settings,
    run_imports,
)
from schedule_sync.config import ImportSettings
from schedule_sync.core.models import AdminState, ImportReport
from schedule_sync.observability.logger import get_logger
from schedule_sync.utils.validation import InputValidationError

logger = get_logger(__name__)


def print_report(report: ImportReport) -> None:
    """Print an import summary followed by its diagnostics."""
    print(f"\n{'=' * 60}")
    print(f"IMPORT: {report.source_name}")
    print(f"{'=' * 60}")
    print(f"Report ID:      {report.id}")
    print(f"Imported at:    {report.imported_at.isoformat()}")
    print(f"Total rows:     {report.total_rows}")
    print(f"Imported:       {report.success_count}")
    print(f"Rejected:       {report.error_count}")

    if report.diagnostics:
        print("\nDiagnostics:")
        for diagnostic in report.diagnostics:
            print(f"  - {diagnostic}")


def print_owner_counts(state: AdminState, reports: list[ImportReport]) -> None:
    """Print schedule counts per owner and records that reached no owner."""
    print(f"\n{'-' * 60}")
    print("Schedules per owner:")
    for owner in state.owners:
        label = owner.name or owner.id
        print(f"  {owner.id:<8} {label:<30} {len(owner.schedules)}")

    for report in reports:
        unmatched = unmatched_records(state.owners, report)
        if unmatched:
            owner_ids = sorted({record.owner_id for record in unmatched})
            print(
                f"\n{len(unmatched)} record(s) from {report.source_name} are kept in the report only "
                f"(unknown owner(s): {', '.join(owner_ids)})"
            )


def export_reports(settings: ImportSettings, reports: list[ImportReport]) -> None:
    writer = ReportWriter(settings.export_dir)
    for report in reports:
        path = writer.write(report)
        print(f"Report written to {path}")


def import_command(args: argparse.Namespace) -> int:
    """
    Import one or more payload files and merge them into the owners.

    Returns:
        Exit code: 1 when a payload cannot be read, 0 otherwise (rejected
        rows never change the exit code)
    """
    settings = load_settings(args)
    state = build_state(settings)
    pipeline = build_pipeline(settings)

    try:
        reports = run_imports(pipeline, state, args.input)
    except PayloadAcquisitionError as e:
        logger.error(f"Import aborted: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except InputValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for report in reports:
        print_report(report)
    print_owner_counts(state, reports)

    if args.export:
        export_reports(settings, reports)
    return 0


def demo_command(args: argparse.Namespace) -> int:
    """Import the demo record set and merge it into the owners."""
    settings = load_settings(args)
    state = build_state(settings)

    report = build_demo_report()
    apply_import(state, report)

    print_report(report)
    print_owner_counts(state, [report])

    if args.export:
        export_reports(settings, [report])
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Schedule import for the admin console",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Import a schedule file and merge it into the seeded owners
  python -m schedule_sync.cli.import_cli import --input data/horarios.csv

  # Import two files in order and export both reports as JSON
  python -m schedule_sync.cli.import_cli import --input a.csv --input b.csv --export

  # Run the demo synchronization
  python -m schedule_sync.cli.import_cli demo --log-format text
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    import_parser = subparsers.add_parser("import", help="Import schedule files")
    import_parser.add_argument(
        "--input",
        required=True,
        action="append",
        help="Path to a payload file (repeatable; imported in order)"
    )
    import_parser.add_argument(
        "--export",
        action="store_true",
        help="Write each report as JSON to the export directory"
    )
    import_parser.add_argument(
        "--export-dir",
        default=None,
        help="Directory for exported reports (overrides settings)"
    )
    add_common_arguments(import_parser)

    demo_parser = subparsers.add_parser("demo", help="Import the demo record set")
    demo_parser.add_argument(
        "--export",
        action="store_true",
        help="Write the report as JSON to the export directory"
    )
    demo_parser.add_argument(
        "--export-dir",
        default=None,
        help="Directory for exported reports (overrides settings)"
    )
    add_common_arguments(demo_parser)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "import":
        return import_command(args)
    if args.command == "demo":
        return demo_command(args)
    return 1


if __name__ == "__main__":
    sys.exit(main())
