"""
Helpers shared by the command-line entry points.
"""

import argparse
import asyncio
from pathlib import Path

from schedule_sync.batch import (
    ImportPipeline,
    PayloadReader,
    apply_import,
)
from schedule_sync.config import ImportSettings, SettingsLoader, load_owners
from schedule_sync.core.models import AdminState, ImportReport
from schedule_sync.core.rules import RowValidator
from schedule_sync.observability.logger import configure_logging, get_logger
from schedule_sync.utils.validation import validate_file_path

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = "config/import_settings.yaml"


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Arguments every command accepts."""
    parser.add_argument(
        "--config",
        default=None,
        help=f"Settings YAML file (default: {DEFAULT_CONFIG_PATH} when present)"
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Optional .env file with environment overrides"
    )
    parser.add_argument(
        "--owners",
        default=None,
        help="Owners YAML file (overrides the settings file)"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level"
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "text"],
        help="Log output format"
    )


def load_settings(args: argparse.Namespace) -> ImportSettings:
    """Load settings from the config file and apply command-line overrides."""
    config_path = args.config
    if config_path is None and Path(DEFAULT_CONFIG_PATH).exists():
        config_path = DEFAULT_CONFIG_PATH

    settings = SettingsLoader(config_path, env_file=args.env_file).load()

    updates = {}
    if args.owners:
        updates["owners_file"] = validate_file_path(args.owners, "owners")
    if args.log_level:
        updates["log_level"] = args.log_level
    if args.log_format:
        updates["log_format"] = args.log_format
    if getattr(args, "export_dir", None):
        updates["export_dir"] = validate_file_path(args.export_dir, "export_dir")
    if updates:
        settings = settings.model_copy(update=updates)

    configure_logging(level=settings.log_level, format_type=settings.log_format)
    return settings


def build_state(settings: ImportSettings) -> AdminState:
    """Create an authenticated session seeded from the owners file."""
    owners = []
    if settings.owners_file and Path(settings.owners_file).exists():
        owners = load_owners(settings.owners_file)
    elif settings.owners_file:
        logger.warning(f"Owners file not found: {settings.owners_file}; starting with no owners")
    return AdminState(authenticated=True, owners=owners)


def build_pipeline(settings: ImportSettings) -> ImportPipeline:
    return ImportPipeline(
        row_validator=RowValidator(),
        reader=PayloadReader(
            allowed_extensions=tuple(settings.allowed_extensions),
            encoding=settings.encoding,
        ),
        delimiter=settings.delimiter,
    )


async def import_files(
    pipeline: ImportPipeline,
    state: AdminState,
    file_paths: list[str],
) -> list[ImportReport]:
    """
    Import files one after the other, merging each before the next starts.

    Raises:
        PayloadAcquisitionError: On the first file that cannot be read;
            reports already merged stay merged
    """
    reports = []
    for file_path in file_paths:
        report = await pipeline.process_file(validate_file_path(file_path, "input"))
        apply_import(state, report)
        reports.append(report)
    return reports


def run_imports(pipeline: ImportPipeline, state: AdminState, file_paths: list[str]) -> list[ImportReport]:
    return asyncio.run(import_files(pipeline, state, file_paths))
