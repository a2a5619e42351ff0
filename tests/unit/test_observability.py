"""
Unit tests for logging and metrics helpers.
"""

import json
import logging

import pytest

from schedule_sync.observability import metrics
from schedule_sync.observability.logger import (
    CustomJsonFormatter,
    build_formatter,
    configure_logging,
    get_logger,
    log_operation,
    resolve_level,
    setup_logger,
)


@pytest.mark.unit
class TestLogger:

    def test_setup_logger_level_and_handler(self):
        logger = setup_logger("schedule_sync.test.level", level="debug", format_type="text")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_setup_is_idempotent(self):
        setup_logger("schedule_sync.test.dupe")
        logger = setup_logger("schedule_sync.test.dupe")
        assert len(logger.handlers) == 1

    def test_get_logger_reuses_configuration(self):
        first = get_logger("schedule_sync.test.reuse")
        second = get_logger("schedule_sync.test.reuse")
        assert first is second
        assert len(second.handlers) == 1

    def test_json_formatter_fields(self):
        formatter = CustomJsonFormatter(fmt="%(timestamp)s %(level)s %(message)s")
        record = logging.LogRecord(
            name="schedule_sync.test", level=logging.WARNING, pathname=__file__, lineno=1,
            msg="row rejected", args=(), exc_info=None,
        )
        payload = json.loads(formatter.format(record))

        assert payload["message"] == "row rejected"
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "schedule_sync.test"
        assert "timestamp" in payload

    def test_json_formatter_groups_import_context(self):
        formatter = CustomJsonFormatter(fmt="%(timestamp)s %(level)s %(message)s")
        record = logging.LogRecord(
            name="schedule_sync.test", level=logging.INFO, pathname=__file__, lineno=1,
            msg="row rejected", args=(), exc_info=None,
        )
        record.source_name = "horarios.csv"
        record.line_number = 4
        record.duration_seconds = 0.5

        payload = json.loads(formatter.format(record))

        assert payload["context"] == {"source_name": "horarios.csv", "line_number": 4}
        assert "source_name" not in payload
        assert payload["duration_seconds"] == 0.5
        assert payload["timestamp"]

    def test_build_formatter(self):
        assert isinstance(build_formatter("json"), CustomJsonFormatter)
        text = build_formatter("TEXT")
        assert not isinstance(text, CustomJsonFormatter)
        assert isinstance(text, logging.Formatter)

    def test_resolve_level(self):
        assert resolve_level("warning") == logging.WARNING
        assert resolve_level("verbose") == logging.INFO

    def test_handler_follows_current_stderr(self, capsys):
        logger = setup_logger("schedule_sync.test.stderr", level="INFO", format_type="text")
        logger.info("written after capture started")

        captured = capsys.readouterr()
        assert "written after capture started" in captured.err
        assert captured.out == ""

    def test_configure_logging_only_touches_package_loggers(self):
        setup_logger("schedule_sync.test.configure", level="INFO")
        other = logging.getLogger("thirdparty.test")
        other_handlers = list(other.handlers)

        configure_logging(level="ERROR", format_type="text")

        assert logging.getLogger("schedule_sync.test.configure").level == logging.ERROR
        assert other.handlers == other_handlers

    def test_log_operation_reraises(self):
        logger = setup_logger("schedule_sync.test.operation", format_type="text")
        with pytest.raises(RuntimeError):
            with log_operation("failing step", logger=logger):
                raise RuntimeError("boom")


@pytest.mark.unit
class TestMetrics:

    def test_record_merge(self):
        merged_before = metrics.REGISTRY.get_sample_value("schedule_records_merged_total") or 0.0
        unmatched_before = metrics.REGISTRY.get_sample_value("schedule_records_unmatched_total") or 0.0

        metrics.record_merge(merged=3, unmatched=1)

        assert metrics.REGISTRY.get_sample_value("schedule_records_merged_total") == merged_before + 3
        assert metrics.REGISTRY.get_sample_value("schedule_records_unmatched_total") == unmatched_before + 1

    def test_record_import_failure(self):
        before = metrics.REGISTRY.get_sample_value(
            "schedule_import_failures_total", {"reason": "acquisition"}
        ) or 0.0
        metrics.record_import_failure("acquisition")
        assert metrics.REGISTRY.get_sample_value(
            "schedule_import_failures_total", {"reason": "acquisition"}
        ) == before + 1

    def test_generate_metrics(self):
        metrics.record_import(mode="text", valid_rows=1, invalid_rows=0)
        output = metrics.generate_metrics().decode()
        assert "schedule_imports_processed_total" in output
        assert metrics.get_content_type().startswith("text/plain")
