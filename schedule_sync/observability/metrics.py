"""
Prometheus metrics collection for schedule-sync

Counts imports, row outcomes, diagnostics and merge results so an operator
can see how dirty the incoming schedule files are.
"""
from prometheus_client import (
    Counter,
    Histogram,
    CollectorRegistry,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# IMPORT METRICS
# =======================

imports_processed_total = Counter(
    name="schedule_imports_processed_total",
    documentation="Total number of import reports produced",
    labelnames=["mode"],  # mode: file, text, demo
    registry=REGISTRY,
)

import_failures_total = Counter(
    name="schedule_import_failures_total",
    documentation="Imports aborted because the payload could not be acquired",
    labelnames=["reason"],
    registry=REGISTRY,
)

rows_processed_total = Counter(
    name="schedule_rows_processed_total",
    documentation="Total number of data rows processed",
    labelnames=["status"],  # status: valid, invalid
    registry=REGISTRY,
)

diagnostics_total = Counter(
    name="schedule_row_diagnostics_total",
    documentation="Rejected rows by the validation rule that rejected them",
    labelnames=["rule_type"],
    registry=REGISTRY,
)

import_duration_seconds = Histogram(
    name="schedule_import_duration_seconds",
    documentation="Time spent parsing and validating a payload",
    labelnames=["mode"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
    registry=REGISTRY,
)

# =======================
# MERGE METRICS
# =======================

records_merged_total = Counter(
    name="schedule_records_merged_total",
    documentation="Records appended to an existing owner's schedule",
    registry=REGISTRY,
)

records_unmatched_total = Counter(
    name="schedule_records_unmatched_total",
    documentation="Imported records whose owner is not in the owner collection",
    registry=REGISTRY,
)


# =======================
# HELPERS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    """Content type for the Prometheus text exposition format."""
    return CONTENT_TYPE_LATEST


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    if labels:
        counter.labels(**labels).inc(value)
    else:
        counter.inc(value)


def observe_histogram(histogram: Histogram, value: float, **labels) -> None:
    """
    Observe a value in a histogram metric

    Args:
        histogram: Prometheus Histogram metric
        value: Value to observe
        **labels: Label values for the metric
    """
    histogram.labels(**labels).observe(value)


def record_import(
    mode: str,
    valid_rows: int,
    invalid_rows: int,
    duration_seconds: float = 0.0
) -> None:
    """
    Record the outcome of one import.

    Args:
        mode: How the report was produced (file, text, demo)
        valid_rows: Rows that became records
        invalid_rows: Rows that produced a diagnostic
        duration_seconds: Parse and validation time
    """
    increment_counter(imports_processed_total, 1, mode=mode)
    increment_counter(rows_processed_total, valid_rows, status="valid")
    increment_counter(rows_processed_total, invalid_rows, status="invalid")
    if duration_seconds > 0:
        observe_histogram(import_duration_seconds, duration_seconds, mode=mode)


def record_diagnostic(rule_type: str) -> None:
    """Record one rejected row."""
    increment_counter(diagnostics_total, 1, rule_type=rule_type)


def record_import_failure(reason: str) -> None:
    """Record an import aborted before parsing."""
    increment_counter(import_failures_total, 1, reason=reason)


def record_merge(merged: int, unmatched: int) -> None:
    """
    Record the outcome of one merge.

    Args:
        merged: Records appended to existing owners
        unmatched: Records dropped from the owner view
    """
    if merged:
        increment_counter(records_merged_total, merged)
    if unmatched:
        increment_counter(records_unmatched_total, unmatched)
