"""
Unit tests for dashboard and history summaries.
"""

import pytest

from schedule_sync.batch import build_demo_report
from schedule_sync.core.models import ImportReport
from schedule_sync.core.stats import search_owners, summarize_history, summarize_owners

pytestmark = pytest.mark.unit


def test_summarize_owners(owners):
    assert summarize_owners(owners) == {
        "total_owners": 3,
        "total_schedules": 3,
        "active_schedules": 2,
        "departments": 3,
    }


def test_summarize_no_owners():
    assert summarize_owners([]) == {
        "total_owners": 0,
        "total_schedules": 0,
        "active_schedules": 0,
        "departments": 0,
    }


def test_search_owners_is_case_insensitive(owners):
    assert [o.id for o in search_owners(owners, "MARÍA")] == ["2"]
    assert [o.id for o in search_owners(owners, "empresa.com")] == ["1", "2", "3"]
    assert [o.id for o in search_owners(owners, "market")] == ["3"]
    assert search_owners(owners, "nobody") == []


def test_summarize_history(record_factory):
    history = [
        build_demo_report(),
        ImportReport.from_outcomes("x.csv", [record_factory("1")], ["Line 3: missing required field(s)"]),
    ]
    assert summarize_history(history) == {
        "total_imports": 2,
        "records_imported": 4,
        "total_errors": 1,
    }
