"""
Pytest configuration and fixtures for schedule-sync tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
import os

import pytest

from schedule_sync.core.models import Owner, ScheduleRecord, ScheduleStatus


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't touch the filesystem"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that read and write real files"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests through the command-line interface"
    )


# =======================
# PAYLOAD FIXTURES
# =======================

MIXED_PAYLOAD = (
    "userId,date,startTime,endTime,activity,status\n"
    "1,2025-01-10,08:00,16:00,Backend,active\n"
    "2,2025-01-10,09:00,17:00,Design,pending\n"
    ",2025-01-10,10:00,18:00,Marketing,active\n"
    "3,2025-01-10,11:00,19:00,Sales,unknown\n"
)


@pytest.fixture
def mixed_payload() -> str:
    """Two valid rows, one missing owner id, one invalid status."""
    return MIXED_PAYLOAD


@pytest.fixture
def header_only_payload() -> str:
    return "ownerId,date,startTime,endTime,activity,status\n"


@pytest.fixture(scope="session")
def test_data_dir() -> str:
    """
    Get path to test data fixtures directory

    Returns:
        Path to tests/fixtures directory
    """
    return os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture
def payload_file(tmp_path, mixed_payload):
    """The mixed payload written to a .csv file."""
    path = tmp_path / "horarios.csv"
    path.write_text(mixed_payload, encoding="utf-8")
    return path


# =======================
# OWNER FIXTURES
# =======================

def make_record(owner_id: str, activity: str = "Turno", status: ScheduleStatus = ScheduleStatus.ACTIVE, **kwargs) -> ScheduleRecord:
    """Build a valid record with sensible defaults."""
    values = {
        "ownerId": owner_id,
        "date": "2025-01-10",
        "startTime": "08:00",
        "endTime": "16:00",
        "activity": activity,
        "status": status,
    }
    values.update(kwargs)
    return ScheduleRecord(**values)


@pytest.fixture
def owners() -> list[Owner]:
    """Owners 1, 2 and 3 with one existing schedule each."""
    return [
        Owner(id="1", name="Juan Pérez", email="juan@empresa.com", department="Desarrollo",
              schedules=[make_record("1", "Desarrollo Frontend", id="s1")]),
        Owner(id="2", name="María García", email="maria@empresa.com", department="Diseño",
              schedules=[make_record("2", "Diseño UI/UX", ScheduleStatus.COMPLETED, id="s3")]),
        Owner(id="3", name="Carlos López", email="carlos@empresa.com", department="Marketing",
              schedules=[make_record("3", "Campaña publicitaria", id="s4")]),
    ]


@pytest.fixture
def record_factory():
    """Factory building valid records: record_factory("1", activity="Backend")."""
    return make_record
