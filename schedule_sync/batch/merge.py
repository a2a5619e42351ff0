"""
Merge imported schedule records into the owner collection.

Records whose owner_id matches no owner are left out of the owner view.
They stay in the report's own records, which is kept in the import
history, so the drop is visible only there. Merging the same report twice
appends its records twice.
"""

from collections import defaultdict

from schedule_sync.core.models import AdminState, ImportReport, Owner, ScheduleRecord
from schedule_sync.observability import metrics
from schedule_sync.observability.logger import get_logger

logger = get_logger(__name__)


def group_by_owner(records: tuple[ScheduleRecord, ...] | list[ScheduleRecord]) -> dict[str, list[ScheduleRecord]]:
    """Partition records by owner_id, keeping their relative order."""
    grouped: dict[str, list[ScheduleRecord]] = defaultdict(list)
    for record in records:
        grouped[record.owner_id].append(record)
    return dict(grouped)


def unmatched_records(owners: list[Owner], report: ImportReport) -> list[ScheduleRecord]:
    """Records of the report whose owner is not in the collection."""
    known = {owner.id for owner in owners}
    return [record for record in report.records if record.owner_id not in known]


def merge_report(owners: list[Owner], report: ImportReport) -> list[Owner]:
    """
    Append a report's records to the schedules of the owners they belong to.

    The input owners are not modified: owners that receive records are
    returned as updated copies, the rest are returned as they are. Owner
    count and order never change.

    Args:
        owners: Current owner collection
        report: Import report to fold in

    Returns:
        The updated owner collection
    """
    grouped = group_by_owner(report.records)

    merged_owners: list[Owner] = []
    merged_count = 0
    for owner in owners:
        matched = grouped.get(owner.id)
        if matched:
            merged_owners.append(
                owner.model_copy(update={"schedules": [*owner.schedules, *matched]})
            )
            merged_count += len(matched)
        else:
            merged_owners.append(owner)

    unmatched_count = len(report.records) - merged_count
    if unmatched_count:
        logger.debug(
            f"{unmatched_count} record(s) from {report.source_name} have no matching owner",
            extra={"report_id": report.id, "unmatched": unmatched_count},
        )
    metrics.record_merge(merged=merged_count, unmatched=unmatched_count)

    return merged_owners


def apply_import(state: AdminState, report: ImportReport) -> AdminState:
    """
    Merge a report into a session's owners and add it to the history.

    The caller must not run two imports against the same state at once.

    Args:
        state: Session state, updated in place
        report: Finished import report

    Returns:
        The same state object, for chaining
    """
    state.owners = merge_report(state.owners, report)
    state.history.insert(0, report)
    logger.info(
        f"Applied import {report.source_name}",
        extra={"report_id": report.id, "history_size": len(state.history)},
    )
    return state
