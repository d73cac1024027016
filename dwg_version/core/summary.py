"""Aggregation of file records into per-version counts."""

import logging
from typing import Dict, Iterable

from dwg_version.models import FileRecord, RecordStatus, SummaryInfo

logger = logging.getLogger(__name__)


def summarize(records: Iterable[FileRecord]) -> SummaryInfo:
    """Count records per version label.

    Grouping uses exact string equality on ``version``; labels appear in
    order of first occurrence. Read failures are counted in
    ``version_counts`` under their error text and, separately, in
    ``read_failed_count``.

    Args:
        records: File records, typically a ClassificationResult

    Returns:
        SummaryInfo
    """
    version_counts: Dict[str, int] = {}
    resolved_counts: Dict[str, int] = {}
    total = 0
    unrecognized = 0
    read_failed = 0

    for record in records:
        total += 1
        version_counts[record.version] = version_counts.get(record.version, 0) + 1

        if record.status == RecordStatus.READ_FAILED:
            read_failed += 1
            continue

        if record.status == RecordStatus.UNRECOGNIZED:
            unrecognized += 1
        resolved_counts[record.version] = resolved_counts.get(record.version, 0) + 1

    logger.debug(f"Summarized {total} records into {len(version_counts)} versions")

    return SummaryInfo(
        total_count=total,
        version_counts=version_counts,
        resolved_counts=resolved_counts,
        unrecognized_count=unrecognized,
        read_failed_count=read_failed,
    )


def status_line(summary: SummaryInfo) -> str:
    """One-line description of a summary for a status bar or console.

    Args:
        summary: Summary to describe

    Returns:
        "N file(s) found, Version: LABEL" when all records share one label,
        "No files found" when there are none, else "Multiple versions found"
    """
    if summary.total_count == 0:
        return "No files found"

    if len(summary.version_counts) == 1:
        label = next(iter(summary.version_counts))
        return f"{summary.total_count} file(s) found, Version: {label}"

    return "Multiple versions found"
