"""
Plain-text version report.

Produces the printable listing of a classified folder: a centred title,
the folder path, a Filename / Version table and a footer with the
per-version counts. Pagination and fonts are left to whatever prints it.
"""

from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from dwg_version.core.pipeline import ClassificationResult
from dwg_version.core.summary import status_line, summarize
from dwg_version.models import SummaryInfo

REPORT_TITLE = "AutoCAD Version Report"
DEFAULT_WIDTH = 78


def _two_column(left: str, right: str, width: int) -> str:
    """Left-align ``left`` and right-align ``right`` on one line."""
    gap = width - len(left) - len(right)
    if gap < 1:
        return f"{left} {right}"
    return left + " " * gap + right


def format_text_report(
    result: ClassificationResult,
    summary: Optional[SummaryInfo] = None,
    width: int = DEFAULT_WIDTH,
    generated_at: Optional[datetime] = None,
) -> str:
    """Render a classification result as a plain-text report.

    Args:
        result: Classified folder
        summary: Precomputed summary; computed from result if omitted
        width: Line width in characters
        generated_at: Timestamp for the footer (default: now)

    Returns:
        Report text ending with a newline
    """
    if summary is None:
        summary = summarize(result)
    if generated_at is None:
        generated_at = datetime.now()

    rule = "-" * width
    lines: List[str] = [
        REPORT_TITLE.center(width).rstrip(),
        "",
        f"Folder: {result.directory}",
        "",
        _two_column("Filename", "Version", width),
        rule,
    ]

    for record in result:
        lines.append(_two_column(record.filename, record.version, width))

    lines.append(rule)
    lines.append(status_line(summary))

    for label, count in summary.version_counts.items():
        lines.append(_two_column(f"  {label}", str(count), width))

    if summary.read_failed_count:
        lines.append(f"Unreadable files: {summary.read_failed_count}")

    lines.append("")
    lines.append(generated_at.strftime("%d %b %Y %H:%M"))

    return "\n".join(lines) + "\n"


def write_text_report(
    result: ClassificationResult,
    output_path: Union[str, Path],
    summary: Optional[SummaryInfo] = None,
) -> Path:
    """Write the plain-text report to a file.

    Args:
        result: Classified folder
        output_path: Destination file
        summary: Precomputed summary; computed from result if omitted

    Returns:
        Path of the written report
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(format_text_report(result, summary), encoding="utf-8")
    return output_path
