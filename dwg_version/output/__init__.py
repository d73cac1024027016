"""Output modules for DWG version classification.

Provides:
- JSON export of records and summary
- Plain-text version report
"""

from dwg_version.output.json_export import (
    ClassificationJSONEncoder,
    JSONExporter,
    export_to_json,
)
from dwg_version.output.text_report import format_text_report, write_text_report

__all__ = [
    # JSON
    "ClassificationJSONEncoder",
    "JSONExporter",
    "export_to_json",
    # Text
    "format_text_report",
    "write_text_report",
]
