"""JSON export functionality for classification results.

This module provides JSON serialization for a classified folder and its
summary, handling Pydantic models, paths and enums.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

from dwg_version.core.pipeline import ClassificationResult
from dwg_version.core.summary import summarize
from dwg_version.models import SummaryInfo


class ClassificationJSONEncoder(json.JSONEncoder):
    """Custom JSON encoder for classification data types.

    Paths become strings, enums their value, and pydantic models the
    dict from model_dump. JSONExporter.to_json relies on it for the
    directory Path left in by to_dict.
    """

    def default(self, obj: Any) -> Any:
        if isinstance(obj, Path):
            return str(obj)
        if isinstance(obj, Enum):
            return obj.value
        if hasattr(obj, "model_dump"):
            return obj.model_dump()
        return super().default(obj)


class JSONExporter:
    """Exporter for classification results to JSON format.

    The document layout is::

        {
          "directory": "...",
          "suffix_filter": "DWG",
          "records": [{"filename": ..., "version": ..., "status": ..., ...}],
          "summary": {"total_count": ..., "version_counts": {...}, ...}
        }
    """

    def __init__(self, indent: int = 2, sort_keys: bool = False):
        """Initialize the JSON exporter.

        Args:
            indent: Indent width, or None for a single line
            sort_keys: Sort object keys in the output
        """
        self.indent = indent
        self.sort_keys = sort_keys

    def to_dict(self, result: ClassificationResult, summary: Optional[SummaryInfo] = None) -> dict:
        """Convert a ClassificationResult (and its summary) to a dictionary.

        Args:
            result: Classified folder
            summary: Precomputed summary; computed from result if omitted

        Returns:
            Dictionary of Python values (the directory stays a Path); use
            to_json for a serialized document
        """
        if summary is None:
            summary = summarize(result)

        return {
            "directory": result.directory,
            "suffix_filter": result.suffix_filter,
            "records": [record.model_dump() for record in result],
            "summary": summary.model_dump(),
        }

    def to_json(self, result: ClassificationResult, summary: Optional[SummaryInfo] = None) -> str:
        """Convert a ClassificationResult to a JSON string."""
        return json.dumps(
            self.to_dict(result, summary),
            cls=ClassificationJSONEncoder,
            indent=self.indent,
            sort_keys=self.sort_keys,
        )

    def to_file(
        self,
        result: ClassificationResult,
        file_path: Union[str, Path],
        summary: Optional[SummaryInfo] = None,
        encoding: str = "utf-8",
    ) -> None:
        """Save a ClassificationResult to a JSON file.

        Args:
            result: Classified folder
            file_path: Path to the output file
            summary: Precomputed summary; computed from result if omitted
            encoding: File encoding (default: utf-8)
        """
        file_path = Path(file_path)

        # Create parent directories if they don't exist
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w", encoding=encoding) as f:
            f.write(self.to_json(result, summary))


def export_to_json(
    result: ClassificationResult,
    output_path: Optional[Union[str, Path]] = None,
    indent: int = 2,
) -> str:
    """Convenience function to export a classification result to JSON.

    Args:
        result: Classified folder
        output_path: Optional path to save JSON file
        indent: Number of spaces for indentation (default: 2)

    Returns:
        JSON string representation of the result
    """
    exporter = JSONExporter(indent=indent)
    json_str = exporter.to_json(result)

    if output_path:
        exporter.to_file(result, output_path)

    return json_str
