"""Core classification modules for DWG version detection.

This package provides the directory scanner, the version lookup table and
resolver, the classification pipeline that ties them together, and the
summary aggregator.
"""

from dwg_version.core.lookup import (
    DEFAULT_VERSION_LOOKUP,
    DEFAULT_VERSIONS,
    VersionLookup,
    load_lookup,
)
from dwg_version.core.pipeline import (
    ClassificationPipeline,
    ClassificationResult,
    classify,
)
from dwg_version.core.resolver import resolve, resolve_status
from dwg_version.core.scanner import DEFAULT_SUFFIX, FolderValidation, scan, validate_folder
from dwg_version.core.summary import status_line, summarize

__all__ = [
    # Lookup
    "DEFAULT_VERSION_LOOKUP",
    "DEFAULT_VERSIONS",
    "VersionLookup",
    "load_lookup",
    # Resolver
    "resolve",
    "resolve_status",
    # Scanner
    "DEFAULT_SUFFIX",
    "FolderValidation",
    "scan",
    "validate_folder",
    # Pipeline
    "ClassificationPipeline",
    "ClassificationResult",
    "classify",
    # Summary
    "summarize",
    "status_line",
]
