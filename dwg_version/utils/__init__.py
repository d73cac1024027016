"""
Utility modules for DWG version classification.

This package contains shared utilities, currently the custom exception
hierarchy used across the tool.
"""

from dwg_version.utils.exceptions import (
    AccessError,
    DirectoryError,
    DWGVersionError,
    FileReadError,
    LookupConfigError,
)

__all__ = [
    # Exceptions
    "DWGVersionError",
    "DirectoryError",
    "AccessError",
    "FileReadError",
    "LookupConfigError",
]
