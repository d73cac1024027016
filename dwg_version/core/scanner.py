"""Directory scanning for drawing files.

Files are listed with ``os.scandir`` and returned in the order the platform
produces them; no sorting is applied. Only the top level of the directory
is searched.
"""

import fnmatch
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from dwg_version.utils.exceptions import AccessError, DirectoryError

logger = logging.getLogger(__name__)

DEFAULT_SUFFIX = "DWG"


@dataclass(frozen=True)
class FolderValidation:
    """Outcome of checking a folder before classification.

    Attributes:
        is_valid: Whether the folder exists and holds matching files
        message: Reason the folder was rejected (None when valid)
    """
    is_valid: bool
    message: Optional[str] = None


def _suffix_pattern(suffix_filter: str) -> str:
    """Build the ``*.SUFFIX`` glob for a suffix filter."""
    suffix = (suffix_filter or "").lstrip(".")
    if not suffix:
        raise ValueError("Suffix filter must not be empty")
    return f"*.{suffix}"


def scan(path: Union[str, Path], suffix_filter: str = DEFAULT_SUFFIX) -> List[Path]:
    """List the files in a directory whose extension matches ``suffix_filter``.

    Matching follows ``fnmatch`` rules, which are case-insensitive on
    Windows and case-sensitive elsewhere.

    Args:
        path: Directory to scan
        suffix_filter: File extension without the dot (default: "DWG")

    Returns:
        Absolute paths of the matching files, in directory listing order.
        Empty if nothing matches.

    Raises:
        DirectoryError: If path does not exist or is not a directory
        AccessError: If the directory cannot be listed
        ValueError: If suffix_filter is empty
    """
    pattern = _suffix_pattern(suffix_filter)
    directory = Path(path).absolute()

    if not directory.exists():
        raise DirectoryError(str(directory), "Directory does not exist")

    if not directory.is_dir():
        raise DirectoryError(str(directory), "Path is not a directory")

    files: List[Path] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if fnmatch.fnmatch(entry.name, pattern) and entry.is_file():
                    files.append(Path(entry.path))
    except PermissionError as e:
        raise AccessError(str(directory), cause=e) from e
    except OSError as e:
        raise DirectoryError(str(directory), str(e)) from e

    logger.info(f"Found {len(files)} files matching '{pattern}' in {directory}")
    return files


def validate_folder(path: Union[str, Path], suffix_filter: str = DEFAULT_SUFFIX) -> FolderValidation:
    """Check that a folder exists and contains at least one matching file.

    Args:
        path: Folder to check
        suffix_filter: File extension without the dot (default: "DWG")

    Returns:
        FolderValidation; never raises for a missing or unreadable folder
    """
    if not path or not Path(path).is_dir():
        return FolderValidation(False, "Folder does not exist")

    try:
        files = scan(path, suffix_filter)
    except (DirectoryError, AccessError) as e:
        return FolderValidation(False, e.message)

    if not files:
        return FolderValidation(False, f"No {suffix_filter.lstrip('.')} files found in this folder")

    return FolderValidation(True)
