"""
Custom exception classes for DWG version classification.

This module defines the exception hierarchy for the error conditions that
can occur while scanning a folder of drawings, reading file signatures and
loading the version lookup table.
"""


class DWGVersionError(Exception):
    """
    Base exception class for all dwg-version errors.

    Catch this to handle any failure raised by the scanner, the reader
    or the lookup loader.

    Attributes:
        message: What went wrong, shown to the user
        details: Extra context such as the offending path
    """

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the error.

        Args:
            message: Error message
            details: Optional context appended when the error is printed
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return a string representation of the exception."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class DirectoryError(DWGVersionError):
    """
    Raised when a scan target is missing or is not a directory.

    Attributes:
        path: The path that was requested
        reason: Why the path cannot be scanned
    """

    def __init__(self, path: str, reason: str = None):
        self.path = path
        self.reason = reason or "Directory does not exist"

        message = f"Cannot scan {path}: {self.reason}"
        super().__init__(message, {"path": path})


class AccessError(DWGVersionError):
    """
    Raised when the directory listing is refused by the operating system.

    Attributes:
        path: The directory that could not be listed
        cause: Underlying exception (usually PermissionError)
    """

    def __init__(self, path: str, cause: Exception = None):
        self.path = path
        self.cause = cause

        message = f"Access denied listing directory: {path}"

        details = {"path": path}
        if cause:
            details["cause"] = str(cause)

        super().__init__(message, details)


class FileReadError(DWGVersionError):
    """
    Per-file signature read failure.

    The pipeline never lets this escape; the text of the underlying error
    is folded into the file's record instead.

    Attributes:
        file_path: File that could not be read
        cause: Underlying OSError
    """

    def __init__(self, file_path: str, cause: Exception = None):
        self.file_path = file_path
        self.cause = cause

        # keep the OS description verbatim, it is what the user sees;
        # an OSError raised without arguments has no text, so use its name
        if cause is not None:
            message = str(cause) or type(cause).__name__
        else:
            message = f"Cannot read file: {file_path}"

        details = {}
        if cause is not None:
            details["cause_type"] = type(cause).__name__

        super().__init__(message, details)

    def __str__(self) -> str:
        return self.message


class LookupConfigError(DWGVersionError):
    """
    Raised when the signature-to-version lookup table cannot be loaded.

    Attributes:
        path: Configuration file that was being loaded (None for inline data)
        reason: What was wrong with it
    """

    def __init__(self, reason: str, path: str = None):
        self.path = path
        self.reason = reason

        if path:
            message = f"Invalid version lookup {path}: {reason}"
        else:
            message = f"Invalid version lookup: {reason}"

        details = {}
        if path:
            details["path"] = path

        super().__init__(message, details)
