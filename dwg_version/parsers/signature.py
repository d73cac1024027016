"""Signature reader for DWG files.

Every DWG file starts with a six byte version code (``AC1015``,
``AC1032``...). Lookup tables are keyed on exactly those six characters, so
the reader always returns the raw prefix plus its single-byte decoding and
never tries to validate the rest of the header.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from dwg_version.utils.exceptions import FileReadError

logger = logging.getLogger(__name__)

# Length of the version code at offset 0x00
SIGNATURE_LENGTH = 6

# Single-byte codec: every byte value decodes, nothing is dropped
SIGNATURE_ENCODING = "latin-1"


@dataclass(frozen=True)
class SignatureOk:
    """Signature bytes read from a file.

    Attributes:
        bytes_read: Up to SIGNATURE_LENGTH bytes, fewer for short files
        as_text: Decoded text of bytes_read (empty for an empty file)
    """
    bytes_read: bytes
    as_text: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class SignatureErr:
    """Signature read failure.

    Attributes:
        message: Description of the underlying I/O error
        error_type: Name of the underlying exception class
    """
    message: str
    error_type: str = "OSError"

    @property
    def ok(self) -> bool:
        return False


SignatureResult = Union[SignatureOk, SignatureErr]


class SignatureReader:
    """Reads the leading signature of a file.

    The file handle is scoped to a single ``with`` block, so it is released
    whether or not the read succeeds.
    """

    def __init__(self, length: int = SIGNATURE_LENGTH, encoding: str = SIGNATURE_ENCODING):
        """Initialize the reader.

        Args:
            length: Number of bytes to read from the start of each file
            encoding: Single-byte codec used to decode the signature
        """
        if length < 1:
            raise ValueError(f"Signature length must be positive, got {length}")
        self.length = length
        self.encoding = encoding

    def read(self, file_path: Union[str, Path]) -> SignatureResult:
        """Read the signature of a file.

        Args:
            file_path: Path to the file

        Returns:
            SignatureOk with the bytes actually read (possibly fewer than
            ``length``), or SignatureErr when the file is missing or cannot
            be opened or read
        """
        file_path = Path(file_path)

        try:
            with open(file_path, "rb") as f:
                data = f.read(self.length)
        except OSError as e:
            error = FileReadError(str(file_path), cause=e)
            logger.warning(f"Cannot read signature of {file_path.name}: {error}")
            return SignatureErr(message=str(error), error_type=type(e).__name__)

        text = data.decode(self.encoding)
        logger.debug(f"{file_path.name}: read {len(data)} signature bytes {text!r}")
        return SignatureOk(bytes_read=data, as_text=text)


def read_signature(file_path: Union[str, Path], length: int = SIGNATURE_LENGTH) -> SignatureResult:
    """Convenience function to read the signature of a single file.

    Args:
        file_path: Path to the file
        length: Number of bytes to read (default: 6)

    Returns:
        SignatureOk or SignatureErr
    """
    return SignatureReader(length=length).read(file_path)
