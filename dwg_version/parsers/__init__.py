"""File parsers for DWG version classification.

Includes:
- Signature reading (first six bytes of a file)
"""

from dwg_version.parsers.signature import (
    SIGNATURE_ENCODING,
    SIGNATURE_LENGTH,
    SignatureErr,
    SignatureOk,
    SignatureReader,
    SignatureResult,
    read_signature,
)

__all__ = [
    "SIGNATURE_ENCODING",
    "SIGNATURE_LENGTH",
    "SignatureErr",
    "SignatureOk",
    "SignatureReader",
    "SignatureResult",
    "read_signature",
]
