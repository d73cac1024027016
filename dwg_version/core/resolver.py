"""Resolution of signature text to a version label.

Unknown signatures resolve to themselves. An unrecognized code is shown
verbatim so a person can decide whether it is a new format version or not a
drawing at all.
"""

from collections.abc import Mapping
from typing import Tuple

from dwg_version.models import RecordStatus


def resolve_status(signature_text: str, lookup: Mapping) -> Tuple[str, RecordStatus]:
    """Resolve a signature and report whether the lookup recognized it.

    Args:
        signature_text: Decoded signature (must be non-empty)
        lookup: Signature code to version label mapping

    Returns:
        (label, RecordStatus.RESOLVED) when the signature is a lookup key,
        otherwise (signature_text, RecordStatus.UNRECOGNIZED)

    Raises:
        ValueError: If signature_text is empty
    """
    if not signature_text:
        raise ValueError("Cannot resolve an empty signature")

    if signature_text in lookup:
        return lookup[signature_text], RecordStatus.RESOLVED
    return signature_text, RecordStatus.UNRECOGNIZED


def resolve(signature_text: str, lookup: Mapping) -> str:
    """Map a signature to its version label, falling back to the signature itself."""
    label, _ = resolve_status(signature_text, lookup)
    return label
