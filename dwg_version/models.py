"""
Pydantic data models for DWG version classification.

This module defines the per-file record produced for every scanned drawing
and the summary derived from a batch of records.
"""

import os
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class RecordStatus(str, Enum):
    """How the version of a file record was obtained."""
    RESOLVED = "RESOLVED"  # signature found in the lookup table
    UNRECOGNIZED = "UNRECOGNIZED"  # raw signature shown as the version
    READ_FAILED = "READ_FAILED"  # error text shown as the version


class FileRecord(BaseModel):
    """Classification of a single scanned file.

    ``version`` keeps the single-string view shown to users: the mapped
    label, the raw signature when no mapping exists, or the error text when
    the file could not be read. ``status`` tells those three cases apart.
    """
    model_config = ConfigDict(frozen=True)

    filename: str = Field(..., description="File name without directory component", min_length=1)
    version: str = Field(..., description="Version label, raw signature or error text", min_length=1)
    status: RecordStatus = Field(RecordStatus.RESOLVED, description="How the version was obtained")
    signature: str = Field("", description="Decoded signature text (empty if the read failed)")
    error: Optional[str] = Field(None, description="Read error message, only set for READ_FAILED")

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        """Reject names that still carry a directory component."""
        if os.path.basename(v) != v:
            raise ValueError(f"filename must not contain a directory: {v!r}")
        return v

    @model_validator(mode="after")
    def check_error_status(self) -> "FileRecord":
        if self.status == RecordStatus.READ_FAILED and not self.error:
            raise ValueError("READ_FAILED records must carry an error message")
        if self.status != RecordStatus.READ_FAILED and self.error is not None:
            raise ValueError("only READ_FAILED records may carry an error message")
        return self

    @property
    def is_error(self) -> bool:
        """True when the version field holds an I/O error message."""
        return self.status == RecordStatus.READ_FAILED


class SummaryInfo(BaseModel):
    """Per-version counts for a set of file records.

    ``version_counts`` groups every record by its ``version`` string, in
    order of first occurrence, so read errors show up as their own bucket.
    ``resolved_counts`` is the same grouping without the READ_FAILED
    records, which are counted in ``read_failed_count`` instead.
    """
    model_config = ConfigDict(frozen=True)

    total_count: int = Field(0, description="Number of records summarized", ge=0)
    version_counts: Dict[str, int] = Field(
        default_factory=dict,
        description="Record count per version label, first-occurrence order"
    )
    resolved_counts: Dict[str, int] = Field(
        default_factory=dict,
        description="Record count per label, excluding read failures"
    )
    unrecognized_count: int = Field(0, description="Records whose signature was not in the lookup", ge=0)
    read_failed_count: int = Field(0, description="Records whose file could not be read", ge=0)

    @model_validator(mode="after")
    def check_totals(self) -> "SummaryInfo":
        if sum(self.version_counts.values()) != self.total_count:
            raise ValueError("version counts must add up to total_count")
        if sum(self.resolved_counts.values()) + self.read_failed_count != self.total_count:
            raise ValueError("resolved counts plus read failures must add up to total_count")
        return self

    @property
    def distinct_versions(self) -> int:
        """Number of distinct version labels."""
        return len(self.version_counts)
