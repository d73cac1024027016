"""Classification pipeline for a folder of DWG files.

Composes the directory scanner, the signature reader and the version
resolver. Files are processed one at a time, in scan order, on the calling
thread.

Features:
- Per-file error isolation (one unreadable file doesn't stop the batch)
- Empty files are skipped
- Optional progress bar with tqdm
"""

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from tqdm import tqdm

from dwg_version.core.lookup import DEFAULT_VERSION_LOOKUP
from dwg_version.core.resolver import resolve_status
from dwg_version.core.scanner import DEFAULT_SUFFIX, scan
from dwg_version.models import FileRecord, RecordStatus
from dwg_version.parsers.signature import SignatureErr, SignatureReader


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassificationResult:
    """Ordered file records for one scanned folder.

    Behaves as a read-only sequence of FileRecord in scan order.

    Attributes:
        directory: Folder that was scanned
        suffix_filter: Extension filter used for the scan
        records: One record per classified file
        processing_time_seconds: Wall time spent classifying
    """
    directory: Path
    suffix_filter: str
    records: Tuple[FileRecord, ...] = field(default_factory=tuple)
    processing_time_seconds: float = 0.0

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[FileRecord]:
        return iter(self.records)

    def __getitem__(self, index):
        return self.records[index]

    @property
    def failures(self) -> List[FileRecord]:
        """Records whose file could not be read."""
        return [r for r in self.records if r.is_error]


def _classify_single_file(
    file_path: Path,
    reader: SignatureReader,
    lookup: Mapping,
) -> Optional[FileRecord]:
    """Classify one file.

    Args:
        file_path: File to classify
        reader: Signature reader
        lookup: Signature to version label mapping

    Returns:
        FileRecord, or None when the file is empty and must be skipped
    """
    signature = reader.read(file_path)

    if isinstance(signature, SignatureErr):
        return FileRecord(
            filename=file_path.name,
            version=signature.message,
            status=RecordStatus.READ_FAILED,
            error=signature.message,
        )

    if not signature.as_text:
        logger.debug(f"Skipping empty file {file_path.name}")
        return None

    label, status = resolve_status(signature.as_text, lookup)
    if status == RecordStatus.UNRECOGNIZED:
        logger.debug(f"{file_path.name}: unrecognized signature {signature.as_text!r}")

    return FileRecord(
        filename=file_path.name,
        version=label,
        status=status,
        signature=signature.as_text,
    )


class ClassificationPipeline:
    """Scans a folder and classifies each matching file by its signature.

    The lookup table is fixed at construction and never modified, so one
    pipeline can be reused for any number of folders.
    """

    def __init__(
        self,
        lookup: Optional[Mapping] = None,
        suffix_filter: str = DEFAULT_SUFFIX,
        show_progress: bool = False,
    ):
        """Initialize the pipeline.

        Args:
            lookup: Signature to version label mapping (default: built-in table)
            suffix_filter: File extension to scan for (default: "DWG")
            show_progress: Display a tqdm progress bar while classifying
        """
        self.lookup = DEFAULT_VERSION_LOOKUP if lookup is None else lookup
        self.suffix_filter = suffix_filter
        self.show_progress = show_progress
        self.reader = SignatureReader()

    def classify_directory(self, directory: Union[str, Path]) -> ClassificationResult:
        """Classify all matching files in a directory.

        Args:
            directory: Folder containing the drawing files

        Returns:
            ClassificationResult in scan order

        Raises:
            DirectoryError: If directory doesn't exist or is not a directory
            AccessError: If directory cannot be listed
        """
        start_time = time.time()

        files = scan(directory, self.suffix_filter)
        records: List[FileRecord] = []

        with tqdm(
            files,
            desc="Reading signatures",
            unit="file",
            disable=not self.show_progress,
        ) as pbar:
            for file_path in pbar:
                record = _classify_single_file(file_path, self.reader, self.lookup)
                if record is not None:
                    records.append(record)

        processing_time = time.time() - start_time
        skipped = len(files) - len(records)

        logger.info(
            f"Classified {len(records)}/{len(files)} files in {processing_time:.2f}s "
            f"({skipped} empty files skipped)"
        )

        return ClassificationResult(
            directory=Path(directory).absolute(),
            suffix_filter=self.suffix_filter,
            records=tuple(records),
            processing_time_seconds=processing_time,
        )


def classify(
    path: Union[str, Path],
    lookup: Mapping,
    suffix_filter: str = DEFAULT_SUFFIX,
) -> ClassificationResult:
    """Convenience function to classify the drawing files in a folder.

    Args:
        path: Folder containing the drawing files
        lookup: Signature to version label mapping
        suffix_filter: File extension to scan for (default: "DWG")

    Returns:
        ClassificationResult in scan order
    """
    pipeline = ClassificationPipeline(lookup=lookup, suffix_filter=suffix_filter)
    return pipeline.classify_directory(path)
