"""Tests for the classification pipeline."""

from pathlib import Path
from unittest.mock import patch

import pytest

from dwg_version.core.lookup import DEFAULT_VERSION_LOOKUP
from dwg_version.core.pipeline import ClassificationPipeline, ClassificationResult, classify
from dwg_version.core.scanner import scan
from dwg_version.models import FileRecord, RecordStatus
from dwg_version.utils.exceptions import AccessError, DirectoryError


class TestClassify:
    """Tests for classify()."""

    def test_records_for_each_file(self, dwg_folder, sample_lookup):
        result = classify(dwg_folder, sample_lookup)

        versions = {r.filename: r.version for r in result}
        assert versions == {"a.DWG": "2018", "b.DWG": "2018", "c.DWG": "2021"}

    def test_scan_order_preserved(self, dwg_folder, sample_lookup):
        """Test that records follow the directory listing order."""
        expected = [p.name for p in scan(dwg_folder)]
        result = classify(dwg_folder, sample_lookup)

        assert [r.filename for r in result] == expected

    def test_filename_is_basename(self, dwg_folder, sample_lookup):
        for record in classify(dwg_folder, sample_lookup):
            assert Path(record.filename).name == record.filename
            assert str(dwg_folder) not in record.filename

    def test_trailing_content_does_not_matter(self, make_dwg, temp_dir, sample_lookup):
        make_dwg("big.DWG", content=b"AC1035" + bytes(range(256)) * 40)

        assert classify(temp_dir, sample_lookup)[0].version == "2021"

    def test_unknown_signature_kept_verbatim(self, make_dwg, temp_dir, sample_lookup):
        make_dwg("odd.DWG", content=b"%PDF-1.7\n")
        record = classify(temp_dir, sample_lookup)[0]

        assert record.version == "%PDF-1"
        assert record.signature == "%PDF-1"
        assert record.status == RecordStatus.UNRECOGNIZED

    def test_resolved_status(self, dwg_folder, sample_lookup):
        for record in classify(dwg_folder, sample_lookup):
            assert record.status == RecordStatus.RESOLVED
            assert record.error is None
            assert not record.is_error

    def test_short_file_resolved_from_partial_signature(self, make_dwg, temp_dir, sample_lookup):
        make_dwg("short.DWG", content=b"AC")
        record = classify(temp_dir, sample_lookup)[0]

        assert record.version == "AC"
        assert record.status == RecordStatus.UNRECOGNIZED

    def test_empty_file_excluded(self, make_dwg, temp_dir, sample_lookup):
        make_dwg("empty.DWG", content=b"")
        make_dwg("real.DWG", b"AC1032")

        result = classify(temp_dir, sample_lookup)

        assert [r.filename for r in result] == ["real.DWG"]
        assert len(result) == 1

    def test_empty_directory(self, temp_dir, sample_lookup):
        result = classify(temp_dir, sample_lookup)

        assert len(result) == 0
        assert list(result) == []

    def test_read_failure_becomes_record(self, dwg_folder, sample_lookup, deny_read):
        with deny_read("b.DWG"):
            result = classify(dwg_folder, sample_lookup)

        assert len(result) == 3
        failed = [r for r in result if r.filename == "b.DWG"][0]
        assert failed.status == RecordStatus.READ_FAILED
        assert failed.is_error
        assert "Permission denied" in failed.version
        assert failed.error == failed.version
        assert failed.signature == ""

    def test_read_failure_does_not_stop_batch(self, dwg_folder, sample_lookup, deny_read):
        with deny_read("a.DWG", "b.DWG"):
            result = classify(dwg_folder, sample_lookup)

        ok = [r for r in result if not r.is_error]
        assert [r.version for r in ok] == ["2021"]
        assert [r.filename for r in result.failures] == [
            r.filename for r in result if r.filename in ("a.DWG", "b.DWG")
        ]

    def test_read_failure_without_error_text(self, dwg_folder, sample_lookup):
        """Test that an OSError with no message still yields a labelled record."""
        real_open = open

        def fake_open(file, *args, **kwargs):
            if Path(file).name == "b.DWG":
                raise OSError()
            return real_open(file, *args, **kwargs)

        with patch("dwg_version.parsers.signature.open", side_effect=fake_open, create=True):
            result = classify(dwg_folder, sample_lookup)

        assert len(result) == 3
        failed = [r for r in result if r.filename == "b.DWG"][0]
        assert failed.status == RecordStatus.READ_FAILED
        assert failed.version == "OSError"
        assert failed.error == "OSError"

    def test_nonexistent_directory(self, temp_dir, sample_lookup):
        with pytest.raises(DirectoryError):
            classify(temp_dir / "missing", sample_lookup)

    def test_access_error_propagates(self, temp_dir, sample_lookup, monkeypatch):
        def denied(_):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr("dwg_version.core.scanner.os.scandir", denied)

        with pytest.raises(AccessError):
            classify(temp_dir, sample_lookup)

    def test_custom_suffix(self, make_dwg, temp_dir, sample_lookup):
        make_dwg("plan.DWG", b"AC1032")
        make_dwg("template.DWT", b"AC1035")

        result = classify(temp_dir, sample_lookup, suffix_filter="DWT")

        assert [(r.filename, r.version) for r in result] == [("template.DWT", "2021")]
        assert result.suffix_filter == "DWT"


class TestClassificationPipeline:
    """Tests for the ClassificationPipeline class."""

    def test_default_lookup(self, make_dwg, temp_dir):
        make_dwg("plan.DWG", b"AC1015")
        pipeline = ClassificationPipeline()

        assert pipeline.lookup is DEFAULT_VERSION_LOOKUP
        assert pipeline.classify_directory(temp_dir)[0].version == "AutoCAD 2000/2000i/2002"

    def test_reusable_across_folders(self, tmp_path, sample_lookup):
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.mkdir()
        second.mkdir()
        (first / "x.DWG").write_bytes(b"AC1032")
        (second / "y.DWG").write_bytes(b"AC1035")

        pipeline = ClassificationPipeline(lookup=sample_lookup)

        assert [r.version for r in pipeline.classify_directory(first)] == ["2018"]
        assert [r.version for r in pipeline.classify_directory(second)] == ["2021"]

    def test_progress_bar(self, dwg_folder, sample_lookup):
        """Test that enabling the progress bar does not change results."""
        quiet = ClassificationPipeline(lookup=sample_lookup).classify_directory(dwg_folder)
        noisy = ClassificationPipeline(lookup=sample_lookup, show_progress=True).classify_directory(dwg_folder)

        assert quiet.records == noisy.records

    def test_result_metadata(self, dwg_folder, sample_lookup):
        result = ClassificationPipeline(lookup=sample_lookup).classify_directory(dwg_folder)

        assert isinstance(result, ClassificationResult)
        assert result.directory == dwg_folder.absolute()
        assert result.suffix_filter == "DWG"
        assert result.processing_time_seconds >= 0.0
        assert all(isinstance(r, FileRecord) for r in result.records)
        assert result.failures == []
