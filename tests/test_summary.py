"""Tests for summary aggregation."""

import pytest

from dwg_version.core.pipeline import classify
from dwg_version.core.summary import status_line, summarize
from dwg_version.models import FileRecord, RecordStatus, SummaryInfo


def _record(name: str, version: str, status: RecordStatus = RecordStatus.RESOLVED) -> FileRecord:
    error = version if status == RecordStatus.READ_FAILED else None
    return FileRecord(filename=name, version=version, status=status, error=error)


class TestSummarize:
    """Tests for summarize()."""

    def test_empty(self):
        summary = summarize([])

        assert summary.total_count == 0
        assert summary.version_counts == {}
        assert summary.read_failed_count == 0

    def test_two_labels_from_three_signatures(self, dwg_folder, sample_lookup):
        summary = summarize(classify(dwg_folder, sample_lookup))

        assert summary.total_count == 3
        assert summary.version_counts == {"2018": 2, "2021": 1}

    def test_empty_folder(self, temp_dir, sample_lookup):
        summary = summarize(classify(temp_dir, sample_lookup))

        assert summary.total_count == 0
        assert summary.version_counts == {}

    def test_first_occurrence_order(self):
        records = [
            _record("1.DWG", "2021"),
            _record("2.DWG", "2018"),
            _record("3.DWG", "2021"),
            _record("4.DWG", "2000"),
        ]

        assert list(summarize(records).version_counts) == ["2021", "2018", "2000"]

    def test_exact_string_grouping(self):
        """Test that labels differing in case or whitespace stay separate."""
        records = [
            _record("1.DWG", "AutoCAD 2018"),
            _record("2.DWG", "autocad 2018"),
            _record("3.DWG", "AutoCAD 2018 "),
        ]

        assert summarize(records).version_counts == {
            "AutoCAD 2018": 1,
            "autocad 2018": 1,
            "AutoCAD 2018 ": 1,
        }

    @pytest.mark.parametrize("labels", [
        ["a"],
        ["a", "a", "a"],
        ["a", "b", "c", "a", "b"],
        ["x"] * 10 + ["y"] * 3,
    ])
    def test_counts_add_up(self, labels):
        records = [_record(f"{i}.DWG", label) for i, label in enumerate(labels)]
        summary = summarize(records)

        assert sum(summary.version_counts.values()) == summary.total_count == len(labels)

    def test_read_failures_counted_separately(self):
        records = [
            _record("1.DWG", "2018"),
            _record("2.DWG", "[Errno 13] Permission denied", RecordStatus.READ_FAILED),
            _record("3.DWG", "[Errno 13] Permission denied", RecordStatus.READ_FAILED),
            _record("4.DWG", "XYZ123", RecordStatus.UNRECOGNIZED),
        ]
        summary = summarize(records)

        # compatibility view: errors form their own bucket
        assert summary.version_counts == {
            "2018": 1,
            "[Errno 13] Permission denied": 2,
            "XYZ123": 1,
        }
        assert summary.resolved_counts == {"2018": 1, "XYZ123": 1}
        assert summary.read_failed_count == 2
        assert summary.unrecognized_count == 1
        assert summary.total_count == 4

    def test_accepts_generator(self):
        summary = summarize(_record(f"{i}.DWG", "2018") for i in range(5))

        assert summary.total_count == 5
        assert summary.version_counts == {"2018": 5}


class TestStatusLine:
    """Tests for status_line()."""

    def test_single_version(self):
        summary = summarize([_record("1.DWG", "2018"), _record("2.DWG", "2018")])

        assert status_line(summary) == "2 file(s) found, Version: 2018"

    def test_multiple_versions(self):
        summary = summarize([_record("1.DWG", "2018"), _record("2.DWG", "2021")])

        assert status_line(summary) == "Multiple versions found"

    def test_no_files(self):
        assert status_line(SummaryInfo()) == "No files found"
