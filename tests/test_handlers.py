"""Tests for the gradio event handlers."""

import json
import os

from csv_json_converter.handlers import (
    SAMPLE_CSV,
    build_preview,
    clear_outputs,
    convert_handler,
    export_json_handler,
    load_csv_file,
    load_sample_data,
    resolve_output_path,
)

DEFAULTS = (",", True, "array", True, True)


class TestConvertHandler:
    def test_success(self):
        json_text, preview, status = convert_handler("a,b\n1,2\n3,4", *DEFAULTS)
        assert json.loads(json_text) == [{"a": 1, "b": 2}, {"a": 3, "b": 4}]
        assert preview == [{"a": 1, "b": 2}, {"a": 3, "b": 4}]
        assert status == "Converted 2 record(s) with 2 column(s)."

    def test_compact_output(self):
        json_text, _, _ = convert_handler("a\n1", ",", True, "array", False, True)
        assert json_text == '[{"a":1}]'

    def test_no_data(self):
        assert convert_handler("", *DEFAULTS) == ("", None, "No CSV data provided.")

    def test_conversion_error_becomes_status(self):
        json_text, preview, status = convert_handler("a,b\n1,2,3", *DEFAULTS)
        assert json_text == ""
        assert preview is None
        assert status.startswith("Error: Row 0 has 3 field(s)")

    def test_bad_option_becomes_status(self):
        _, _, status = convert_handler("a\n1", "::", True, "array", True, True)
        assert status.startswith("Error: Delimiter must be a single character")


class TestPreview:
    def test_array_preview_is_limited(self):
        assert build_preview([{"i": i} for i in range(10)]) == [{"i": 0}, {"i": 1}, {"i": 2}]

    def test_object_preview_truncates_columns(self):
        assert build_preview({"a": [1, 2, 3, 4], "b": [5, 6, 7, 8]}) == {"a": [1, 2, 3], "b": [5, 6, 7]}

    def test_empty_preview(self):
        assert build_preview([]) is None


class TestFileHandlers:
    def test_load_csv_file_from_path(self, tmp_path):
        csv_file = tmp_path / "data.csv"
        csv_file.write_bytes("﻿a,b\n1,2\n".encode("utf-8"))
        text, status = load_csv_file(str(csv_file))
        assert text == "a,b\n1,2\n"
        assert status == "Loaded 2 line(s)."

    def test_load_csv_file_missing(self, tmp_path):
        _, status = load_csv_file(str(tmp_path / "missing.csv"))
        assert status.startswith("Error reading file:")

    def test_load_sample_data(self):
        text, _ = load_sample_data()
        assert text == SAMPLE_CSV

    def test_export_writes_json(self, tmp_path, monkeypatch):
        monkeypatch.setattr("tempfile.tempdir", str(tmp_path))
        path, status = export_json_handler("a,b\n1,2", *DEFAULTS, "result")
        assert os.path.basename(path) == "result.json"
        assert os.path.dirname(os.path.dirname(path)) == str(tmp_path)
        with open(path, encoding="utf-8") as f:
            assert json.load(f) == [{"a": 1, "b": 2}]
        assert status.startswith("Export successful!")

    def test_export_failure_returns_no_file(self):
        path, status = export_json_handler("", *DEFAULTS, "result")
        assert path is None
        assert status == "No CSV data provided."

    def test_output_path_strips_directories(self, tmp_path, monkeypatch):
        monkeypatch.setattr("tempfile.tempdir", str(tmp_path))
        path = resolve_output_path("../../etc/out")
        assert os.path.basename(path) == "out.json"
        assert os.path.dirname(os.path.dirname(path)) == str(tmp_path)
        assert os.path.basename(resolve_output_path("")) == "converted.json"

    def test_each_export_gets_its_own_file(self, tmp_path, monkeypatch):
        monkeypatch.setattr("tempfile.tempdir", str(tmp_path))
        first, _ = export_json_handler("a\n1", *DEFAULTS, "same")
        second, _ = export_json_handler("a\n2", *DEFAULTS, "same")
        assert first != second
        with open(first, encoding="utf-8") as f:
            assert json.load(f) == [{"a": 1}]
        with open(second, encoding="utf-8") as f:
            assert json.load(f) == [{"a": 2}]

    def test_clear_outputs(self):
        assert clear_outputs() == ["", "", None, "", None]


class TestOversizedNumbers:
    def test_huge_integer_returns_json_not_crash(self):
        json_text, _, status = convert_handler("n\n" + "9" * 5000, *DEFAULTS)
        assert json.loads(json_text) == [{"n": "9" * 5000}]
        assert status == "Converted 1 record(s) with 1 column(s)."
