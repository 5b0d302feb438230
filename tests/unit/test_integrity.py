"""Tests for the shallow integrity check."""

import logging

import pytest

from dissect.lm.integrity import IntegrityReport, check_integrity, missing_fields


class TestMissingFields:
    def test_all_present(self) -> None:
        assert missing_fields(["a", "b"], {"a": 1, "b": 2, "c": 3}) == []

    def test_missing_in_declared_order(self) -> None:
        assert missing_fields(["a", "b", "c"], {"b": 1}) == ["a", "c"]

    def test_non_mapping_misses_everything(self) -> None:
        assert missing_fields(["a"], ["a"]) == ["a"]
        assert missing_fields(["a"], "a") == ["a"]
        assert missing_fields(["a"], None) == ["a"]

    def test_nested_and_types_ignored(self) -> None:
        assert missing_fields(["a"], {"a": {"unexpected": "shape"}}) == []


class TestCheckIntegrity:
    def test_passed_report(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="dissect.lm.integrity")
        report = check_integrity("JURY", ["a"], {"a": 1})
        assert report == IntegrityReport(tool_id="JURY")
        assert report.passed
        assert "Integrity check passed" in caplog.text

    def test_warning_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        report = check_integrity("AB_TOOL", ["a", "b"], {"a": "x"})
        assert not report.passed
        assert report.missing == ("b",)
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "Integrity warning" in warnings[0].getMessage()
        assert "'b'" in warnings[0].getMessage()
