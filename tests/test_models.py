"""Tests for diagnostics, the sink and the report model."""

import pytest
from pydantic import ValidationError

from resume_validator.models.diagnostic import Diagnostic, DiagnosticSink, Severity
from resume_validator.models.report import ValidationReport
from resume_validator.models.section import (
    SECTION_ORDER,
    SectionKind,
    entry_location,
    section_location,
)


class TestDiagnostic:
    def test_frozen(self):
        d = Diagnostic(severity=Severity.ERROR, location="en/skills.yml", message="m")
        with pytest.raises(ValidationError):
            d.message = "changed"

    @pytest.mark.parametrize("field", ["location", "message"])
    def test_blank_rejected(self, field):
        kwargs = {"severity": "warning", "location": "loc", "message": "msg", field: "  "}
        with pytest.raises(ValidationError):
            Diagnostic(**kwargs)

    def test_serialization(self):
        d = Diagnostic(severity=Severity.INFO, location="loc", message="msg")
        assert d.model_dump(mode="json") == {"severity": "info", "location": "loc", "message": "msg"}


class TestDiagnosticSink:
    def test_preserves_order(self, sink):
        sink.info("a", "1")
        sink.error("b", "2")
        sink.warning("c", "3")
        assert [d.location for d in sink] == ["a", "b", "c"]
        assert sink.error_count == 1

    def test_diagnostics_is_a_copy(self, sink):
        sink.error("a", "1")
        sink.diagnostics.clear()
        assert len(sink) == 1


class TestValidationReport:
    def _sink(self, errors, warnings, info=0):
        sink = DiagnosticSink()
        for i in range(errors):
            sink.error(f"e{i}", "err")
        for i in range(warnings):
            sink.warning(f"w{i}", "warn")
        for i in range(info):
            sink.info(f"i{i}", "info")
        return sink

    def test_warnings_only_pass(self):
        report = ValidationReport.from_diagnostics(self._sink(0, 5, 3))
        assert report.passed
        assert report.exit_code == 0

    def test_single_error_fails(self):
        report = ValidationReport.from_diagnostics(self._sink(1, 0))
        assert not report.passed
        assert report.exit_code == 1

    def test_grouping_keeps_order(self):
        sink = DiagnosticSink()
        sink.warning("w1", "x")
        sink.error("e1", "x")
        sink.warning("w2", "x")
        report = ValidationReport.from_diagnostics(sink)
        assert [d.location for d in report.warnings] == ["w1", "w2"]
        assert (report.error_count, report.warning_count, report.info_count) == (1, 2, 0)


class TestSection:
    def test_order(self):
        assert SECTION_ORDER[0] is SectionKind.HEADER
        assert SECTION_ORDER[-1] is SectionKind.LINKS
        assert len(SECTION_ORDER) == 13

    def test_locations(self):
        assert section_location("ar", SectionKind.LINKS) == "ar/links.yml"
        assert entry_location("en", "skills", 0) == "en/skills.yml [entry 1]"
