from __future__ import annotations

from pathlib import Path

import pytest

from zarbiter.core.exceptions import StylesheetReadError
from zarbiter.core.scan import Finding, Severity, classify, iter_findings, read_stylesheet, scan


def test_small_values_produce_no_findings() -> None:
    assert scan("z-index: 50;") == []


def test_value_at_warning_threshold_is_not_reported() -> None:
    assert scan(".a { z-index: 1000; }") == []


def test_warning_finding() -> None:
    findings = scan("z-index: 1500;")
    assert len(findings) == 1
    assert findings[0].severity is Severity.WARNING
    assert findings[0].value == 1500


def test_value_at_severe_threshold_is_a_warning() -> None:
    [finding] = scan("z-index: 9999;")
    assert finding.severity is Severity.WARNING


def test_severe_finding() -> None:
    [finding] = scan("z-index: 999999;")
    assert finding.severity is Severity.SEVERE
    assert finding.value == 999999


def test_mixed_values_only_report_offenders() -> None:
    findings = scan("z-index:100; z-index: 100000;")
    assert [(f.severity, f.value) for f in findings] == [(Severity.SEVERE, 100000)]


def test_findings_are_in_document_order() -> None:
    css = ".a { z-index: 50000; }\n.b { z-index: 2000; }\n.c { z-index: 3; }\n.d { z-index :  12000 }\n"
    assert [f.value for f in scan(css)] == [50000, 2000, 12000]


def test_whitespace_around_colon_is_allowed() -> None:
    [finding] = scan("z-index \t:\n 4242")
    assert finding.value == 4242


@pytest.mark.parametrize("css", ["z-index: -99999;", "z-index: auto;", "zindex: 99999;", "z-index 99999;"])
def test_unrecognised_literals_are_ignored(css: str) -> None:
    assert scan(css) == []


def test_fractional_literal_matches_only_leading_digits() -> None:
    # "1.5e3" is read as 1, which is below every threshold.
    assert scan("z-index: 1.5e3;") == []


def test_line_and_column_are_one_based() -> None:
    css = "body {\n  color: red;\n}\n.x {\n    z-index: 5000;\n}\n.y { z-index: 70000; }"
    first, second = scan(css)
    assert (first.line, first.column) == (5, 5)
    assert (second.line, second.column) == (7, 6)
    assert css[first.offset:].startswith("z-index: 5000")
    assert css[second.offset:].startswith("z-index: 70000")


def test_custom_thresholds() -> None:
    findings = scan("z-index: 150; z-index: 600;", warning_threshold=100, severe_threshold=500)
    assert [f.severity for f in findings] == [Severity.WARNING, Severity.SEVERE]


def test_iter_findings_is_lazy_and_restartable() -> None:
    css = "z-index: 2000; z-index: 20000;"
    gen = iter_findings(css)
    assert next(gen).value == 2000
    assert list(iter_findings(css)) == scan(css)


@pytest.mark.parametrize(
    "value, expected",
    [(0, None), (1000, None), (1001, Severity.WARNING), (9999, Severity.WARNING), (10000, Severity.SEVERE)],
)
def test_classify_boundaries(value: int, expected) -> None:
    assert classify(value) is expected


def test_finding_messages_and_dict() -> None:
    severe = Finding(severity=Severity.SEVERE, value=99999, line=1, column=1, offset=0)
    warning = Finding(severity=Severity.WARNING, value=2000, line=2, column=3, offset=10)
    assert severe.message == "z-index: 99999 - Are you trying to reach the moon?"
    assert warning.message == "z-index: 2000 - Getting a bit ambitious, eh?"
    assert warning.to_dict() == {
        "severity": "warning",
        "value": 2000,
        "line": 2,
        "column": 3,
        "offset": 10,
        "literal": "2000",
        "message": "z-index: 2000 - Getting a bit ambitious, eh?",
    }


def test_read_stylesheet_reads_utf8(tmp_path: Path) -> None:
    path = tmp_path / "a.css"
    path.write_text("/* ünïcode */ .a { z-index: 1; }", encoding="utf-8")
    assert "ünïcode" in read_stylesheet(path)


def test_read_stylesheet_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "nope.css"
    with pytest.raises(StylesheetReadError) as excinfo:
        read_stylesheet(missing)
    err = excinfo.value
    assert isinstance(err, OSError)
    assert err.path == missing
    assert err.context["path"] == str(missing)
    assert str(err) == f"Could not read file: {missing}"


def test_read_stylesheet_rejects_non_utf8(tmp_path: Path) -> None:
    path = tmp_path / "latin1.css"
    path.write_bytes(b"\xff\xfe\xfa z-index: 5;")
    with pytest.raises(StylesheetReadError):
        read_stylesheet(path)


def test_leading_zeros_keep_the_written_literal() -> None:
    [finding] = scan("z-index: 0002000;")
    assert finding.value == 2000
    assert finding.literal == "0002000"
    assert finding.message == "z-index: 2000 - Getting a bit ambitious, eh?"


def test_very_long_literal_is_severe_without_conversion() -> None:
    digits = "9" * 5000
    [finding] = scan(f".a {{ z-index: {digits}; }}")
    assert finding.severity is Severity.SEVERE
    assert finding.value is None
    assert finding.literal == digits
    assert finding.message == f"z-index: {digits} - Are you trying to reach the moon?"
    data = finding.to_dict()
    assert data["value"] is None
    assert data["literal"] == digits
    assert len(scan(f"z-index: {digits}; z-index: 2000;")) == 2


def test_long_run_of_zeros_is_not_reported() -> None:
    assert scan("z-index: " + "0" * 5000 + "5;") == []


@pytest.mark.parametrize("css", ["z-index: ١٥٠٠;", "z-index: １５００;", "z-index: ১৫০০০;"])
def test_non_ascii_digits_are_ignored(css: str) -> None:
    assert scan(css) == []
