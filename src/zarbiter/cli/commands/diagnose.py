"""
zarbiter diagnose command.

SUMMARY: Find oversized z-index values in stylesheets

Reads each file as UTF-8 and reports every ``z-index`` literal above the
configured thresholds. Exit status is 1 when a file cannot be read, or when
a finding reaches the ``--fail-on`` severity; 0 otherwise.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, List, Optional

from zarbiter.cli import OutputFormatter, add_standard_flags, build_context
from zarbiter.core.exceptions import StylesheetReadError, ZArbiterError
from zarbiter.core.scan import Finding, Severity, read_stylesheet, scan

SUMMARY = "Find oversized z-index values in stylesheets"

FAIL_ON_CHOICES = ("never", "warning", "severe")

_ICONS = {
    Severity.SEVERE: "🚨",
    Severity.WARNING: "⚠️ ",
}


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("paths", nargs="+", metavar="path", help="Stylesheet file(s) to scan")
    parser.add_argument(
        "--fail-on",
        choices=FAIL_ON_CHOICES,
        default="never",
        help="Exit 1 when a finding of this severity or worse is present (default: never)",
    )
    add_standard_flags(parser)


def format_finding(finding: Finding) -> str:
    return f"{_ICONS[finding.severity]} {finding.message} (line {finding.line}, col {finding.column})"


def _fails(findings: List[Finding], fail_on: str) -> bool:
    if fail_on == "never":
        return False
    threshold = Severity(fail_on).rank
    return any(f.severity.rank >= threshold for f in findings)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        ctx = build_context(args)
    except ZArbiterError as e:
        formatter.error(e, error_code="config_error")
        return 1

    reports: List[Dict[str, Any]] = []
    all_findings: List[Finding] = []
    read_failed = False
    multiple = len(args.paths) > 1

    for path in args.paths:
        findings: List[Finding] = []
        error: Optional[StylesheetReadError] = None
        try:
            text = read_stylesheet(path)
        except StylesheetReadError as e:
            error = e
            read_failed = True
        else:
            findings = scan(
                text,
                warning_threshold=ctx.scan.warning_threshold,
                severe_threshold=ctx.scan.severe_threshold,
            )
            all_findings.extend(findings)

        reports.append(
            {
                "path": path,
                "findings": [f.to_dict() for f in findings],
                "error": error.to_json_error() if error is not None else None,
            }
        )

        if multiple:
            formatter.text(f"\n📄 {path}")
        if error is not None:
            formatter.text(f"❌ Could not read file: {path}")
        elif findings:
            formatter.text("\n🔍 Z-Index Offenders Found:\n")
            for finding in findings:
                formatter.text(format_finding(finding))
            formatter.text("\n💡 Try using named layers instead!")
        else:
            formatter.text("✅ All z-index values look reasonable!")

    if formatter.json_mode:
        formatter.json_output({"files": reports})

    if read_failed or _fails(all_findings, args.fail_on):
        return 1
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
