"""Stylesheet scanning for oversized z-index literals."""
from .models import Finding, Severity
from .scanner import Z_INDEX_PATTERN, classify, iter_findings, read_stylesheet, scan

__all__ = [
    "Finding",
    "Severity",
    "Z_INDEX_PATTERN",
    "classify",
    "iter_findings",
    "read_stylesheet",
    "scan",
]
