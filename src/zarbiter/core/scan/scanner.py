"""Regex scan of stylesheet text for oversized z-index literals.

This is a heuristic, not a CSS parser: only ``z-index: <digits>`` is
recognised, so negative (``-1``) and fractional literals never match.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator, List, Optional, Union

from zarbiter.core.config.domains.scan import DEFAULT_SEVERE_THRESHOLD, DEFAULT_WARNING_THRESHOLD
from zarbiter.core.exceptions import StylesheetReadError

from .models import Finding, Severity

logger = logging.getLogger(__name__)

# ASCII digits only; \d would also accept other Unicode decimal digits.
Z_INDEX_PATTERN = re.compile(r"z-index\s*:\s*([0-9]+)")

# Literals longer than this are reported as severe without conversion.
# The interpreter refuses int() on digit strings past 4300 characters.
MAX_VALUE_DIGITS = 4000


def classify(
    value: int,
    *,
    warning_threshold: int = DEFAULT_WARNING_THRESHOLD,
    severe_threshold: int = DEFAULT_SEVERE_THRESHOLD,
) -> Optional[Severity]:
    """Severity for a literal value, or None when it is unremarkable."""
    if value > severe_threshold:
        return Severity.SEVERE
    if value > warning_threshold:
        return Severity.WARNING
    return None


def iter_findings(
    text: str,
    *,
    warning_threshold: int = DEFAULT_WARNING_THRESHOLD,
    severe_threshold: int = DEFAULT_SEVERE_THRESHOLD,
) -> Iterator[Finding]:
    """Yield findings in document order."""
    line = 1
    line_start = 0
    cursor = 0
    for match in Z_INDEX_PATTERN.finditer(text):
        literal = match.group(1)
        digits = literal.lstrip("0") or "0"
        if len(digits) > MAX_VALUE_DIGITS:
            value: Optional[int] = None
            severity: Optional[Severity] = Severity.SEVERE
        else:
            value = int(digits)
            severity = classify(
                value,
                warning_threshold=warning_threshold,
                severe_threshold=severe_threshold,
            )
        if severity is None:
            continue

        start = match.start()
        newlines = text.count("\n", cursor, start)
        if newlines:
            line += newlines
            line_start = text.rfind("\n", cursor, start) + 1
        cursor = start

        yield Finding(
            severity=severity,
            value=value,
            line=line,
            column=start - line_start + 1,
            offset=start,
            literal=literal,
        )


def scan(
    text: str,
    *,
    warning_threshold: int = DEFAULT_WARNING_THRESHOLD,
    severe_threshold: int = DEFAULT_SEVERE_THRESHOLD,
) -> List[Finding]:
    """Return every finding in ``text`` as a list, in document order."""
    findings = list(
        iter_findings(
            text,
            warning_threshold=warning_threshold,
            severe_threshold=severe_threshold,
        )
    )
    logger.debug("Scanned %d chars, %d finding(s)", len(text), len(findings))
    return findings


def read_stylesheet(path: Union[str, Path]) -> str:
    """Read a stylesheet as UTF-8 text.

    Raises:
        StylesheetReadError: if the file is missing, unreadable, or not UTF-8
    """
    p = Path(path)
    try:
        return p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Failed to read stylesheet %s: %s", p, exc)
        raise StylesheetReadError(p, reason=str(exc)) from exc


__all__ = ["Z_INDEX_PATTERN", "MAX_VALUE_DIGITS", "classify", "iter_findings", "scan", "read_stylesheet"]
