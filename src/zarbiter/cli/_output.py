"""Unified CLI output formatting utilities.

Every command prints through OutputFormatter so ``--json`` output stays
machine-readable and text output stays consistent.
"""
from __future__ import annotations

import json
import sys
from typing import Any, Optional

from zarbiter.core.exceptions import ZArbiterError


class OutputFormatter:
    """Unified output formatter for CLI commands."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        self.json_mode = json_mode
        self.indent = indent

    def error(
        self,
        error: Exception,
        message: Optional[str] = None,
        *,
        error_code: str = "error",
    ) -> None:
        """Output error result to stderr.

        Args:
            error: The exception that occurred
            message: Optional human-readable message (defaults to str(error))
            error_code: Error code for JSON output
        """
        msg = message or str(error)
        if self.json_mode:
            output: dict[str, Any] = {
                "error": error_code,
                "message": msg,
            }
            if isinstance(error, ZArbiterError) and error.context:
                output["context"] = error.context
            print(json.dumps(output, indent=self.indent, default=str), file=sys.stderr)
        else:
            print(f"Error: {msg}", file=sys.stderr)

    def json_output(self, data: Any) -> None:
        """Output raw JSON data."""
        print(format_json(data, indent=self.indent))

    def text(self, message: str = "") -> None:
        """Output plain text (suppressed in JSON mode)."""
        if not self.json_mode:
            print(message)


def format_json(data: Any, indent: int = 2) -> str:
    """Format data as JSON string."""
    return json.dumps(data, indent=indent, default=str, ensure_ascii=False)


def print_error(message: str) -> None:
    """Print error message to stderr."""
    print(f"Error: {message}", file=sys.stderr)


__all__ = [
    "OutputFormatter",
    "format_json",
    "print_error",
]
