"""Finding model for stylesheet scans."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Severity(str, Enum):
    WARNING = "warning"
    SEVERE = "severe"

    @property
    def rank(self) -> int:
        return 2 if self is Severity.SEVERE else 1


_MESSAGES = {
    Severity.SEVERE: "Are you trying to reach the moon?",
    Severity.WARNING: "Getting a bit ambitious, eh?",
}


@dataclass(frozen=True)
class Finding:
    """One suspicious ``z-index`` literal.

    ``line`` and ``column`` are 1-based; ``offset`` is the 0-based character
    index of the match in the scanned text. ``literal`` is the digit run as
    written. ``value`` is None when the literal is too long to convert.
    """

    severity: Severity
    value: Optional[int]
    line: int
    column: int
    offset: int
    literal: str = ""

    def __post_init__(self) -> None:
        if not self.literal and self.value is not None:
            object.__setattr__(self, "literal", str(self.value))

    @property
    def message(self) -> str:
        shown = self.literal if self.value is None else self.value
        return f"z-index: {shown} - {_MESSAGES[self.severity]}"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["severity"] = self.severity.value
        data["message"] = self.message
        return data


__all__ = ["Finding", "Severity"]
