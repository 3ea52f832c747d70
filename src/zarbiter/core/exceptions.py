from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping


class ZArbiterError(Exception):
    """Base exception for zarbiter."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ConfigError(ZArbiterError, ValueError):
    """Raised when configuration cannot be read or fails validation."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ZArbiterError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class StylesheetReadError(ZArbiterError, OSError):
    """Raised when a stylesheet cannot be read as UTF-8 text."""

    def __init__(
        self,
        path: Path | str,
        *,
        reason: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        ctx["path"] = str(path)
        if reason:
            ctx["reason"] = reason
        message = f"Could not read file: {path}"
        ZArbiterError.__init__(self, message, context=ctx)
        OSError.__init__(self, message)
        self.path = Path(path)


__all__ = [
    "ZArbiterError",
    "ConfigError",
    "StylesheetReadError",
]
