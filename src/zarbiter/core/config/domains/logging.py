"""Domain-specific configuration for zarbiter logging.

This config controls:
- The stdlib log level for the CLI invocation
- An optional log file (relative paths resolve against the repo root)
"""

from __future__ import annotations

from functools import cached_property
from pathlib import Path

from ..base import BaseDomainConfig


class LoggingConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "logging"

    @cached_property
    def level(self) -> str:
        return str(self.section.get("level", "WARNING") or "WARNING")

    @cached_property
    def path_template(self) -> str:
        return str(self.section.get("path", "") or "")

    def resolve_log_path(self) -> Path | None:
        if not self.path_template.strip():
            return None
        expanded = Path(self.path_template).expanduser()
        if not expanded.is_absolute():
            expanded = self.repo_root / expanded
        return expanded.resolve()


__all__ = ["LoggingConfig"]
