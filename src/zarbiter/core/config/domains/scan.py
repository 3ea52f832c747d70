"""Domain-specific configuration for stylesheet scanning thresholds."""
from __future__ import annotations

from functools import cached_property

from ..base import BaseDomainConfig

DEFAULT_WARNING_THRESHOLD = 1000
DEFAULT_SEVERE_THRESHOLD = 9999


class ScanConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "scan"

    @cached_property
    def warning_threshold(self) -> int:
        """Values strictly above this are reported as warnings."""
        return int(self.section.get("warning_threshold", DEFAULT_WARNING_THRESHOLD))

    @cached_property
    def severe_threshold(self) -> int:
        """Values strictly above this are reported as severe."""
        return int(self.section.get("severe_threshold", DEFAULT_SEVERE_THRESHOLD))


__all__ = ["ScanConfig", "DEFAULT_WARNING_THRESHOLD", "DEFAULT_SEVERE_THRESHOLD"]
