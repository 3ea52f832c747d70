"""Domain-specific configuration for custom layer allocation."""
from __future__ import annotations

from functools import cached_property

from ..base import BaseDomainConfig

SEQUENTIAL = "sequential"
SHARED = "shared"
DEFAULT_STEP = 100


class AllocationConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "allocation"

    @cached_property
    def strategy(self) -> str:
        return str(self.section.get("strategy", SEQUENTIAL) or SEQUENTIAL)

    @cached_property
    def step(self) -> int:
        return int(self.section.get("step", DEFAULT_STEP) or DEFAULT_STEP)


__all__ = ["AllocationConfig", "SEQUENTIAL", "SHARED", "DEFAULT_STEP"]
