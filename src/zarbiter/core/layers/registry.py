"""Layer registry: named stacking tiers and custom layer allocation.

Fixed layers are a read-only table shared by every registry. Custom layers
are allocated on first use and live only as long as the registry instance.
A registry is built once per CLI invocation and passed to whatever needs it.
"""
from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, List, Mapping, Optional, Tuple

from zarbiter.core.config.domains.allocation import DEFAULT_STEP, SEQUENTIAL, SHARED

if TYPE_CHECKING:
    from zarbiter.core.config.domains.allocation import AllocationConfig

logger = logging.getLogger(__name__)

# Insertion order is the display order for list_layers().
FIXED_LAYERS: Mapping[str, int] = MappingProxyType(
    {
        "underworld": -1,
        "default": 0,
        "content": 10,
        "dropdown": 100,
        "modal": 1000,
        "tooltip": 1100,
        "notification": 1200,
        "god-mode": 9999,
    }
)

ALLOCATION_STRATEGIES = (SEQUENTIAL, SHARED)


class LayerRegistry:
    """Resolve layer names to z-index values.

    Lookup is two-tier: the fixed table first, then the custom table.
    Unknown names are allocated through :meth:`allocate`.

    Strategies:
        sequential: new base = max(fixed and custom values) + step,
            so distinct custom layers never share a base.
        shared: new base = max(fixed values) + step, so every custom
            layer starts at the same base.
    """

    def __init__(self, *, strategy: str = SEQUENTIAL, step: int = DEFAULT_STEP) -> None:
        if strategy not in ALLOCATION_STRATEGIES:
            raise ValueError(
                f"Unknown allocation strategy '{strategy}' (expected one of: {', '.join(ALLOCATION_STRATEGIES)})"
            )
        if step < 1:
            raise ValueError(f"Allocation step must be a positive integer, got {step}")
        self.strategy = strategy
        self.step = step
        self._custom: Dict[str, int] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: AllocationConfig) -> LayerRegistry:
        return cls(strategy=config.strategy, step=config.step)

    @property
    def fixed_layers(self) -> Mapping[str, int]:
        return FIXED_LAYERS

    def lookup(self, name: str) -> Optional[int]:
        """Return the stored base for ``name`` without allocating."""
        if name in FIXED_LAYERS:
            return FIXED_LAYERS[name]
        return self._custom.get(name)

    def is_custom(self, name: str) -> bool:
        return name not in FIXED_LAYERS

    def allocate(self, name: str) -> int:
        """Return the base for ``name``, allocating a custom layer if needed."""
        base = self.lookup(name)
        if base is not None:
            return base

        with self._lock:
            # Another thread may have allocated while we waited.
            base = self._custom.get(name)
            if base is not None:
                return base
            base = self._next_base()
            self._custom[name] = base

        logger.debug("Allocated custom layer %r at %d (strategy=%s)", name, base, self.strategy)
        return base

    def _next_base(self) -> int:
        ceiling = max(FIXED_LAYERS.values())
        if self.strategy == SEQUENTIAL and self._custom:
            ceiling = max(ceiling, max(self._custom.values()))
        return ceiling + self.step

    def resolve(self, name: str, offset: int = 0) -> int:
        """Return the z-index for ``name`` plus ``offset``.

        Never fails: unknown names become custom layers, and the offset is
        added as-is (negative values included).
        """
        return self.allocate(name) + offset

    def list_layers(self) -> List[Tuple[str, int]]:
        """Fixed layers in their predefined order. Custom layers are excluded."""
        return list(FIXED_LAYERS.items())

    def custom_layers(self) -> Dict[str, int]:
        """Copy of the custom table in allocation order."""
        with self._lock:
            return dict(self._custom)


__all__ = ["FIXED_LAYERS", "ALLOCATION_STRATEGIES", "LayerRegistry"]
