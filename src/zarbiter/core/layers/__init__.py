"""Named stacking layers and custom layer allocation."""
from .registry import ALLOCATION_STRATEGIES, FIXED_LAYERS, LayerRegistry

__all__ = ["ALLOCATION_STRATEGIES", "FIXED_LAYERS", "LayerRegistry"]
