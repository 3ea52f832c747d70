"""Typed accessors for each top-level config section."""
from .allocation import AllocationConfig
from .logging import LoggingConfig
from .scan import ScanConfig

__all__ = ["AllocationConfig", "LoggingConfig", "ScanConfig"]
