"""Layered YAML configuration for zarbiter."""
from .base import BaseDomainConfig
from .domains import AllocationConfig, LoggingConfig, ScanConfig
from .manager import PROJECT_CONFIG_FILENAME, ConfigManager

__all__ = [
    "AllocationConfig",
    "BaseDomainConfig",
    "ConfigManager",
    "LoggingConfig",
    "PROJECT_CONFIG_FILENAME",
    "ScanConfig",
]
