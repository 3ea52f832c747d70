"""Base class for domain-specific configuration accessors."""
from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, Optional

from .manager import ConfigManager


class BaseDomainConfig(ABC):
    """Abstract base class for domain-specific configuration accessors.

    Usage:
        class MyConfig(BaseDomainConfig):
            def _config_section(self) -> str:
                return "mySection"

            @cached_property
            def my_setting(self) -> str:
                return self.section.get("mySetting", "default")

        cfg = MyConfig(manager=ConfigManager(Path("/path/to/project")))
        print(cfg.my_setting)
    """

    def __init__(self, repo_root: Optional[Path] = None, *, manager: Optional[ConfigManager] = None) -> None:
        """Initialize domain config.

        Args:
            repo_root: Repository root path. Current directory if None.
            manager: Shared ConfigManager; one is built from repo_root if omitted.
        """
        self._manager = manager or ConfigManager(repo_root)
        self._config = self._manager.load_config()

    @property
    def repo_root(self) -> Path:
        return self._manager.repo_root

    @abstractmethod
    def _config_section(self) -> str:
        """Return the top-level config key for this domain."""
        ...

    @cached_property
    def section(self) -> Dict[str, Any]:
        """This domain's configuration section, or an empty dict."""
        return self._config.get(self._config_section(), {}) or {}


__all__ = ["BaseDomainConfig"]
