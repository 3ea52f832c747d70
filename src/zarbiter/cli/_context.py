"""Per-invocation context shared by CLI commands.

Each command builds exactly one context: config is loaded once, logging is
configured from it, and a fresh LayerRegistry is created. The registry is
handed to whatever needs layer resolution; there is no module-level instance.
"""
from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from zarbiter.core.config import AllocationConfig, ConfigManager, LoggingConfig, ScanConfig
from zarbiter.core.layers import LayerRegistry
from zarbiter.core.stdlib_logging import configure_logging, suppress_lastresort_in_json_mode


@dataclass
class CommandContext:
    config: ConfigManager
    registry: LayerRegistry
    scan: ScanConfig


def get_repo_root(args: argparse.Namespace) -> Path:
    """Repository root from ``--repo-root``, else the current directory."""
    raw = getattr(args, "repo_root", None)
    if raw:
        return Path(raw).expanduser().resolve()
    return Path.cwd()


def build_context(args: argparse.Namespace) -> CommandContext:
    """Load config, configure logging, and build the layer registry.

    Raises:
        ConfigError: if any config source is missing, unreadable, or invalid
    """
    raw_config = getattr(args, "config", None)
    manager = ConfigManager(
        get_repo_root(args),
        config_path=Path(raw_config) if raw_config else None,
    )
    manager.load_config()

    if getattr(args, "json", False):
        suppress_lastresort_in_json_mode()
    log_cfg = LoggingConfig(manager=manager)
    configure_logging(
        level=log_cfg.level,
        log_path=log_cfg.resolve_log_path(),
        verbose=bool(getattr(args, "verbose", False)),
    )

    registry = LayerRegistry.from_config(AllocationConfig(manager=manager))
    return CommandContext(config=manager, registry=registry, scan=ScanConfig(manager=manager))


__all__ = ["CommandContext", "build_context", "get_repo_root"]
