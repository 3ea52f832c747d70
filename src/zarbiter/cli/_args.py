"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_repo_root_flag(parser: argparse.ArgumentParser) -> None:
    """Add --repo-root flag (where .zarbiter.yaml is looked up)."""
    parser.add_argument(
        "--repo-root",
        type=str,
        help="Project root containing .zarbiter.yaml (default: current directory)",
    )


def add_config_flag(parser: argparse.ArgumentParser) -> None:
    """Add --config flag for an explicit config file."""
    parser.add_argument(
        "--config",
        type=str,
        help="Extra YAML config file, applied on top of the project config",
    )


def add_verbose_flag(parser: argparse.ArgumentParser) -> None:
    """Add --verbose flag."""
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output to stderr",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add standard flags that every command uses.

    Adds: --json, --repo-root, --config, --verbose
    """
    add_json_flag(parser)
    add_repo_root_flag(parser)
    add_config_flag(parser)
    add_verbose_flag(parser)


__all__ = [
    "add_json_flag",
    "add_repo_root_flag",
    "add_config_flag",
    "add_verbose_flag",
    "add_standard_flags",
]
