"""
zarbiter CLI package.

Provides the command-line interface with auto-discovery of commands
from the commands/ folder.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _context: Per-invocation config, logging, and layer registry
"""
from ._output import OutputFormatter, format_json, print_error
from ._args import (
    add_config_flag,
    add_json_flag,
    add_repo_root_flag,
    add_standard_flags,
    add_verbose_flag,
)
from ._context import CommandContext, build_context, get_repo_root

__all__ = [
    # Output formatting
    "OutputFormatter",
    "format_json",
    "print_error",
    # Argument helpers
    "add_config_flag",
    "add_json_flag",
    "add_repo_root_flag",
    "add_standard_flags",
    "add_verbose_flag",
    # Context
    "CommandContext",
    "build_context",
    "get_repo_root",
]
