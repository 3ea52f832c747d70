"""
Auto-discovery CLI dispatcher for zarbiter.

Scans cli/commands/ for command modules and registers them automatically.
Adding a new command = add a .py file exposing SUMMARY, register_args(parser)
and main(args) -> int.

Shorthand: ``zarbiter <layer> [offset]`` is rewritten to
``zarbiter resolve <layer> [offset]`` whenever the first argument is not a
known command or a flag. Standard flags may precede either form.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

SHORTHAND_COMMAND = "resolve"

# Flags from add_standard_flags(), accepted before the command as well.
GLOBAL_SWITCHES = frozenset({"--json", "--verbose", "-v"})
GLOBAL_OPTIONS = frozenset({"--config", "--repo-root"})


@lru_cache(maxsize=1)
def discover_commands() -> dict[str, dict[str, Any]]:
    """Discover top-level commands under cli/commands.

    Returns:
        Dict mapping command name to command info dict
    """
    commands_dir = Path(__file__).parent / "commands"
    commands: dict[str, dict[str, Any]] = {}

    for item in sorted(commands_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue

        cmd_name = item.stem
        try:
            module = importlib.import_module(f"zarbiter.cli.commands.{cmd_name}")
        except ImportError as e:
            print(f"Warning: Could not import command {cmd_name}: {e}", file=sys.stderr)
            continue
        commands[cmd_name] = {
            "module": module,
            "summary": getattr(module, "SUMMARY", cmd_name),
            "register_args": getattr(module, "register_args", None),
            "main": getattr(module, "main", None),
        }

    return commands


def command_cli_names(cmd_name: str) -> tuple[str, list[str]]:
    """Return (primary, aliases) for a command module name."""
    primary = cmd_name.replace("_", "-")
    aliases = [cmd_name] if primary != cmd_name else []
    return primary, aliases


def known_command_tokens() -> set[str]:
    tokens: set[str] = set()
    for cmd_name in discover_commands():
        primary, aliases = command_cli_names(cmd_name)
        tokens.add(primary)
        tokens.update(aliases)
    return tokens


def _get_version() -> str:
    from zarbiter import __version__

    return __version__


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with auto-discovered commands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="zarbiter",
        description="zarbiter - consistent z-index values for named layers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands (any other first argument is treated as a layer name)",
        metavar="<command>",
    )

    for cmd_name, cmd_info in sorted(discover_commands().items()):
        primary, aliases = command_cli_names(cmd_name)
        cmd_parser = subparsers.add_parser(
            primary,
            aliases=aliases,
            help=cmd_info["summary"],
            description=cmd_info["summary"],
        )
        if cmd_info["register_args"]:
            cmd_info["register_args"](cmd_parser)
        if cmd_info["main"]:
            cmd_parser.set_defaults(_func=cmd_info["main"])

    return parser


def split_leading_global_flags(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split off standard flags given before the command or layer name.

    Returns:
        (leading flags, remaining arguments)
    """
    i = 0
    while i < len(argv):
        token = argv[i]
        option = token.split("=", 1)[0]
        if token in GLOBAL_SWITCHES or (option in GLOBAL_OPTIONS and "=" in token):
            i += 1
        elif token in GLOBAL_OPTIONS and i + 1 < len(argv):
            i += 2
        else:
            break
    return argv[:i], argv[i:]


def route_shorthand(argv: list[str]) -> list[str]:
    """Rewrite ``<layer> [offset]`` invocations to the resolve command.

    Standard flags placed before the command (``zarbiter --verbose modal``)
    are moved behind it, since only the subcommands define them.

    Layer names that collide with a command name (``layers``, ``diagnose``,
    ...) always run the command; use ``zarbiter resolve <name>`` for those,
    and ``zarbiter resolve -- <name>`` for names starting with ``-``.
    """
    leading, rest = split_leading_global_flags(argv)
    if not rest:
        return argv
    first = rest[0]
    if first in known_command_tokens():
        return [first, *leading, *rest[1:]]
    if first.startswith("-"):
        return argv
    logger.debug("Routing %r to the %s command", first, SHORTHAND_COMMAND)
    return [SHORTHAND_COMMAND, *leading, *rest]


def usage_text() -> str:
    """Usage banner shown when zarbiter runs without arguments."""
    from zarbiter.core.layers import LayerRegistry

    example = LayerRegistry().resolve("modal")
    return f"""
🎯 CSS Z-Index Arbitrator - Stop the madness!

Commands:
  zarbiter modal                 # Get z-index for modal layer
  zarbiter dropdown 5            # Get with offset
  zarbiter layers                # Show all layers
  zarbiter diagnose file.css     # Find z-index crimes
  zarbiter config                # Show effective configuration

Example CSS:
  .modal {{ z-index: {example}; }}
"""


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the zarbiter CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    if not argv:
        print(usage_text())
        return 0

    parser = build_parser()
    args = parser.parse_args(route_shorthand(argv))

    func: Callable[[argparse.Namespace], int] | None = getattr(args, "_func", None)
    if func is None:
        parser.print_help()
        return 1

    try:
        return func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
