"""
zarbiter layers command.

SUMMARY: Show the predefined layers
"""

from __future__ import annotations

import argparse
import sys

from zarbiter.cli import OutputFormatter, add_standard_flags, build_context
from zarbiter.core.exceptions import ZArbiterError

SUMMARY = "Show the predefined layers"

NAME_WIDTH = 15


def register_args(parser: argparse.ArgumentParser) -> None:
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        ctx = build_context(args)
    except ZArbiterError as e:
        formatter.error(e, error_code="config_error")
        return 1

    layers = ctx.registry.list_layers()

    if formatter.json_mode:
        formatter.json_output([{"name": name, "value": value} for name, value in layers])
        return 0

    formatter.text("\n🎨 Available Z-Index Layers:\n")
    for name, value in layers:
        formatter.text(f"{name.ljust(NAME_WIDTH)} → {value}")
    formatter.text(f"\nUsage: zarbiter modal    # returns {ctx.registry.resolve('modal')}")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
