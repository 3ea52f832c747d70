"""
zarbiter resolve command.

SUMMARY: Resolve a layer name to a z-index value

Also reachable as ``zarbiter <layer> [offset]``: any first argument that is
not a command name is routed here by the dispatcher.
"""

from __future__ import annotations

import argparse
import sys

from zarbiter.cli import OutputFormatter, add_standard_flags, build_context
from zarbiter.core.exceptions import ZArbiterError

SUMMARY = "Resolve a layer name to a z-index value"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("layer", help="Layer name (e.g. modal, tooltip, or any custom name)")
    parser.add_argument(
        "offset",
        nargs="?",
        type=int,
        default=0,
        help="Integer added to the layer's base value (default: 0)",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        ctx = build_context(args)
    except ZArbiterError as e:
        formatter.error(e, error_code="config_error")
        return 1

    offset = args.offset or 0
    value = ctx.registry.resolve(args.layer, offset)

    if formatter.json_mode:
        formatter.json_output(
            {
                "layer": args.layer,
                "offset": offset,
                "value": value,
                "custom": ctx.registry.is_custom(args.layer),
            }
        )
    else:
        formatter.text(str(value))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
