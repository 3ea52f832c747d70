"""
zarbiter config command.

SUMMARY: Show the effective configuration

Displays the merged configuration from bundled defaults, the project
.zarbiter.yaml, and an optional --config file.
"""

from __future__ import annotations

import argparse
import sys

import yaml

from zarbiter.cli import OutputFormatter, add_standard_flags, build_context, format_json
from zarbiter.core.exceptions import ZArbiterError

SUMMARY = "Show the effective configuration"


def _nest_key(key: str, value):
    """Nest a dot-notation key into a YAML/JSON-friendly mapping."""
    parts = [p for p in str(key).split(".") if p]
    out = value
    for part in reversed(parts):
        out = {part: out}
    return out


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "key",
        nargs="?",
        help="Specific configuration key to show (e.g., 'scan.warning_threshold')",
    )
    parser.add_argument(
        "--format",
        choices=["json", "yaml"],
        default="yaml",
        help="Output format (default: yaml)",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    """Show configuration - delegates to ConfigManager."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        ctx = build_context(args)
    except ZArbiterError as e:
        formatter.error(e, error_code="config_error")
        return 1

    output_format = "json" if formatter.json_mode else args.format

    if args.key:
        value = ctx.config.get(args.key)
        if value is None:
            formatter.error(KeyError(args.key), f"Key not found: {args.key}", error_code="config_key_missing")
            return 1
        data = _nest_key(args.key, value)
    else:
        data = ctx.config.get_all()

    if output_format == "json":
        print(format_json(data))
    else:
        print(
            yaml.safe_dump(
                data,
                default_flow_style=False,
                sort_keys=True,
                allow_unicode=True,
            ).rstrip()
        )
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
