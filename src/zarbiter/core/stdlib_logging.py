from __future__ import annotations

import logging
import sys
from pathlib import Path

_CONFIGURED_KEY: tuple[str, str, bool] | None = None
_INSTALLED_HANDLERS: list[logging.Handler] = []
_JSON_MODE_NULL_HANDLER_INSTALLED: bool = False

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(*, level: str = "WARNING", log_path: Path | None = None, verbose: bool = False) -> None:
    """Configure stdlib logging for one CLI invocation.

    - ``log_path`` installs a file handler.
    - ``verbose`` installs a stderr handler and forces DEBUG.

    Idempotent per-process: reconfiguring with the same arguments is a no-op,
    different arguments replace the handlers installed here earlier.
    """
    global _CONFIGURED_KEY

    effective = "DEBUG" if verbose else level
    resolved = str(Path(log_path).resolve()) if log_path is not None else ""
    key = (effective.upper(), resolved, verbose)
    if _CONFIGURED_KEY == key:
        return

    _remove_installed_handlers()

    root = logging.getLogger()
    root.setLevel(_level_from_name(effective))
    fmt = logging.Formatter(LOG_FORMAT)

    if resolved:
        Path(resolved).parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(resolved, encoding="utf-8")
        fh.setFormatter(fmt)
        root.addHandler(fh)
        _INSTALLED_HANDLERS.append(fh)

    if verbose:
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(fmt)
        root.addHandler(sh)
        _INSTALLED_HANDLERS.append(sh)

    _CONFIGURED_KEY = key


def _remove_installed_handlers() -> None:
    root = logging.getLogger()
    while _INSTALLED_HANDLERS:
        handler = _INSTALLED_HANDLERS.pop()
        root.removeHandler(handler)
        handler.close()


def reset_logging_for_tests() -> None:
    """Test-only: drop handlers installed by configure_logging()."""
    global _CONFIGURED_KEY, _JSON_MODE_NULL_HANDLER_INSTALLED
    _remove_installed_handlers()
    logging.getLogger().setLevel(logging.WARNING)
    _CONFIGURED_KEY = None
    _JSON_MODE_NULL_HANDLER_INSTALLED = False


def suppress_lastresort_in_json_mode() -> None:
    """Prevent stdlib logging's lastResort handler from polluting JSON output.

    With no handlers configured, WARNING+ records go to stderr through the
    implicit ``lastResort`` handler. A NullHandler on the root logger keeps
    ``--json`` invocations quiet without changing any logger level.
    """
    global _JSON_MODE_NULL_HANDLER_INSTALLED

    root = logging.getLogger()
    if root.handlers or _JSON_MODE_NULL_HANDLER_INSTALLED:
        return
    root.addHandler(logging.NullHandler())
    _JSON_MODE_NULL_HANDLER_INSTALLED = True


__all__ = ["configure_logging", "reset_logging_for_tests", "suppress_lastresort_in_json_mode"]
