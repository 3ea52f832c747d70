"""
zarbiter configuration management (YAML-only).
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from zarbiter.core.exceptions import ConfigError
from zarbiter.core.utils.merge import deep_merge as _deep_merge
from zarbiter.data import get_data_path, read_yaml as read_bundled_yaml

logger = logging.getLogger(__name__)

try:
    import yaml  # type: ignore
except Exception as err:  # pragma: no cover - surfaced at import time
    raise RuntimeError("PyYAML is required: pip install pyyaml") from err

try:
    from jsonschema import Draft202012Validator  # type: ignore
except Exception as err:  # pragma: no cover - surfaced at import time
    raise RuntimeError("jsonschema is required: pip install jsonschema") from err


PROJECT_CONFIG_FILENAME = ".zarbiter.yaml"
SCHEMA_FILENAME = "config.schema.yaml"


class ConfigManager:
    """Load, merge, and validate zarbiter configuration.

    Configuration sources (highest to lowest priority):
    1. Explicit file passed as ``config_path`` (``--config``)
    2. Project file: <repo-root>/.zarbiter.yaml
    3. Bundled defaults: zarbiter.data/config/defaults.yaml

    The merged result is validated against the bundled JSON schema
    (expressed in YAML) plus a few cross-key checks.
    """

    def __init__(self, repo_root: Optional[Path] = None, *, config_path: Optional[Path] = None) -> None:
        self.repo_root = Path(repo_root) if repo_root is not None else Path.cwd()
        self.config_path = Path(config_path).expanduser() if config_path is not None else None

        self.defaults_path = get_data_path("config", "defaults.yaml")
        self.project_config_path = self.repo_root / PROJECT_CONFIG_FILENAME

        self._cache: Optional[Dict[str, Any]] = None

    def deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge dictionaries. Delegates to shared implementation."""
        return _deep_merge(base, override)

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        """Read a YAML mapping; invalid YAML or a non-mapping document is an error."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as exc:
            raise ConfigError(
                f"Cannot read config file {path}: {exc}", context={"path": str(path)}
            ) from exc
        except yaml.YAMLError as exc:
            raise ConfigError(
                f"Invalid YAML in {path}: {exc}", context={"path": str(path)}
            ) from exc

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file {path} must contain a mapping, got {type(data).__name__}",
                context={"path": str(path)},
            )
        return data

    def iter_sources(self) -> List[Path]:
        """Return the config files that will be merged, lowest priority first."""
        sources = [self.defaults_path]
        if self.project_config_path.is_file():
            sources.append(self.project_config_path)
        if self.config_path is not None:
            if not self.config_path.is_file():
                raise ConfigError(
                    f"Config file not found: {self.config_path}",
                    context={"path": str(self.config_path)},
                )
            sources.append(self.config_path)
        return sources

    def validate_schema(self, config: Dict[str, Any]) -> None:
        """Validate merged config against the bundled schema.

        Raises:
            ConfigError: listing every violation found
        """
        schema = read_bundled_yaml("schemas", SCHEMA_FILENAME)
        validator = Draft202012Validator(schema)
        errors = sorted(validator.iter_errors(config), key=lambda e: list(e.path))
        messages: List[str] = []
        for error in errors:
            where = ".".join(str(p) for p in error.path) or "<root>"
            messages.append(f"{where}: {error.message}")

        scan = config.get("scan") or {}
        warning = scan.get("warning_threshold")
        severe = scan.get("severe_threshold")
        if isinstance(warning, int) and isinstance(severe, int) and severe < warning:
            messages.append(
                f"scan: severe_threshold ({severe}) must be >= warning_threshold ({warning})"
            )

        if messages:
            raise ConfigError(
                "Invalid configuration:\n" + "\n".join(f"- {m}" for m in messages),
                context={"errors": messages},
            )

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Load and merge configuration from all sources.

        The result is cached on the instance and should be treated as immutable.
        """
        if self._cache is not None:
            return self._cache

        cfg: Dict[str, Any] = {}
        for source in self.iter_sources():
            logger.debug("Loading config layer %s", source)
            cfg = self.deep_merge(cfg, self.load_yaml(source))

        if validate:
            self.validate_schema(cfg)

        self._cache = cfg
        return cfg

    def get_all(self) -> Dict[str, Any]:
        """Get full merged configuration."""
        return self.load_config()

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value by dot-notation key.

        Example:
            >>> manager.get('scan.warning_threshold')
            1000
            >>> manager.get('nonexistent.key', 'fallback')
            'fallback'
        """
        current: Any = self.load_config()
        for part in key.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current


__all__ = ["ConfigManager", "PROJECT_CONFIG_FILENAME"]
