from __future__ import annotations

from pathlib import Path

import pytest

from zarbiter.core.config import AllocationConfig, ConfigManager, LoggingConfig, ScanConfig
from zarbiter.core.exceptions import ConfigError
from zarbiter.core.layers import LayerRegistry


def test_bundled_defaults(isolated_project_env: Path) -> None:
    cfg = ConfigManager(isolated_project_env).load_config()
    assert cfg["allocation"] == {"strategy": "sequential", "step": 100}
    assert cfg["scan"] == {"warning_threshold": 1000, "severe_threshold": 9999}
    assert cfg["logging"]["level"] == "WARNING"


def test_project_file_overrides_defaults(isolated_project_env: Path, write_project_config) -> None:
    write_project_config("scan:\n  warning_threshold: 500\n")
    manager = ConfigManager(isolated_project_env)
    assert manager.get("scan.warning_threshold") == 500
    assert manager.get("scan.severe_threshold") == 9999


def test_explicit_config_wins_over_project_file(isolated_project_env: Path, write_project_config) -> None:
    write_project_config("allocation:\n  strategy: shared\n  step: 50\n")
    extra = isolated_project_env / "ci.yaml"
    extra.write_text("allocation:\n  step: 10\n", encoding="utf-8")

    alloc = AllocationConfig(manager=ConfigManager(isolated_project_env, config_path=extra))
    assert alloc.strategy == "shared"
    assert alloc.step == 10


def test_missing_explicit_config_is_an_error(isolated_project_env: Path) -> None:
    manager = ConfigManager(isolated_project_env, config_path=isolated_project_env / "missing.yaml")
    with pytest.raises(ConfigError, match="Config file not found"):
        manager.load_config()


def test_invalid_yaml_is_an_error(isolated_project_env: Path, write_project_config) -> None:
    write_project_config("scan: [unterminated\n")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        ConfigManager(isolated_project_env).load_config()


def test_non_mapping_document_is_an_error(isolated_project_env: Path, write_project_config) -> None:
    write_project_config("- just\n- a list\n")
    with pytest.raises(ConfigError, match="must contain a mapping"):
        ConfigManager(isolated_project_env).load_config()


def test_empty_project_file_is_ignored(isolated_project_env: Path, write_project_config) -> None:
    write_project_config("")
    assert ConfigManager(isolated_project_env).get("allocation.step") == 100


@pytest.mark.parametrize(
    "content",
    [
        "allocation:\n  step: 0\n",
        "allocation:\n  strategy: random\n",
        "scan:\n  warning_threshold: high\n",
        "logging:\n  level: LOUD\n",
        "unknown_section: {}\n",
    ],
)
def test_schema_violations_raise(isolated_project_env: Path, write_project_config, content: str) -> None:
    write_project_config(content)
    with pytest.raises(ConfigError) as excinfo:
        ConfigManager(isolated_project_env).load_config()
    assert excinfo.value.context["errors"]


def test_severe_threshold_below_warning_is_rejected(isolated_project_env: Path, write_project_config) -> None:
    write_project_config("scan:\n  warning_threshold: 5000\n  severe_threshold: 100\n")
    with pytest.raises(ConfigError, match="severe_threshold"):
        ConfigManager(isolated_project_env).load_config()


def test_get_missing_key_returns_default(isolated_project_env: Path) -> None:
    assert ConfigManager(isolated_project_env).get("scan.nope", "fallback") == "fallback"


def test_domain_accessors(isolated_project_env: Path, write_project_config) -> None:
    write_project_config(
        "scan:\n  warning_threshold: 10\n  severe_threshold: 20\n"
        "logging:\n  level: DEBUG\n  path: logs/zarbiter.log\n"
    )
    manager = ConfigManager(isolated_project_env)

    scan_cfg = ScanConfig(manager=manager)
    assert (scan_cfg.warning_threshold, scan_cfg.severe_threshold) == (10, 20)

    log_cfg = LoggingConfig(manager=manager)
    assert log_cfg.level == "DEBUG"
    assert log_cfg.resolve_log_path() == (isolated_project_env / "logs" / "zarbiter.log").resolve()


def test_logging_path_empty_means_no_file(isolated_project_env: Path) -> None:
    assert LoggingConfig(isolated_project_env).resolve_log_path() is None


def test_registry_from_config(isolated_project_env: Path, write_project_config) -> None:
    write_project_config("allocation:\n  strategy: shared\n")
    registry = LayerRegistry.from_config(AllocationConfig(isolated_project_env))
    assert registry.resolve("a") == registry.resolve("b") == 10099
