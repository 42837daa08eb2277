"""Configuration loading for vuepact (.vuepact.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".vuepact.yml"
DEFAULT_MANIFEST = "vuepact.manifest.json"
DEFAULT_EXCERPT_LENGTH = 80


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class RulesConfig:
    """Diagnostic rule enablement."""

    enabled: Optional[List[str]] = None
    disabled: List[str] = field(default_factory=list)


@dataclass
class OutputConfig:
    """Where scan results are written."""

    manifest: str = DEFAULT_MANIFEST
    report: Optional[str] = None


@dataclass
class VuePactConfig:
    """Represents the settings defined in .vuepact.yml."""

    root: Path
    exclude_paths: List[str] = field(default_factory=list)
    rules: RulesConfig = field(default_factory=RulesConfig)
    excerpt_length: int = DEFAULT_EXCERPT_LENGTH
    jobs: int = 1
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(config_path: Path) -> VuePactConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return VuePactConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    rules = RulesConfig()
    rules_data = _as_dict(data.get("rules"))
    if rules_data:
        if rules_data.get("enabled") is not None:
            rules.enabled = _as_str_list(rules_data.get("enabled"))
        rules.disabled = _as_str_list(rules_data.get("disabled"))

    output = OutputConfig()
    output_data = _as_dict(data.get("output"))
    if output_data:
        output.manifest = _as_str(output_data.get("manifest")) or DEFAULT_MANIFEST
        output.report = _as_str(output_data.get("report"))

    excerpt_length = _as_int(data.get("excerpt_length"))
    if excerpt_length is None or excerpt_length <= 0:
        excerpt_length = DEFAULT_EXCERPT_LENGTH

    jobs = _as_int(data.get("jobs"))
    if jobs is None or jobs < 1:
        jobs = 1

    return VuePactConfig(
        root=root,
        exclude_paths=_as_str_list(data.get("exclude_paths")),
        rules=rules,
        excerpt_length=excerpt_length,
        jobs=jobs,
        output=output,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "OutputConfig",
    "RulesConfig",
    "VuePactConfig",
    "load_config",
]
