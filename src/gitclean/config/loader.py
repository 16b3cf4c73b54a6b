"""Load and merge configuration from .gitclean.toml / .gitclean.yml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import yaml

from gitclean.config.schema import (
    IGNORE_CATEGORIES,
    OUTPUT_FORMATS,
    CheckConfig,
    GitCleanConfig,
    GitConfig,
    OutputConfig,
)

CONFIG_FILENAMES = (".gitclean.toml", ".gitclean.yml", ".gitclean.yaml")


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    for name in CONFIG_FILENAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def _parse_file(path: Path) -> Dict[str, Any]:
    try:
        if path.suffix in (".yaml", ".yml"):
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        else:
            with open(path, "rb") as f:
                data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Failed to parse {path}: top level must be a table")
    return data


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a config section dict, ignoring unknown keys."""
    raw = data.get(section) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _merge_env_overrides(cfg: GitCleanConfig) -> None:
    """Apply GITCLEAN_* environment variable overrides."""
    if val := os.environ.get("GITCLEAN_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("GITCLEAN_TIMEOUT"):
        try:
            cfg.git.timeout = int(val)
        except ValueError:
            pass
    if val := os.environ.get("GITCLEAN_IGNORE"):
        for category in (c.strip().lower() for c in val.split(",")):
            if category in IGNORE_CATEGORIES:
                setattr(cfg.check, IGNORE_CATEGORIES[category], True)


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> GitCleanConfig:
    """Load, validate, and return a GitCleanConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = GitCleanConfig()
    else:
        raw = _parse_file(config_path)
        cfg = GitCleanConfig(
            version=str(raw.get("version", "1.0")),
            check=_build_section(raw, CheckConfig, "check"),
            output=_build_section(raw, OutputConfig, "output"),
            git=_build_section(raw, GitConfig, "git"),
        )
        if cfg.output.format not in OUTPUT_FORMATS:
            raise ConfigError(f"Invalid output format in {config_path}: {cfg.output.format}")

    _merge_env_overrides(cfg)
    return cfg
