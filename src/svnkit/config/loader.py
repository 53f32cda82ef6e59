"""Load and merge configuration from .svnkit.toml and env vars."""

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

from svnkit.config.schema import (
    ContextConfig,
    LogConfig,
    OutputConfig,
    ProxyConfig,
    SvnConfig,
    SvnKitConfig,
)

CONFIG_FILENAME = ".svnkit.toml"

_FALSE_VALUES = ("0", "false", "no", "off")


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(start_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = start_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _env_int(name: str) -> Optional[int]:
    val = os.environ.get(name)
    if not val:
        return None
    try:
        return int(val)
    except ValueError:
        return None


def _merge_env_overrides(cfg: SvnKitConfig) -> None:
    """Apply SVNKIT_* environment variable overrides."""
    if val := os.environ.get("SVNKIT_BINARY"):
        cfg.svn.binary = val
    if (timeout := _env_int("SVNKIT_TIMEOUT")) is not None and timeout >= 0:
        cfg.context.connection_timeout = timeout
    if val := os.environ.get("SVNKIT_SSL_VERIFY"):
        cfg.context.ssl_verify = val.strip().lower() not in _FALSE_VALUES
    if (limit := _env_int("SVNKIT_LOG_LIMIT")) is not None and limit > 0:
        cfg.log.limit = limit
    if val := os.environ.get("SVNKIT_USERNAME"):
        cfg.context.username = val
    if val := os.environ.get("SVNKIT_PASSWORD"):
        cfg.context.password = val


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def load_config(
    start_dir: Optional[Path] = None,
    config_override: Optional[str] = None,
) -> SvnKitConfig:
    """Load, validate, and return an SvnKitConfig."""
    config_path = find_config_file(start_dir or Path.cwd(), config_override)

    if config_path is None:
        cfg = SvnKitConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = SvnKitConfig(
            version=str(raw.get("version", "1.0")),
            svn=_build_section(raw, SvnConfig, "svn"),
            context=_build_section(raw, ContextConfig, "context"),
            proxy=_build_section(raw, ProxyConfig, "proxy"),
            log=_build_section(raw, LogConfig, "log"),
            output=_build_section(raw, OutputConfig, "output"),
        )

    _merge_env_overrides(cfg)
    return cfg
