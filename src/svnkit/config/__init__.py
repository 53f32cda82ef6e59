"""Configuration loading, schema, and defaults."""

from svnkit.config.loader import ConfigError, load_config
from svnkit.config.schema import SvnKitConfig

__all__ = [
    "ConfigError",
    "SvnKitConfig",
    "load_config",
]
