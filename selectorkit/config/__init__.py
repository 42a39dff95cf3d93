"""
Configuration for selectorkit.

Options are pydantic models. They are filled from, in rising precedence,
defaults, an optional built-in profile, an optional JSON/YAML/TOML file,
SELECTORKIT_* environment variables and programmatic overrides:

    from selectorkit.config import load_config

    config = load_config("selectorkit.yaml", profile="lenient")

Environment variables:
    SELECTORKIT_BUILDER_STRICT_COMBINATORS=false
    SELECTORKIT_BUILDER_COMBINATORS=" ,+,~,>,||"
    SELECTORKIT_LOGGING_LEVEL=debug
"""

from selectorkit.exceptions import ConfigurationError

from .defaults import ENV_PREFIX, LOGGER_NAME, get_default_builder_config
from .options import BuilderOptions, LoggingOptions, LogLevel, SelectorKitConfig
from .sources import (
    ENV_MAPPINGS,
    PROFILES,
    load_config,
    load_config_with_profile,
    load_env_config,
    load_file,
    load_profile,
    merge_configs,
)

__all__ = [
    "BuilderOptions",
    "ConfigurationError",
    "ENV_MAPPINGS",
    "ENV_PREFIX",
    "LOGGER_NAME",
    "LoggingOptions",
    "LogLevel",
    "PROFILES",
    "SelectorKitConfig",
    "get_default_builder_config",
    "load_config",
    "load_config_with_profile",
    "load_env_config",
    "load_file",
    "load_profile",
    "merge_configs",
]
