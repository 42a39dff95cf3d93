"""
Where selectorkit configuration comes from.

Layers, lowest to highest precedence:

    defaults < profile < file < environment < overrides

Each layer is a plain nested dictionary; only the final merge is validated
by SelectorKitConfig.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Optional, Union

from selectorkit.exceptions import ConfigurationError

from .defaults import ENV_PREFIX
from .options import SelectorKitConfig

logger = logging.getLogger(__name__)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _parse_flag(name: str, raw: str) -> bool:
    token = raw.strip().lower()
    if token in _TRUE:
        return True
    if token in _FALSE:
        return False
    raise ConfigurationError(
        f"{name} must be one of {sorted(_TRUE | _FALSE)}, got {raw!r}"
    )


def _parse_tokens(name: str, raw: str) -> list[str]:
    # No stripping: " " is the descendant combinator
    return [token for token in raw.split(",") if token]


def _parse_text(name: str, raw: str) -> str:
    return raw


# Environment variable -> (section, option, parser)
ENV_MAPPINGS: dict[str, tuple[str, str, Callable[[str, str], Any]]] = {
    f"{ENV_PREFIX}BUILDER_STRICT_COMBINATORS": ("builder", "strict_combinators", _parse_flag),
    f"{ENV_PREFIX}BUILDER_COMBINATORS": ("builder", "combinators", _parse_tokens),
    f"{ENV_PREFIX}LOGGING_LEVEL": ("logging", "level", _parse_text),
    f"{ENV_PREFIX}LOGGING_FORMAT": ("logging", "format", _parse_text),
    f"{ENV_PREFIX}LOGGING_ENABLE_HANDLER": ("logging", "enable_handler", _parse_flag),
}


def load_env_config() -> dict[str, Any]:
    """Collect the SELECTORKIT_* variables that are set.

    Raises:
        ConfigurationError: If a flag variable holds an unrecognized value.
    """
    result: dict[str, Any] = {}
    for name, (section, option, parse) in ENV_MAPPINGS.items():
        raw = os.environ.get(name)
        if raw is not None:
            result.setdefault(section, {})[option] = parse(name, raw)
    return result


def _read_json(handle) -> Any:
    return json.load(handle)


def _read_yaml(handle) -> Any:
    import yaml

    return yaml.safe_load(handle)


def _read_toml(handle) -> Any:
    try:
        import tomllib
    except ImportError:  # Python < 3.11
        import tomli as tomllib

    return tomllib.load(handle)


# suffix -> (open mode, reader)
_READERS: dict[str, tuple[str, Callable[[Any], Any]]] = {
    ".json": ("r", _read_json),
    ".yaml": ("r", _read_yaml),
    ".yml": ("r", _read_yaml),
    ".toml": ("rb", _read_toml),
}


def load_file(path: Union[str, Path]) -> dict[str, Any]:
    """Read a JSON, YAML or TOML configuration file.

    Raises:
        ConfigurationError: If the file is missing, has an unknown suffix,
            or does not hold a mapping.
    """
    path = Path(path)
    if path.suffix.lower() not in _READERS:
        raise ConfigurationError(
            f"Unsupported configuration format {path.suffix!r}; "
            f"use one of {', '.join(sorted(_READERS))}"
        )
    if not path.is_file():
        raise ConfigurationError(f"Configuration file not found: {path}")

    mode, read = _READERS[path.suffix.lower()]
    encoding = None if "b" in mode else "utf-8"
    with open(path, mode, encoding=encoding) as handle:
        data = read(handle)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"{path} must contain a mapping, not {type(data).__name__}"
        )
    logger.debug(f"Loaded configuration from {path}")
    return data


def merge_configs(*layers: dict[str, Any]) -> dict[str, Any]:
    """Merge nested dictionaries; later layers win, inputs are not modified."""
    merged: dict[str, Any] = {}
    for layer in layers:
        for key, value in layer.items():
            current = merged.get(key)
            if isinstance(value, dict):
                base = current if isinstance(current, dict) else {}
                merged[key] = merge_configs(base, value)
            else:
                merged[key] = value
    return merged


PROFILES: dict[str, dict[str, Any]] = {
    "strict": {"builder": {"strict_combinators": True}},
    "lenient": {"builder": {"strict_combinators": False}},
    "debug": {"logging": {"level": "DEBUG", "enable_handler": True}},
}


def load_profile(name: str) -> dict[str, Any]:
    """Return a copy of a built-in profile.

    Raises:
        ConfigurationError: If no profile has that name.
    """
    try:
        return merge_configs(PROFILES[name])
    except KeyError:
        raise ConfigurationError(
            f"Unknown profile {name!r}; available: {', '.join(PROFILES)}"
        ) from None


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[dict[str, Any]] = None,
    load_env: bool = True,
    profile: Optional[str] = None,
) -> SelectorKitConfig:
    """Build a validated configuration from every layer.

    Args:
        config_file: Optional JSON, YAML or TOML file.
        overrides: Values that win over everything else.
        load_env: Whether to read SELECTORKIT_* variables.
        profile: Optional built-in profile applied just above the defaults.

    Returns:
        Merged configuration.
    """
    layers: list[dict[str, Any]] = []
    if profile is not None:
        layers.append(load_profile(profile))
        layers.append({"profile": profile})
    if config_file is not None:
        layers.append(load_file(config_file))
    if load_env:
        layers.append(load_env_config())
    if overrides:
        layers.append(overrides)

    return SelectorKitConfig.from_dict(merge_configs(*layers))


def load_config_with_profile(
    profile: str,
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[dict[str, Any]] = None,
) -> SelectorKitConfig:
    """Shortcut for ``load_config(..., profile=profile)``."""
    return load_config(config_file, overrides=overrides, profile=profile)
