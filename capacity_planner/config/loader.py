"""
YAML configuration loader for the capacity planner.

Loads configuration from YAML files with environment variable substitution.
"""

import os
import re
from pathlib import Path
from typing import Any

import structlog
import yaml

from capacity_planner.config.models import PlannerConfig

logger = structlog.get_logger()

DEFAULT_CONFIG_PATHS = (
    Path("config/planner.yaml"),
    Path("planner.yaml"),
    Path.home() / ".capacity_planner" / "planner.yaml",
)


# ${NAME} or ${NAME:-fallback}
_ENV_REFERENCE = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


def _expand_env(match: re.Match) -> str:
    name, fallback = match.group(1), match.group(2)
    return os.environ.get(name, fallback or "")


def _substitute_env_vars(value: Any) -> Any:
    """
    Expand environment references in every string of a parsed YAML tree.

    ``region: ${CAPACITY_PLANNER_REGION:-US}`` reads the variable and uses
    ``US`` when it is unset. An unset reference without a fallback becomes
    an empty string. Non-string scalars pass through unchanged.
    """
    if isinstance(value, str):
        return _ENV_REFERENCE.sub(_expand_env, value)
    if isinstance(value, dict):
        return {key: _substitute_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_substitute_env_vars(item) for item in value]
    return value


def load_yaml(path: Path) -> dict[str, Any]:
    """
    Read a planner YAML file with environment references expanded.

    An empty file yields an empty mapping, so every section falls back to
    its defaults.

    Raises:
        FileNotFoundError: If ``path`` does not exist
        yaml.YAMLError: If the file is not valid YAML
    """
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    raw_config = yaml.safe_load(path.read_text()) or {}
    logger.debug("config_file_loaded", path=str(path), sections=sorted(raw_config))
    return _substitute_env_vars(raw_config)


def load_config(
    config_path: str | Path | None = None,
    override_values: dict[str, Any] | None = None,
) -> PlannerConfig:
    """
    Load planner configuration from a YAML file.

    Args:
        config_path: Path to configuration YAML file. If None, looks in the
                    default locations and falls back to built-in defaults
                    when none exists.
        override_values: Dictionary of values to override after loading

    Returns:
        Validated PlannerConfig object

    Raises:
        FileNotFoundError: If an explicit configuration file is not found
        ValidationError: If configuration is invalid
    """
    if config_path is None:
        config_path = next((p for p in DEFAULT_CONFIG_PATHS if p.exists()), None)

    if config_path is None:
        logger.debug(
            "config_defaults_used",
            searched=[str(p) for p in DEFAULT_CONFIG_PATHS],
        )
        config_dict: dict[str, Any] = {}
    else:
        config_dict = load_yaml(Path(config_path))

    if override_values:
        config_dict = _deep_merge(config_dict, override_values)

    return PlannerConfig(**config_dict)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Merge override values into a configuration mapping.

    Sections present on both sides are merged key by key, so
    ``{"leave": {"per_cycle_days": 8}}`` changes one leave setting and keeps
    the rest of the file's ``leave`` section. Any other value replaces the
    base value outright. Neither input is modified.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = _deep_merge(current, value)
        merged[key] = value
    return merged
