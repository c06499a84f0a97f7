import os
import yaml

from logpattern import config as app_config
from logpattern.logging_config import setup_logging

# config attribute -> (yaml key, env var, type)
CONFIG_KEYS = {
    "WILDCARD": ("wildcard", "LOGPATTERN_WILDCARD", str),
    "SORT_VARIABLE_VALUES": ("sort_values", "LOGPATTERN_SORT_VALUES", bool),
    "ENABLE_COLOR": ("color", "LOGPATTERN_COLOR", bool),
    "HIGHLIGHT_COLOR": ("highlight_color", "LOGPATTERN_HIGHLIGHT_COLOR", str),
    "LOG_LEVEL": ("log_level", "LOGPATTERN_LOG_LEVEL", str),
    "LOG_FILE": ("log_file", "LOGPATTERN_LOG_FILE", str),
}

_TRUE_VALUES = {"1", "true", "yes", "on"}


def load_yaml_config(file_path):
    if not file_path or not os.path.exists(file_path):
        return {}
    with open(file_path, "r") as f:
        return yaml.safe_load(f) or {}


def get_config_value(cli_value, yaml_value, env_var, default=None):
    """
    Resolve config value in priority order:
    explicit arg → YAML config → ENV → default
    """
    if cli_value is not None:
        return cli_value
    if yaml_value is not None:
        return yaml_value
    if env_var and os.getenv(env_var) is not None:
        return os.getenv(env_var)
    return default


def _coerce(value, kind):
    if kind is bool and isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return kind(value) if value is not None else None


def apply_config(config_file=None, **overrides):
    """
    Load an optional YAML file and write the resolved settings into
    ``logpattern.config``. Keyword overrides use the YAML key names
    (``wildcard``, ``sort_values``, ``color`` ...).

    Returns the loaded YAML mapping.
    """
    yaml_config = load_yaml_config(config_file)

    resolved = {}
    for attr, (key, env_var, kind) in CONFIG_KEYS.items():
        value = get_config_value(
            overrides.get(key), yaml_config.get(key), env_var, getattr(app_config, attr)
        )
        resolved[attr] = _coerce(value, kind)

    if not resolved["WILDCARD"]:
        raise ValueError("wildcard marker must be a non-empty string")

    app_config.YAML_CONFIG = yaml_config
    for attr, value in resolved.items():
        setattr(app_config, attr, value)

    setup_logging(app_config.LOG_LEVEL, app_config.LOG_FILE)
    return yaml_config
