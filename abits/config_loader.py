# config_loader.py
import copy
import os

import yaml

from .errors import ConfigError

CONFIG_ENV_VAR = "ABITS_CONFIG"
DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.yaml")

DEFAULT_CONFIG = {
    "codec": {"default_method": "base64"},
    "logging": {"level": "WARNING"},
}


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path=None) -> dict:
    """
    Loads the YAML configuration, filling missing keys with defaults.

    Parameters:
    config_path (str, optional): Path to a YAML file. Defaults to $ABITS_CONFIG,
    then the packaged config.yaml.

    Returns:
    dict: The merged configuration.
    """
    if config_path is None:
        config_path = os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)
    if not os.path.isfile(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigError(f"Config root must be a mapping: {config_path}")
    for section in DEFAULT_CONFIG:
        if section in config and not isinstance(config[section], dict):
            raise ConfigError(f"Config section '{section}' must be a mapping")
    return _merge(DEFAULT_CONFIG, config)
