"""
Configuration — loads settings from .code_evolve.yaml, environment variables,
and built-in defaults (in that priority order: CLI args > env > YAML > defaults).
"""

import os

import yaml


_DEFAULTS = {
    "model": "gemini-2.5-flash-preview-04-17",
    "assistant_name": "AlphaEvolve",
    "fuzzy_match": True,
    "show_diff": True,
    "log_dir": ".code_evolve/logs",
    "max_file_size": 32_000,
}

# Config file search locations
_CONFIG_FILENAMES = [".code_evolve.yaml", ".code_evolve.yml"]


def _find_config_file(explicit_path: str | None = None) -> str | None:
    """Find the config file. Checks explicit path, CWD, then user home."""
    if explicit_path:
        if os.path.isfile(explicit_path):
            return explicit_path
        return None

    search_dirs = [os.getcwd(), os.path.expanduser("~")]
    for d in search_dirs:
        for name in _CONFIG_FILENAMES:
            path = os.path.join(d, name)
            if os.path.isfile(path):
                return path
    return None


def _load_yaml(path: str) -> dict:
    """Load YAML file, returns empty dict on failure."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if isinstance(data, dict) else {}
    except (OSError, yaml.YAMLError):
        return {}


class Config:
    """Application configuration.

    Settings are resolved in priority order:
    1. CLI arguments (handled by caller)
    2. Environment variables
    3. .code_evolve.yaml config file
    4. Built-in defaults
    """

    def __init__(self, yaml_data: dict | None = None):
        yd = yaml_data or {}

        # Helper: env var > yaml > default
        def _get(env_key: str, yaml_key: str, default, cast=str):
            env_val = os.getenv(env_key)
            if env_val is not None:
                return cast(env_val)
            yaml_val = yd.get(yaml_key)
            if yaml_val is not None:
                return cast(yaml_val)
            return default

        def _get_bool(env_key: str, yaml_key: str, default: bool) -> bool:
            env_val = os.getenv(env_key)
            if env_val is not None:
                return env_val.lower() == "true"
            yaml_val = yd.get(yaml_key)
            if yaml_val is not None:
                return bool(yaml_val)
            return default

        self.DEFAULT_MODEL = _get("DEFAULT_MODEL", "model", _DEFAULTS["model"])
        self.ASSISTANT_NAME = _get("ASSISTANT_NAME", "assistant_name",
                                   _DEFAULTS["assistant_name"])

        self.FUZZY_MATCH = _get_bool("FUZZY_MATCH", "fuzzy_match",
                                     _DEFAULTS["fuzzy_match"])
        self.SHOW_DIFF = _get_bool("SHOW_DIFF", "show_diff",
                                   _DEFAULTS["show_diff"])

        self.LOG_DIR = _get("LOG_DIR", "log_dir", _DEFAULTS["log_dir"])
        self.MAX_FILE_SIZE = _get("MAX_FILE_SIZE", "max_file_size",
                                  _DEFAULTS["max_file_size"], cast=int)

    @classmethod
    def load(cls, config_path: str | None = None) -> "Config":
        """Load config from YAML file (if found) + env vars + defaults."""
        path = _find_config_file(config_path)
        yaml_data = _load_yaml(path) if path else {}
        return cls(yaml_data)
