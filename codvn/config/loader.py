# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

import logging
import os
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)


def get_str_env(name: str, default: str = "") -> str:
    val = os.getenv(name)
    return default if val is None else str(val).strip()


def get_int_env(name: str, default: int = 0) -> int:
    val = os.getenv(name)
    if val is None:
        return default
    try:
        return int(val.strip())
    except ValueError:
        logger.warning(f"Invalid integer value for {name}: {val!r}, using default {default}")
        return default


def replace_env_vars(value: Any) -> Any:
    """Replace ``$NAME`` string values with the environment variable NAME."""
    if not isinstance(value, str):
        return value
    if value.startswith("$"):
        env_var = value[1:]
        return os.getenv(env_var, env_var)
    return value


def process_dict(config: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively substitute environment variables in config values."""
    if not config:
        return {}
    result = {}
    for key, value in config.items():
        if isinstance(value, dict):
            result[key] = process_dict(value)
        elif isinstance(value, list):
            result[key] = [process_dict(v) if isinstance(v, dict) else replace_env_vars(v) for v in value]
        else:
            result[key] = replace_env_vars(value)
    return result


_config_cache: Dict[str, Dict[str, Any]] = {}


def load_yaml_config(file_path: str) -> Dict[str, Any]:
    """Load and process a YAML config file; a missing file yields ``{}``."""
    if not os.path.exists(file_path):
        return {}

    if file_path in _config_cache:
        return _config_cache[file_path]

    with open(file_path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)
    if config is not None and not isinstance(config, dict):
        raise ValueError(f"{file_path}: top level of a config file must be a mapping")
    processed_config = process_dict(config)

    _config_cache[file_path] = processed_config
    return processed_config


def clear_config_cache() -> None:
    _config_cache.clear()
