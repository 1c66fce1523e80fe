# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

from .loader import get_int_env, get_str_env, load_yaml_config
from .settings import HashSettings, load_settings

__all__ = [
    "get_int_env",
    "get_str_env",
    "load_yaml_config",
    "HashSettings",
    "load_settings",
]

