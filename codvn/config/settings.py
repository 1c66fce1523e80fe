# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""Settings for generating and checking CODVN H hashes through passlib."""

import logging
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from codvn.config.loader import get_int_env, get_str_env, load_yaml_config
from codvn.core.algorithms import HashAlgorithm
from codvn.core.errors import UnknownHashKind

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "conf.yaml"
CONFIG_SECTION = "CODVN"


class HashSettings(BaseModel):
    """Hashing policy.

    ``iterations`` and ``salt_size`` override the per-algorithm historical
    defaults for new hashes. ``max_iterations`` is an optional ceiling applied
    before verifying a stored hash; the engine itself never caps the work
    factor.
    """

    default_algorithm: str = Field(default=HashAlgorithm.SHA512.tag, description="Tag of the algorithm for new hashes")
    iterations: Optional[int] = Field(default=None, ge=1, description="Iterations for new hashes")
    salt_size: Optional[int] = Field(default=None, ge=0, description="Salt size in bytes for new hashes")
    max_iterations: Optional[int] = Field(default=None, ge=1, description="Reject stored hashes above this work factor")

    @field_validator("default_algorithm")
    @classmethod
    def _known_tag(cls, value: str) -> str:
        # re-raised as ValueError so pydantic reports it as a validation error
        try:
            HashAlgorithm.from_tag(value)
        except UnknownHashKind as e:
            raise ValueError(str(e)) from e
        return value

    @property
    def algorithm(self) -> HashAlgorithm:
        return HashAlgorithm.from_tag(self.default_algorithm)


def _env_overrides() -> dict:
    overrides = {}
    algorithm = get_str_env("CODVN_DEFAULT_ALGORITHM", "")
    if algorithm:
        overrides["default_algorithm"] = algorithm
    # zero (or an unparsable value) leaves the setting unset
    for key in ("iterations", "salt_size", "max_iterations"):
        value = get_int_env(f"CODVN_{key.upper()}", 0)
        if value:
            overrides[key] = value
    return overrides


def load_settings(file_path: Optional[str] = None) -> HashSettings:
    """Build settings from the ``CODVN`` section of a YAML file plus env overrides.

    Args:
        file_path: Config file; defaults to ``$CODVN_CONFIG_FILE`` or ``conf.yaml``

    Returns:
        Validated :class:`HashSettings`
    """
    if file_path is None:
        file_path = get_str_env("CODVN_CONFIG_FILE", DEFAULT_CONFIG_FILE)
    section = load_yaml_config(file_path).get(CONFIG_SECTION) or {}
    values = {k.lower(): v for k, v in section.items()}
    values.update(_env_overrides())
    settings = HashSettings(**values)
    logger.debug(f"Loaded hash settings from {file_path}: {settings}")
    return settings
