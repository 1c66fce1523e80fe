# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""Password hashing and verification using the CODVN H passlib handlers."""

import logging
from typing import Optional, Union

from passlib.context import CryptContext

from codvn.auth.handlers import HANDLERS, handler_for
from codvn.config.settings import HashSettings, load_settings
from codvn.core.algorithms import HashAlgorithm
from codvn.core.errors import IterationLimitExceeded

logger = logging.getLogger(__name__)


def build_context(settings: HashSettings) -> CryptContext:
    """Build a CryptContext over all four CODVN H handlers.

    Args:
        settings: Default algorithm plus optional iteration and salt size overrides

    Returns:
        Configured CryptContext
    """
    options = {}
    for handler in HANDLERS:
        if settings.iterations is not None:
            options[f"{handler.name}__default_rounds"] = settings.iterations
        if settings.salt_size is not None:
            options[f"{handler.name}__salt_size"] = settings.salt_size
    default = handler_for(settings.algorithm).name
    logger.debug(f"Building CODVN H context, default scheme {default}")
    return CryptContext(schemes=list(HANDLERS), default=default, **options)


settings = load_settings()
pwd_context = build_context(settings)


def hash_password(
    password: Union[str, bytes],
    algorithm: Optional[HashAlgorithm] = None,
    context: Optional[CryptContext] = None,
) -> str:
    """Hash a password with a fresh random salt.

    Args:
        password: Plain text password
        algorithm: Digest to use; defaults to the context's default scheme
        context: CryptContext to use; defaults to the module-level one

    Returns:
        Hashed password string, e.g. ``{x-isSHA512,15000}...``
    """
    context = context or pwd_context
    if algorithm is None:
        return context.hash(password)
    return context.handler(handler_for(algorithm).name).hash(password)


def check_iteration_ceiling(
    hashed_password: Union[str, bytes],
    max_iterations: int,
    context: Optional[CryptContext] = None,
) -> None:
    """Reject a stored hash whose work factor exceeds ``max_iterations``.

    Runs before any hashing so an oversized iteration count costs nothing.

    Raises:
        ValueError: If the hash is not a recognized or well-formed CODVN H hash
        IterationLimitExceeded: If the hash asks for too many iterations
    """
    context = context or pwd_context
    handler = context.identify(hashed_password, resolve=True, required=True)
    rounds = handler.from_string(hashed_password).rounds
    if rounds > max_iterations:
        logger.warning(f"Rejected {handler.name} hash with {rounds} iterations (limit {max_iterations})")
        raise IterationLimitExceeded(f"hash uses {rounds} iterations, limit is {max_iterations}")


def verify_password(
    plain_password: Union[str, bytes],
    hashed_password: Union[str, bytes],
    context: Optional[CryptContext] = None,
    max_iterations: Optional[int] = None,
) -> bool:
    """Verify a password against its hash.

    Args:
        plain_password: Plain text password to verify
        hashed_password: Hashed password to compare against
        context: CryptContext to use; defaults to the module-level one
        max_iterations: Work factor ceiling; defaults to the configured one

    Returns:
        True if password matches, False otherwise

    Raises:
        ValueError: If the hash is not a recognized or well-formed CODVN H hash
        IterationLimitExceeded: If the hash exceeds the iteration ceiling
    """
    context = context or pwd_context
    if max_iterations is None:
        max_iterations = settings.max_iterations
    if max_iterations is not None:
        check_iteration_ceiling(hashed_password, max_iterations, context)
    return context.verify(plain_password, hashed_password)
