# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""Iterated salted hash chain and constant-time digest comparison."""

import hmac
from typing import Union

from codvn.core.algorithms import HashAlgorithm
from codvn.core.codec import decode
from codvn.core.errors import InvalidIterationCount, VerificationMismatch
from codvn.core.record import Record

Secret = Union[str, bytes]


def to_bytes(secret: Secret) -> bytes:
    """Encode a password as UTF-8 unless it already is bytes."""
    if isinstance(secret, bytes):
        return secret
    if isinstance(secret, str):
        return secret.encode("utf-8")
    raise TypeError(f"password must be str or bytes, not {type(secret).__name__}")


def check_iterations(iterations: int) -> int:
    """Return ``iterations`` if it is a positive int.

    Raises:
        InvalidIterationCount: For zero, negative or non-integer values.
    """
    # bool is an int subclass but never a meaningful work factor
    if isinstance(iterations, bool) or not isinstance(iterations, int):
        raise InvalidIterationCount(f"iteration count must be an integer, got {iterations!r}")
    if iterations <= 0:
        raise InvalidIterationCount(f"iteration count must be positive, got {iterations}")
    return iterations


def iterated_hash(
    algorithm: HashAlgorithm,
    password: Secret,
    salt: bytes,
    iterations: int,
) -> bytes:
    """Run the CODVN H hash chain.

    The state starts as the salt; every round replaces it with
    ``H(password || state)`` computed by a freshly created hash object.

    Args:
        algorithm: Digest to use for every round
        password: Candidate password (str is UTF-8 encoded)
        salt: Stored salt, any length
        iterations: Number of rounds, at least 1

    Returns:
        Digest of ``algorithm.digest_size`` bytes

    Raises:
        InvalidIterationCount: If ``iterations`` is not a positive int
    """
    check_iterations(iterations)
    password = to_bytes(password)
    state = bytes(salt)
    for _ in range(iterations):
        h = algorithm.new()
        h.update(password)
        h.update(state)
        state = h.digest()
    return state


def digests_match(computed: bytes, stored: bytes) -> bool:
    """Constant-time comparison; a length mismatch is simply ``False``."""
    if len(computed) != len(stored):
        return False
    return hmac.compare_digest(computed, stored)


def construct(
    algorithm: HashAlgorithm,
    password: Secret,
    salt: bytes,
    iterations: int,
) -> Record:
    """Build the record a known password would have produced.

    Args:
        algorithm: Digest to use
        password: Clear text password
        salt: Salt to store alongside the digest
        iterations: Work factor, at least 1

    Returns:
        A :class:`Record` that verifies against ``password``
    """
    digest = iterated_hash(algorithm, password, salt, iterations)
    return Record(algorithm=algorithm, iterations=iterations, digest=digest, salt=bytes(salt))


def verify(record: Record, candidate: Secret) -> None:
    """Check ``candidate`` against ``record``.

    Raises:
        VerificationMismatch: If the derived digest differs from the stored one
    """
    computed = iterated_hash(record.algorithm, candidate, record.salt, record.iterations)
    if not digests_match(computed, record.digest):
        raise VerificationMismatch("password doesn't match")


def verify_text(hashed: Union[str, bytes], candidate: Secret) -> None:
    """Parse ``hashed`` and verify ``candidate`` against it.

    Parse errors propagate unchanged; a wrong password raises
    :class:`VerificationMismatch`.
    """
    verify(decode(hashed), candidate)
