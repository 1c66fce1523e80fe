# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""Static table of the hash algorithms a CODVN H record can name."""

import hashlib
from enum import Enum

from codvn.core.errors import UnknownHashKind


class HashAlgorithm(Enum):
    """Closed set of supported digests.

    Each member is ``(tag, digest_size, hashlib name, default iterations,
    default salt size)``. The defaults are what the originating system used
    for new hashes; they are never enforced when decoding.
    """

    SHA1 = ("sha", 20, "sha1", 1024, 12)
    SHA256 = ("SHA256", 32, "sha256", 10000, 16)
    SHA384 = ("SHA384", 48, "sha384", 7500, 12)
    SHA512 = ("SHA512", 64, "sha512", 15000, 16)

    def __init__(self, tag, digest_size, hashlib_name, default_iterations, default_salt_size):
        self.tag = tag
        self.digest_size = digest_size
        self.hashlib_name = hashlib_name
        self.default_iterations = default_iterations
        self.default_salt_size = default_salt_size

    def new(self, data: bytes = b""):
        """Return a fresh hashlib object for this algorithm."""
        return hashlib.new(self.hashlib_name, data)

    @classmethod
    def from_tag(cls, tag: str) -> "HashAlgorithm":
        """Look up an algorithm by its record tag (case-sensitive).

        Raises:
            UnknownHashKind: If the tag is not in the table.
        """
        try:
            return _BY_TAG[tag]
        except KeyError:
            raise UnknownHashKind(f"unknown hash schema: {tag!r}") from None


_BY_TAG = {algorithm.tag: algorithm for algorithm in HashAlgorithm}
