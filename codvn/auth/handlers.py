# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""passlib handlers for CODVN H hashes, one per digest algorithm."""

import logging

import passlib.utils.handlers as uh
from passlib.utils import to_unicode

from codvn.core.algorithms import HashAlgorithm
from codvn.core.codec import PREFIX, decode, encode
from codvn.core.engine import iterated_hash
from codvn.core.errors import ParseError, UnknownHashKind
from codvn.core.record import Record

logger = logging.getLogger(__name__)


class _CodvnHandler(uh.HasRounds, uh.HasRawSalt, uh.HasRawChecksum, uh.GenericHandler):
    """Shared implementation; subclasses pin :attr:`algorithm`.

    Parsing and rendering go through :mod:`codvn.core.codec` so both paths
    accept and emit exactly the same text. Codec errors are re-raised as the
    ``ValueError`` flavours passlib callers expect.
    """

    setting_kwds = ("salt", "salt_size", "rounds")

    algorithm = None  # required - HashAlgorithm member

    # salts of any length are valid, including empty ones
    min_salt_size = 0
    max_salt_size = None

    min_rounds = 1
    max_rounds = None
    rounds_cost = "linear"

    @classmethod
    def from_string(cls, hash, **context):
        hash = to_unicode(hash, "ascii", "hash")
        try:
            record = decode(hash)
        except UnknownHashKind as e:
            logger.debug(f"{cls.name}: unrecognized hash: {e}")
            raise uh.exc.InvalidHashError(cls) from e
        except ParseError as e:
            logger.debug(f"{cls.name}: malformed hash: {e}")
            raise uh.exc.MalformedHashError(cls, str(e)) from e
        if record.algorithm is not cls.algorithm:
            raise uh.exc.InvalidHashError(cls)
        return cls(rounds=record.iterations, salt=record.salt, checksum=record.digest)

    def to_record(self) -> Record:
        return Record(algorithm=self.algorithm, iterations=self.rounds, digest=self.checksum, salt=self.salt)

    def to_string(self):
        return encode(self.to_record())

    def _calc_checksum(self, secret):
        return iterated_hash(self.algorithm, secret, self.salt, self.rounds)


class codvn_h_sha1(_CodvnHandler):
    """SAP CODVN H with SHA-1 (``{x-issha,...}``)."""

    name = "codvn_h_sha1"
    algorithm = HashAlgorithm.SHA1
    ident = f"{PREFIX}{algorithm.tag},"
    checksum_size = algorithm.digest_size
    default_rounds = algorithm.default_iterations
    default_salt_size = algorithm.default_salt_size


class codvn_h_sha256(_CodvnHandler):
    """SAP CODVN H with SHA-256 (``{x-isSHA256,...}``)."""

    name = "codvn_h_sha256"
    algorithm = HashAlgorithm.SHA256
    ident = f"{PREFIX}{algorithm.tag},"
    checksum_size = algorithm.digest_size
    default_rounds = algorithm.default_iterations
    default_salt_size = algorithm.default_salt_size


class codvn_h_sha384(_CodvnHandler):
    """SAP CODVN H with SHA-384 (``{x-isSHA384,...}``)."""

    name = "codvn_h_sha384"
    algorithm = HashAlgorithm.SHA384
    ident = f"{PREFIX}{algorithm.tag},"
    checksum_size = algorithm.digest_size
    default_rounds = algorithm.default_iterations
    default_salt_size = algorithm.default_salt_size


class codvn_h_sha512(_CodvnHandler):
    """SAP CODVN H with SHA-512 (``{x-isSHA512,...}``)."""

    name = "codvn_h_sha512"
    algorithm = HashAlgorithm.SHA512
    ident = f"{PREFIX}{algorithm.tag},"
    checksum_size = algorithm.digest_size
    default_rounds = algorithm.default_iterations
    default_salt_size = algorithm.default_salt_size


HANDLERS = (codvn_h_sha1, codvn_h_sha256, codvn_h_sha384, codvn_h_sha512)

_BY_ALGORITHM = {handler.algorithm: handler for handler in HANDLERS}


def handler_for(algorithm: HashAlgorithm):
    """Return the handler class for ``algorithm``."""
    return _BY_ALGORITHM[algorithm]
