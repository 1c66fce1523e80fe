# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""Text codec for CODVN H records.

Format::

    {x-is<TAG>,<ITER>}base64(digest || salt)

    {x-issha,1024}      SHA-1,   1024 iterations,  12 byte salt
    {x-isSHA256,10000}  SHA-256, 10000 iterations, 16 byte salt
    {x-isSHA384,7500}   SHA-384, 7500 iterations,  12 byte salt
    {x-isSHA512,15000}  SHA-512, 15000 iterations, 16 byte salt

Some producers write a space after the comma (``{x-issha, 1024}``). Spaces
there are accepted when decoding and never written when encoding.
"""

import base64
import binascii
import re
from typing import Union

from codvn.core.algorithms import HashAlgorithm
from codvn.core.errors import (
    InvalidIterationCount,
    MalformedEncoding,
    TruncatedInput,
    UnknownHashKind,
)
from codvn.core.record import Record

PREFIX = "{x-is"

_RECORD_RE = re.compile(r"\{x-is(?P<tag>[A-Za-z0-9]+), *(?P<iterations>[^}]*)\}(?P<payload>.*)")
_ITERATIONS_RE = re.compile(r"[0-9]+")


def _to_text(raw: Union[str, bytes]) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (bytes, bytearray)):
        try:
            return bytes(raw).decode("ascii")
        except UnicodeDecodeError:
            raise UnknownHashKind("hash record is not ASCII text") from None
    raise TypeError(f"hash record must be str or bytes, not {type(raw).__name__}")


def decode(raw: Union[str, bytes]) -> Record:
    """Parse a textual hash record.

    Args:
        raw: Record text, as str or ASCII bytes

    Returns:
        The parsed :class:`Record`

    Raises:
        UnknownHashKind: The text is not a CODVN H record, or names an unknown algorithm
        InvalidIterationCount: The iteration count is missing, non-numeric or zero
        MalformedEncoding: The payload is not valid padded base64
        TruncatedInput: The payload is shorter than the algorithm's digest
    """
    text = _to_text(raw)
    match = _RECORD_RE.fullmatch(text)
    if match is None:
        raise UnknownHashKind("unknown hash schema")

    algorithm = HashAlgorithm.from_tag(match.group("tag"))

    iterations_text = match.group("iterations")
    if not _ITERATIONS_RE.fullmatch(iterations_text):
        raise InvalidIterationCount(f"invalid iteration count: {iterations_text!r}")
    try:
        iterations = int(iterations_text)
    except ValueError as e:
        # digit strings past the interpreter's int conversion limit
        raise InvalidIterationCount(f"invalid iteration count: {iterations_text[:20]!r}...") from e
    if iterations == 0:
        raise InvalidIterationCount("iteration count must be positive, got 0")

    try:
        data = base64.b64decode(match.group("payload"), validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedEncoding(f"invalid base64 payload: {e}") from e

    size = algorithm.digest_size
    if len(data) < size:
        raise TruncatedInput(f"{algorithm.tag} payload needs at least {size} bytes, got {len(data)}")

    return Record(algorithm=algorithm, iterations=iterations, digest=data[:size], salt=data[size:])


def encode(record: Record) -> str:
    """Render ``record`` in canonical form (no whitespace, padded base64)."""
    payload = base64.b64encode(record.payload).decode("ascii")
    return f"{PREFIX}{record.algorithm.tag},{record.iterations}}}{payload}"


def identify(raw: Union[str, bytes]) -> bool:
    """Cheap check whether ``raw`` starts like a CODVN H record of a known algorithm.

    Only the prefix up to the comma is inspected; use :func:`decode` to validate.
    """
    if not isinstance(raw, (str, bytes, bytearray)):
        return False
    try:
        raw = _to_text(raw)
    except UnknownHashKind:
        return False
    if not raw.startswith(PREFIX):
        return False
    tag, sep, _ = raw[len(PREFIX):].partition(",")
    if not sep:
        return False
    try:
        HashAlgorithm.from_tag(tag)
    except UnknownHashKind:
        return False
    return True
