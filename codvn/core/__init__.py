# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

from .algorithms import HashAlgorithm
from .codec import decode, encode, identify
from .engine import construct, digests_match, iterated_hash, verify, verify_text
from .errors import (
    CodvnError,
    InvalidIterationCount,
    IterationLimitExceeded,
    MalformedEncoding,
    ParseError,
    TruncatedInput,
    UnknownHashKind,
    VerificationMismatch,
)
from .record import Record

__all__ = [
    "HashAlgorithm",
    "Record",
    "decode",
    "encode",
    "identify",
    "construct",
    "digests_match",
    "iterated_hash",
    "verify",
    "verify_text",
    "CodvnError",
    "ParseError",
    "UnknownHashKind",
    "InvalidIterationCount",
    "MalformedEncoding",
    "TruncatedInput",
    "VerificationMismatch",
    "IterationLimitExceeded",
]
