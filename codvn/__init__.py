# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""Parse, render and verify SAP CODVN H (``{x-is<ALG>,<ITER>}``) password hashes."""

from codvn.core import (
    CodvnError,
    HashAlgorithm,
    InvalidIterationCount,
    IterationLimitExceeded,
    MalformedEncoding,
    ParseError,
    Record,
    TruncatedInput,
    UnknownHashKind,
    VerificationMismatch,
    construct,
    decode,
    encode,
    iterated_hash,
    verify_text,
)

# parse() is the name interop tooling expects for decode()
parse = decode

__version__ = "0.1.0"

__all__ = [
    "HashAlgorithm",
    "Record",
    "parse",
    "decode",
    "encode",
    "construct",
    "iterated_hash",
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
