# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""Error taxonomy for CODVN H hash records.

All errors derive from :class:`CodvnError` rather than ``ValueError`` so they
surface unchanged from inside pydantic validators.
"""


class CodvnError(Exception):
    """Base class for every error raised by this package."""


class ParseError(CodvnError):
    """A hash record could not be turned into a :class:`Record`."""


class UnknownHashKind(ParseError):
    """Unknown algorithm tag, or text that is not a CODVN H record at all."""


class InvalidIterationCount(ParseError):
    """Iteration count missing, non-numeric, or not strictly positive."""


class MalformedEncoding(ParseError):
    """The base64 payload could not be decoded."""


class TruncatedInput(ParseError):
    """The decoded payload is shorter than the algorithm's digest."""


class VerificationMismatch(CodvnError):
    """The candidate password does not produce the stored digest."""


class IterationLimitExceeded(CodvnError):
    """The record asks for more iterations than the configured ceiling."""
