# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""Parsed CODVN H hash record."""

from typing import Union

from pydantic import BaseModel, ConfigDict, StrictBytes, StrictInt, field_validator, model_validator

from codvn.core.algorithms import HashAlgorithm
from codvn.core.errors import InvalidIterationCount, ParseError, TruncatedInput


class Record(BaseModel):
    """One hash entry: algorithm, work factor, digest and salt.

    Records are immutable. They come out of :func:`codvn.core.codec.decode`
    or :func:`codvn.core.engine.construct`.
    """

    model_config = ConfigDict(frozen=True)

    algorithm: HashAlgorithm
    iterations: StrictInt
    digest: StrictBytes
    salt: StrictBytes = b""

    @field_validator("iterations")
    @classmethod
    def _positive_iterations(cls, value: int) -> int:
        if value <= 0:
            raise InvalidIterationCount(f"iteration count must be positive, got {value}")
        return value

    @model_validator(mode="after")
    def _digest_fits_algorithm(self) -> "Record":
        size = self.algorithm.digest_size
        if len(self.digest) < size:
            raise TruncatedInput(
                f"{self.algorithm.tag} digest needs {size} bytes, got {len(self.digest)}"
            )
        if len(self.digest) > size:
            raise ParseError(
                f"{self.algorithm.tag} digest needs {size} bytes, got {len(self.digest)}"
            )
        return self

    @property
    def payload(self) -> bytes:
        """Digest followed by salt, as stored in the base64 part."""
        return self.digest + self.salt

    def to_text(self) -> str:
        """Render the canonical ``{x-is<TAG>,<ITER>}<BASE64>`` form."""
        # codec and engine both build Records, so they are imported lazily
        from codvn.core.codec import encode

        return encode(self)

    def verify(self, candidate: Union[str, bytes]) -> None:
        """Raise :class:`~codvn.core.errors.VerificationMismatch` unless ``candidate`` matches."""
        from codvn.core.engine import verify

        verify(self, candidate)

    def __str__(self) -> str:
        return self.to_text()
