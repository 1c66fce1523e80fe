# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

from .handlers import HANDLERS, codvn_h_sha1, codvn_h_sha256, codvn_h_sha384, codvn_h_sha512, handler_for
from .password import build_context, check_iteration_ceiling, hash_password, pwd_context, verify_password

__all__ = [
    "HANDLERS",
    "codvn_h_sha1",
    "codvn_h_sha256",
    "codvn_h_sha384",
    "codvn_h_sha512",
    "handler_for",
    "build_context",
    "check_iteration_ceiling",
    "hash_password",
    "pwd_context",
    "verify_password",
]
