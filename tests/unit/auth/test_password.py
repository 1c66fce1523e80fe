# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

from unittest import mock

import pytest

from codvn.auth import handlers
from codvn.auth.password import (
    build_context,
    check_iteration_ceiling,
    hash_password,
    pwd_context,
    verify_password,
)
from codvn.config.settings import HashSettings
from codvn.core.algorithms import HashAlgorithm
from codvn.core.codec import decode
from codvn.core.errors import IterationLimitExceeded
from vectors import ALL_VECTORS, SHA1_HASH, SHA1_PASSWORD


@pytest.fixture
def context():
    return build_context(HashSettings())


class TestHashPassword:
    def test_default_algorithm(self, context):
        hashed = hash_password("s3cret", context=context)
        assert hashed.startswith("{x-isSHA512,15000}")
        assert verify_password("s3cret", hashed, context=context)

    @pytest.mark.parametrize("algorithm", list(HashAlgorithm))
    def test_explicit_algorithm(self, algorithm, context):
        hashed = hash_password("s3cret", algorithm, context=context)
        assert hashed.startswith("{x-is" + algorithm.tag + ",")
        assert decode(hashed).algorithm is algorithm

    def test_settings_overrides(self):
        context = build_context(HashSettings(default_algorithm="sha", iterations=5, salt_size=4))
        record = decode(hash_password("s3cret", context=context))
        assert record.algorithm is HashAlgorithm.SHA1
        assert record.iterations == 5
        assert len(record.salt) == 4

    def test_module_context_knows_every_scheme(self):
        assert set(pwd_context.schemes()) == {h.name for h in handlers.HANDLERS}


class TestVerifyPassword:
    @pytest.mark.parametrize("hashed,password,tag,iterations,salt_size", ALL_VECTORS)
    def test_known_hashes(self, hashed, password, tag, iterations, salt_size, context):
        assert verify_password(password, hashed, context=context, max_iterations=20000) is True
        assert verify_password("wrong", hashed, context=context, max_iterations=20000) is False

    def test_unrecognized_hash(self, context):
        with pytest.raises(ValueError):
            verify_password("pw", "$2b$12$notacodvnhash", context=context)

    def test_iteration_ceiling_rejects_before_hashing(self, context):
        with mock.patch.object(handlers, "iterated_hash") as iterated_hash:
            with pytest.raises(IterationLimitExceeded):
                verify_password(SHA1_PASSWORD, SHA1_HASH, context=context, max_iterations=1000)
        iterated_hash.assert_not_called()

    def test_iteration_ceiling_is_inclusive(self, context):
        assert verify_password(SHA1_PASSWORD, SHA1_HASH, context=context, max_iterations=1024)

    def test_ceiling_check_validates_hash(self, context):
        with pytest.raises(ValueError):
            check_iteration_ceiling("{x-issha,1024}Cg==", 5000, context)
        with pytest.raises(ValueError):
            check_iteration_ceiling("not a hash", 5000, context)

    def test_ceiling_check_exported_from_package(self, context):
        from codvn import auth

        assert "check_iteration_ceiling" in auth.__all__
        with pytest.raises(IterationLimitExceeded):
            auth.check_iteration_ceiling(SHA1_HASH, 1000, context)
