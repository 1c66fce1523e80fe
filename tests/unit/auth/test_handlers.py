# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

import pytest
from passlib.context import CryptContext

from codvn.auth.handlers import HANDLERS, codvn_h_sha1, codvn_h_sha256, codvn_h_sha512, handler_for
from codvn.core.algorithms import HashAlgorithm
from codvn.core.codec import decode
from codvn.core.engine import construct
from codvn.core.errors import InvalidIterationCount, UnknownHashKind
from vectors import ALL_VECTORS, SHA1_HASH, SHA256_SPACED_HASH, SHA512_HASH


class TestHandlers:
    """passlib handlers wrapping the codec and hash engine"""

    @pytest.mark.parametrize("hashed,password,tag,iterations,salt_size", ALL_VECTORS)
    def test_verify_known_hashes(self, hashed, password, tag, iterations, salt_size):
        handler = handler_for(HashAlgorithm.from_tag(tag))
        assert handler.verify(password, hashed)
        assert not handler.verify(password + "x", hashed)

    def test_identify_is_per_algorithm(self):
        assert codvn_h_sha1.identify(SHA1_HASH)
        assert not codvn_h_sha256.identify(SHA1_HASH)
        assert codvn_h_sha256.identify(SHA256_SPACED_HASH)
        assert not codvn_h_sha1.identify("{SSHA}abcd")

    def test_parsed_fields(self):
        parsed = codvn_h_sha1.from_string(SHA1_HASH)
        assert parsed.rounds == 1024
        assert parsed.salt == bytes.fromhex("ddd02e58c648b344583def48")
        assert parsed.checksum == bytes.fromhex("225539242fd4680cef525f2771ac48065150d4d7")
        assert parsed.to_record() == decode(SHA1_HASH)

    def test_to_string_is_canonical(self):
        assert codvn_h_sha1.from_string(SHA1_HASH).to_string() == SHA1_HASH
        parsed = codvn_h_sha256.from_string(SHA256_SPACED_HASH)
        assert parsed.to_string() == SHA256_SPACED_HASH.replace(", ", ",")

    @pytest.mark.parametrize("handler", HANDLERS)
    def test_hash_uses_historical_defaults(self, handler):
        hashed = handler.hash("s3cret")
        record = decode(hashed)
        assert record.algorithm is handler.algorithm
        assert record.iterations == handler.algorithm.default_iterations
        assert len(record.salt) == handler.algorithm.default_salt_size
        assert handler.verify("s3cret", hashed)
        assert not handler.verify("s3cret!", hashed)

    def test_fresh_salt_per_hash(self):
        assert codvn_h_sha1.hash("pw") != codvn_h_sha1.hash("pw")

    def test_using_fixed_settings_is_deterministic(self):
        hashed = codvn_h_sha512.using(rounds=3, salt=b"0123456789abcdef").hash("pw")
        assert hashed == construct(HashAlgorithm.SHA512, "pw", b"0123456789abcdef", 3).to_text()

    def test_using_empty_salt(self):
        hashed = codvn_h_sha1.using(salt_size=0, rounds=2).hash("pw")
        assert decode(hashed).salt == b""
        assert codvn_h_sha1.verify("pw", hashed)

    def test_zero_rounds_rejected(self):
        with pytest.raises(ValueError):
            codvn_h_sha1.using(rounds=0, relaxed=False).hash("pw")

    def test_malformed_hash_raises_value_error(self):
        with pytest.raises(ValueError) as excinfo:
            codvn_h_sha1.verify("pw", "{x-issha,0}" + SHA1_HASH.split("}", 1)[1])
        assert isinstance(excinfo.value.__cause__, InvalidIterationCount)

    def test_unknown_hash_raises_value_error(self):
        with pytest.raises(ValueError) as excinfo:
            codvn_h_sha1.from_string("{x-ismd5,1024}abcd")
        assert isinstance(excinfo.value.__cause__, UnknownHashKind)

    def test_other_algorithm_rejected(self):
        with pytest.raises(ValueError):
            codvn_h_sha1.from_string(SHA512_HASH)


class TestCryptContextDispatch:
    def test_context_picks_handler_by_tag(self):
        context = CryptContext(schemes=list(HANDLERS), default="codvn_h_sha512")
        for hashed, password, tag, _, _ in ALL_VECTORS:
            assert context.identify(hashed) == handler_for(HashAlgorithm.from_tag(tag)).name
            assert context.verify(password, hashed)
        assert context.identify(context.hash("pw")) == "codvn_h_sha512"
