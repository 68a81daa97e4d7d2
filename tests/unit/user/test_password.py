"""Tests for bcrypt password hashing."""

import pytest

from ttms.core.modules.user.password import PasswordHasher


class TestPasswordHasher:
    @pytest.fixture(autouse=True)
    def setup(self):
        self.hasher = PasswordHasher(rounds=4)

    def test_digest_is_not_plaintext(self):
        digest = self.hasher.hash("s3cret-pass")
        assert digest != "s3cret-pass"
        assert digest.startswith("$2b$04$")

    @pytest.mark.parametrize("password", ["a", "s3cret-pass", "pässwörd ✓", "with spaces inside"])
    def test_verify_accepts_original_password(self, password):
        assert self.hasher.verify(password, self.hasher.hash(password)) is True

    def test_verify_rejects_other_password(self):
        digest = self.hasher.hash("correct horse")
        assert self.hasher.verify("battery staple", digest) is False

    def test_same_password_gets_different_salt(self):
        assert self.hasher.hash("repeat") != self.hasher.hash("repeat")

    def test_cost_factor_is_embedded(self):
        assert PasswordHasher(rounds=5).hash("pw").startswith("$2b$05$")

    @pytest.mark.parametrize("password", ["x" * 100, "é" * 50, "密码" * 20])
    def test_password_longer_than_72_bytes(self, password):
        assert len(password.encode("utf-8")) > 72
        digest = self.hasher.hash(password)
        assert self.hasher.verify(password, digest) is True
        assert self.hasher.verify("x" * 10, digest) is False

    def test_only_first_72_bytes_are_significant(self):
        digest = self.hasher.hash("a" * 72 + "tail")
        assert self.hasher.verify("a" * 72 + "other tail", digest) is True

    def test_malformed_digest_does_not_verify(self):
        assert self.hasher.verify("pw", "not-a-bcrypt-digest") is False

    @pytest.mark.asyncio
    async def test_async_wrappers(self):
        digest = await self.hasher.hash_async("async-pw")
        assert await self.hasher.verify_async("async-pw", digest) is True
        assert await self.hasher.verify_async("wrong", digest) is False
