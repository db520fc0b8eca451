"""Unit tests for cmdwrap.secure."""

import pytest
from pydantic import SecretStr

from cmdwrap.secure import SecureString


class TestSecureString:
    def test_reveal_returns_plaintext(self):
        assert SecureString("hunter2").reveal() == "hunter2"

    def test_accepts_secret_str_and_secure_string(self):
        assert SecureString(SecretStr("abc")).reveal() == "abc"
        assert SecureString(SecureString("abc")).reveal() == "abc"

    def test_accepts_utf8_bytes(self):
        assert SecureString(b"p\xc3\xa4ss").reveal() == "päss"
        assert SecureString(bytearray(b"abc")).reveal() == "abc"

    def test_invalid_bytes_error_hides_value(self):
        with pytest.raises(ValueError) as exc_info:
            SecureString(b"\xffhunter2")
        assert "hunter2" not in str(exc_info.value)
        assert exc_info.value.__cause__ is None

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            SecureString(1234)

    def test_append(self):
        secret = SecureString()
        for ch in "pässword":
            secret.append(ch)
        assert secret.reveal() == "pässword"
        assert len(secret) == 8

    def test_read_only_blocks_append(self):
        secret = SecureString("abc")
        secret.make_read_only()
        assert secret.read_only is True
        with pytest.raises(RuntimeError):
            secret.append("d")

    def test_clear_zeroes_buffer(self):
        secret = SecureString("hunter2")
        buffer = secret._buffer
        secret.clear()
        assert secret.reveal() == ""
        assert not secret
        assert buffer == bytearray()

    def test_clear_overwrites_before_truncating(self):
        secret = SecureString("hunter2")
        view = secret._buffer
        snapshot = []
        original_delitem = type(view).__delitem__

        class Spy(bytearray):
            def __delitem__(self, key):
                snapshot.append(bytes(self))
                original_delitem(self, key)

        secret._buffer = Spy(view)
        secret.clear()
        assert snapshot == [b"\x00" * len("hunter2")]

    def test_context_manager_clears_on_exit(self):
        with SecureString("hunter2") as secret:
            assert secret.reveal() == "hunter2"
        assert secret.reveal() == ""

    def test_copy_is_independent(self):
        secret = SecureString("abc")
        clone = secret.copy()
        secret.clear()
        assert clone.reveal() == "abc"

    def test_repr_and_str_are_masked(self):
        secret = SecureString("hunter2")
        assert "hunter2" not in repr(secret)
        assert "hunter2" not in str(secret)
        assert repr(SecureString()) == "SecureString('')"

    def test_equality_is_identity(self):
        secret = SecureString("abc")
        assert secret == secret
        assert secret != SecureString("abc")
