"""Wipeable holder for launch credentials."""

from pydantic import SecretStr


class SecureString:
    """A secret kept in a private byte buffer that is zeroed when cleared.

    The plaintext is only materialised as ``str`` by :meth:`reveal`, at the
    point the value is handed to the process launcher. The buffer is wiped by
    :meth:`clear`, on context-manager exit, and when the object is collected.
    """

    __slots__ = ("_buffer", "_read_only")

    def __init__(self, value: "str | bytes | SecretStr | SecureString" = ""):
        self._buffer = bytearray()
        self._read_only = False
        if isinstance(value, SecureString):
            self._buffer.extend(value._buffer)
        elif isinstance(value, SecretStr):
            self._buffer.extend(value.get_secret_value().encode("utf-8"))
        elif isinstance(value, str):
            self._buffer.extend(value.encode("utf-8"))
        elif isinstance(value, (bytes, bytearray)):
            try:
                value.decode("utf-8")
            except UnicodeDecodeError:
                raise ValueError("secret bytes are not valid UTF-8") from None
            self._buffer.extend(value)
        else:
            raise TypeError(f"cannot build a SecureString from {type(value).__name__}")

    def append(self, text: str) -> None:
        if self._read_only:
            raise RuntimeError("SecureString is read-only")
        self._buffer.extend(text.encode("utf-8"))

    def make_read_only(self) -> None:
        self._read_only = True

    @property
    def read_only(self) -> bool:
        return self._read_only

    def reveal(self) -> str:
        """Return the plaintext. Keep the result short-lived."""
        return self._buffer.decode("utf-8")

    def clear(self) -> None:
        """Zero the buffer and drop its contents."""
        buffer = getattr(self, "_buffer", None)
        if buffer is None:
            return
        for i in range(len(buffer)):
            buffer[i] = 0
        del buffer[:]

    def copy(self) -> "SecureString":
        return SecureString(self)

    def __len__(self) -> int:
        # count UTF-8 lead bytes so the plaintext is never decoded
        return sum(1 for byte in self._buffer if byte & 0xC0 != 0x80)

    def __bool__(self) -> bool:
        return bool(self._buffer)

    def __enter__(self) -> "SecureString":
        return self

    def __exit__(self, *exc_info) -> None:
        self.clear()

    def __del__(self) -> None:
        self.clear()

    def __repr__(self) -> str:
        return "SecureString('**********')" if self._buffer else "SecureString('')"

    __str__ = __repr__
