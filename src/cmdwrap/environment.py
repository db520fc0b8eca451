"""Environment variable mapping owned by a launch configuration."""

import os
from collections.abc import Iterator, Mapping, MutableMapping


class EnvironmentVariables(MutableMapping[str, str]):
    """String-to-string mapping whose key matching follows the platform.

    Keys are case-insensitive on Windows and case-sensitive elsewhere, unless
    ``case_sensitive`` says otherwise. The spelling of the first insert of a
    key is kept for iteration; later writes through any spelling replace the
    value only.
    """

    def __init__(
        self,
        data: Mapping[object, object] | None = None,
        *,
        case_sensitive: bool | None = None,
    ):
        if case_sensitive is None:
            case_sensitive = os.name != "nt"
        self.case_sensitive = case_sensitive
        # folded key -> (original key, value)
        self._entries: dict[str, tuple[str, str]] = {}
        if data is not None:
            for key, value in data.items():
                self[str(key)] = value

    def _fold(self, key: str) -> str:
        return key if self.case_sensitive else key.upper()

    def __getitem__(self, key: str) -> str:
        return self._entries[self._fold(key)][1]

    def __setitem__(self, key: str, value: object) -> None:
        if not isinstance(key, str):
            raise TypeError(f"environment variable name must be str, not {type(key).__name__}")
        folded = self._fold(key)
        existing = self._entries.get(folded)
        original = existing[0] if existing else key
        self._entries[folded] = (original, str(value))

    def __delitem__(self, key: str) -> None:
        del self._entries[self._fold(key)]

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._fold(key) in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        if len(other) != len(self):
            return False
        for key, value in other.items():
            if not isinstance(key, str) or key not in self or self[key] != value:
                return False
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"

    def copy(self) -> "EnvironmentVariables":
        return type(self)(self, case_sensitive=self.case_sensitive)

    def to_dict(self) -> dict[str, str]:
        """Return a plain dict with the original key spellings."""
        return dict(self.items())
