"""HTTP header field parsing and storage."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping

_CRLF = b"\r\n"

_ALLOWED_SPECIAL_CHARS = frozenset("!#$%&'*+-.^_`|~")


class HeaderParseError(ValueError):
    """Raised when a header line is malformed."""


def is_valid_field_name(name: str) -> bool:
    """Return True if ``name`` is a non-empty token of letters, digits and allowed symbols."""
    if not name:
        return False
    return all(
        char.isalpha() or char.isdecimal() or char in _ALLOWED_SPECIAL_CHARS
        for char in name
    )


class Headers(MutableMapping[str, str]):
    """Case-insensitive mapping of header field names to values.

    Keys are stored in lower case. Repeated fields are joined with ", ".
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._fields: dict[str, str] = {}
        if initial:
            for key, value in initial.items():
                self[key] = value

    def __getitem__(self, key: str) -> str:
        return self._fields[key.lower()]

    def __setitem__(self, key: str, value: str) -> None:
        self._fields[key.lower()] = value

    def __delitem__(self, key: str) -> None:
        lower_key = key.lower()
        if lower_key not in self._fields:
            raise KeyError(f"key {lower_key}: not found")
        del self._fields[lower_key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fields!r})"

    def set(self, key: str, value: str) -> None:
        """Add a value for ``key``, appending to any existing value."""
        key = key.lower()
        existing = self._fields.get(key)
        if existing is not None:
            value = f"{existing}, {value}"
        self._fields[key] = value

    def get(self, key: str) -> str:  # type: ignore[override]
        """Return the value for ``key``; raise KeyError if it is absent."""
        lower_key = key.lower()
        try:
            return self._fields[lower_key]
        except KeyError:
            raise KeyError(f"key {lower_key}: not found") from None

    def parse(self, data: bytes) -> tuple[int, bool]:
        """Parse at most one header line from ``data``.

        Returns the number of bytes consumed and whether the blank line
        ending the header block was reached. Returns ``(0, False)`` when
        no complete line is available yet.
        """
        line_end = data.find(_CRLF)
        if line_end == -1:
            return 0, False
        if line_end == 0:
            return len(_CRLF), True

        raw_line = bytes(data[: line_end + len(_CRLF)])
        line = raw_line.decode("utf-8", errors="replace")

        name, colon, value = line.partition(":")
        if not colon:
            raise HeaderParseError("parsing error regarding ':'")
        if name.rstrip() != name:
            raise HeaderParseError("cannot have space between field name and :")

        name = name.strip()
        if not is_valid_field_name(name):
            raise HeaderParseError("field name contains invalid chars")

        self.set(name, value.strip())
        return len(raw_line), False