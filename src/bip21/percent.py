"""Percent-encoding primitives used by the URI parser and formatter.

Decoding is validated eagerly but produces bytes lazily. Encoding always uses
one fixed escape set so that values survive the ``key=value&key=value``
grammar of the query part.
"""

from __future__ import annotations

import re
from typing import Iterator
from urllib.parse import quote_from_bytes, unquote_to_bytes

# Characters that are never escaped, on top of ASCII letters, digits and "-._~".
# Notably absent: "&", "?", "=", " ", "%", "#" and "+".
SAFE_CHARACTERS = "!$'()*,/:;@"

_INVALID_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class InvalidPercentEncodingError(ValueError):
    """Raised when a ``%`` is not followed by two hexadecimal digits."""

    def __init__(self, encoded: str, position: int):
        super().__init__(f"invalid percent-encoding at position {position}")
        self.encoded = encoded
        self.position = position


class PercentDecode:
    """Validated, not yet decoded, percent-encoded text.

    Construction only scans for malformed escapes; iterating yields decoded
    byte values one at a time.
    """

    __slots__ = ("_encoded",)

    def __init__(self, encoded: str):
        match = _INVALID_ESCAPE.search(encoded)
        if match is not None:
            raise InvalidPercentEncodingError(encoded, match.start())
        self._encoded = encoded

    @property
    def encoded(self) -> str:
        return self._encoded

    def __iter__(self) -> Iterator[int]:
        encoded = self._encoded
        i = 0
        while i < len(encoded):
            char = encoded[i]
            if char == "%":
                yield int(encoded[i + 1 : i + 3], 16)
                i += 3
            else:
                yield from char.encode("utf-8")
                i += 1

    def to_bytes(self) -> bytes:
        return unquote_to_bytes(self._encoded)

    def __repr__(self) -> str:
        return f"PercentDecode({self._encoded!r})"


def percent_encode(data: bytes) -> str:
    """Percent-encode raw bytes with the fixed escape set.

    Args:
        data: Bytes to encode

    Returns:
        ASCII text safe to use as a query value
    """
    return quote_from_bytes(data, safe=SAFE_CHARACTERS)


def utf8_percent_encode(text: str) -> str:
    """Percent-encode the UTF-8 representation of ``text``.

    Args:
        text: Text to encode

    Returns:
        ASCII text safe to use as a query value
    """
    return percent_encode(text.encode("utf-8"))
