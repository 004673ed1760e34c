"""Lazily decoded parameter values."""

from __future__ import annotations

import enum
from typing import Iterator, Union

from typing_extensions import Self

from .config import get_config
from .errors import NonTextValuesDisabledError
from .percent import PercentDecode, percent_encode

ParamSource = Union[str, bytes, bytearray, memoryview]


class _Repr(enum.Enum):
    ENCODED = "encoded"
    BYTES = "bytes"
    TEXT = "text"


class Param:
    """A stringly parameter of a URI, possibly still percent-encoded.

    Values parsed from a URI keep a reference to the encoded input and are
    decoded on first use; the decoded bytes are cached so the decoder runs at
    most once. Values built for formatting are wrapped as-is::

        label = Param("Luke-Jr")
        message = Param.decode("Donation%20for%20project%20xyz")
        message.to_str()  # "Donation for project xyz"

    Byte-oriented operations (``Param(b"...")``, ``iter_bytes``, ``to_bytes``)
    are not BIP21 compliant and require ``allow_non_text_values``.
    """

    __slots__ = ("_repr", "_value", "_decoded")

    def __init__(self, value: ParamSource):
        if isinstance(value, str):
            self._repr = _Repr.TEXT
            self._value: str | bytes | PercentDecode = value
        elif isinstance(value, (bytes, bytearray, memoryview)):
            _require_non_text("Param from bytes")
            self._repr = _Repr.BYTES
            self._value = bytes(value)
        else:
            raise TypeError(f"Param can not be built from {type(value).__name__}")
        self._decoded: bytes | None = None

    @classmethod
    def decode(cls, encoded: str) -> Self:
        """Start decoding ``encoded``.

        Only validates the escapes; no bytes are produced until the value is
        used.

        Raises:
            InvalidPercentEncodingError: If an escape is malformed
        """
        param = cls.__new__(cls)
        param._repr = _Repr.ENCODED
        param._value = PercentDecode(encoded)
        param._decoded = None
        return param

    @classmethod
    def _from_decoded(cls, data: bytes) -> Self:
        param = cls.__new__(cls)
        param._repr = _Repr.BYTES
        param._value = data
        param._decoded = None
        return param

    @property
    def is_encoded(self) -> bool:
        """Whether the value is still held in its percent-encoded form."""
        return self._repr is _Repr.ENCODED

    def _decoded_bytes(self) -> bytes:
        if self._repr is _Repr.TEXT:
            return self._value.encode("utf-8")  # type: ignore[union-attr]
        if self._repr is _Repr.BYTES:
            return self._value  # type: ignore[return-value]
        if self._decoded is None:
            self._decoded = self._value.to_bytes()  # type: ignore[union-attr]
        return self._decoded

    def iter_bytes(self) -> Iterator[int]:
        """Iterate over the decoded bytes.

        An encoded value that has not been decoded yet is decoded on the fly
        without materializing it.
        """
        _require_non_text("Param.iter_bytes")
        if self._repr is _Repr.ENCODED and self._decoded is None:
            return iter(self._value)  # type: ignore[arg-type]
        return iter(self._decoded_bytes())

    def to_bytes(self) -> bytes:
        """Return the decoded bytes."""
        _require_non_text("Param.to_bytes")
        return self._decoded_bytes()

    def to_str(self) -> str:
        """Return the decoded text.

        Raises:
            UnicodeDecodeError: If the decoded bytes are not valid UTF-8
        """
        if self._repr is _Repr.TEXT:
            return self._value  # type: ignore[return-value]
        return self._decoded_bytes().decode("utf-8")

    def to_percent_encoded(self) -> str:
        """Return the decoded bytes percent-encoded for writing into a URI.

        Encoded input is normalized, e.g. ``%2d`` becomes ``-``. Unlike
        ``to_bytes`` this works for every value regardless of
        ``allow_non_text_values``.
        """
        return percent_encode(self._decoded_bytes())

    def detach(self) -> Param:
        """Return a copy that no longer refers to the encoded input."""
        if self._repr is _Repr.ENCODED:
            return Param._from_decoded(self._decoded_bytes())
        return self

    def __str__(self) -> str:
        return self.to_str()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Param):
            return NotImplemented
        return self._decoded_bytes() == other._decoded_bytes()

    def __hash__(self) -> int:
        return hash(self._decoded_bytes())

    def __repr__(self) -> str:
        if self._repr is _Repr.ENCODED:
            return f"Param.decode({self._value.encoded!r})"  # type: ignore[union-attr]
        return f"Param({self._value!r})"


def _require_non_text(operation: str) -> None:
    if not get_config().allow_non_text_values:
        raise NonTextValuesDisabledError(operation)
