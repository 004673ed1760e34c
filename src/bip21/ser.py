"""Serialization (formatting) of BIP21 URIs.

Extra parameters are produced by an extras type implementing
``SerializeParams``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Protocol, runtime_checkable

from .amount import Denomination, format_amount
from .param import Param
from .percent import utf8_percent_encode

if TYPE_CHECKING:
    from .uri import Uri


@runtime_checkable
class SerializeParams(Protocol):
    """An extras type that can be written as URI parameters."""

    def serialize_params(self) -> Iterable[tuple[Any, Any]]:
        """Return the ``(key, value)`` pairs to write, in order.

        Keys and values are written using ``str()``; ``Param`` values are
        written from their decoded content. Values are percent-encoded by the
        writer, keys are not and must never contain ``=``.
        """
        ...


def format_uri(uri: Uri, alternate: bool = False) -> str:
    """Format a URI.

    Args:
        uri: The URI to format
        alternate: Use the uppercase scheme and address, which encode densely
            in QR codes

    Returns:
        The URI text

    Raises:
        AssertionError: If the extras produce a key containing ``=``
    """
    if alternate:
        parts = ["BITCOIN:", uri.address.to_qr_string()]
    else:
        parts = ["bitcoin:", str(uri.address)]

    writer = _ParamWriter(parts)
    if uri.amount is not None:
        writer.write("amount", utf8_percent_encode(format_amount(uri.amount, Denomination.BITCOIN)))
    if uri.label is not None:
        writer.write("label", encode_value(uri.label))
    if uri.message is not None:
        writer.write("message", encode_value(uri.message))
    for key, value in uri.extras.serialize_params():
        writer.write(key, encode_value(value))
    return "".join(parts)


def encode_value(value: Any) -> str:
    """Percent-encode a parameter value."""
    if isinstance(value, Param):
        return value.to_percent_encoded()
    return utf8_percent_encode(str(value))


class _ParamWriter:
    """Appends ``?key=value`` / ``&key=value`` pairs."""

    def __init__(self, parts: list[str]):
        self._parts = parts
        self._separator = "?"

    def write(self, key: Any, encoded_value: str) -> None:
        key = str(key)
        if "=" in key:
            raise AssertionError(f"key '{key}' contains equal sign")
        self._parts.extend((self._separator, key, "=", encoded_value))
        self._separator = "&"
