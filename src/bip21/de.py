"""Deserialization (parsing) of BIP21 URIs.

Extra parameters are handled by an extras type implementing
``DeserializeParams``. Its ``DeserializationState`` is fed every parameter
that is not ``amount``, ``label`` or ``message`` and must say whether it knows
the parameter; unknown ``req-`` parameters make the whole URI invalid.
"""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, runtime_checkable

from .address import Address, AddressError
from .amount import AmountError, Denomination, parse_amount
from .errors import (
    ExtrasError,
    InvalidAddressError,
    InvalidAmountError,
    InvalidSchemeError,
    MissingEqualsError,
    PercentDecodeError,
    TooShortError,
    UnknownRequiredParameterError,
    raise_uri_error,
)
from .param import Param
from .percent import InvalidPercentEncodingError

if TYPE_CHECKING:
    from .uri import Uri

logger = logging.getLogger(__name__)

SCHEME = "bitcoin:"
REQUIRED_PREFIX = "req-"


class ParamKind(enum.Enum):
    """Whether a parameter is known to the extras type.

    Instances can not be truth-tested: the result must be compared explicitly,
    because an unknown ``req-`` parameter has to be rejected.
    """

    KNOWN = "known"
    UNKNOWN = "unknown"

    def __bool__(self) -> bool:
        raise TypeError("ParamKind must be compared to ParamKind.KNOWN or ParamKind.UNKNOWN")


# ============================================================================
# Extension Interfaces
# ============================================================================


@runtime_checkable
class DeserializationState(Protocol):
    """Accumulates the extra parameters of a single URI.

    A state is created empty for each parse, receives zero or more
    parameters, and is finalized exactly once. Keys of required parameters
    include the ``req-`` prefix.

    A state may also define ``deserialize_borrowed(key, value)`` with the
    same signature. The parser prefers it when present: the value may then be
    retained without detaching. It is not part of the protocol, so states
    without it still pass ``isinstance`` checks.
    """

    def is_param_known(self, key: str) -> bool:
        """Return whether ``key`` is known, independently of any value."""
        ...

    def deserialize_temp(self, key: str, value: Param) -> ParamKind:
        """Consume a parameter that must not be retained as is.

        ``value`` may still refer to the input; call ``value.detach()`` before
        storing it.
        """
        ...

    def finalize(self) -> Any:
        """Return the extras value once all parameters were processed.

        This is the place to check mandatory parameters or combinations.
        """
        ...


@runtime_checkable
class DeserializeParams(Protocol):
    """An extras type that can be parsed from URI parameters.

    Attributes:
        error_type: Exception type raised by the state on invalid parameters;
            the parser wraps it in ``ExtrasError``.
    """

    error_type: ClassVar[type[BaseException]]

    @classmethod
    def deserialization_state(cls) -> DeserializationState:
        """Return a new, empty state."""
        ...


# ============================================================================
# Parser
# ============================================================================


def parse_uri(
    text: str,
    extras: type[DeserializeParams] | None = None,
    *,
    detach: bool = False,
) -> Uri:
    """Parse a BIP21 URI.

    Args:
        text: The URI
        extras: Extras type, ``NoExtras`` by default
        detach: Decode ``label`` and ``message`` eagerly so the result does not
            refer to ``text``

    Returns:
        Parsed URI with an unchecked address

    Raises:
        UriError: If the URI is malformed
        ExtrasError: If the extras type rejected its parameters
    """
    from .extras import NoExtras
    from .uri import Uri

    if extras is None:
        extras = NoExtras

    if len(text) < len(SCHEME):
        raise TooShortError()
    scheme = text[: len(SCHEME)]
    if not (scheme.isascii() and scheme.lower() == SCHEME):
        raise InvalidSchemeError(scheme)

    rest = text[len(SCHEME) :]
    address_part, separator, params = rest.partition("?")

    try:
        address = Address.parse(address_part)
    except AddressError as e:
        raise_uri_error(InvalidAddressError(e))

    state = extras.deserialization_state()
    consume = getattr(state, "deserialize_borrowed", None) or state.deserialize_temp
    amount = None
    label = None
    message = None

    if separator:
        for pair in params.split("&"):
            key, equals, value = pair.partition("=")
            if not equals:
                raise MissingEqualsError(pair)

            if key == "amount":
                try:
                    amount = parse_amount(value, Denomination.BITCOIN)
                except AmountError as e:
                    raise_uri_error(InvalidAmountError(e))
            elif key == "label":
                label = _decode_param(key, value)
            elif key == "message":
                message = _decode_param(key, value)
            else:
                param = _decode_param(key, value)
                try:
                    kind = consume(key, param)
                except extras.error_type as e:
                    raise ExtrasError(e) from e
                if not isinstance(kind, ParamKind):
                    raise TypeError(
                        f"{type(state).__name__} returned {kind!r} for '{key}', expected ParamKind"
                    )
                if kind is ParamKind.UNKNOWN:
                    if key.startswith(REQUIRED_PREFIX):
                        raise UnknownRequiredParameterError(key)
                    logger.debug(f"Ignoring unknown parameter '{key}'")

    try:
        extras_value = state.finalize()
    except extras.error_type as e:
        raise ExtrasError(e) from e

    uri = Uri(
        address=address,
        amount=amount,
        label=label,
        message=message,
        extras=extras_value,
    )
    if detach:
        uri = uri.detach()
    return uri


def _decode_param(key: str, value: str) -> Param:
    try:
        return Param.decode(value)
    except InvalidPercentEncodingError as e:
        raise_uri_error(PercentDecodeError(key, e))


