"""Errors raised while parsing BIP21 URIs.

Parsing fails with either a ``UriError`` (the URI itself is malformed, whatever
extras type is in use) or an ``ExtrasError`` (the extension rejected its
parameters). Both derive from ``Bip21Error``.
"""

from __future__ import annotations

from typing import Any, NoReturn

from .config import get_config


class Bip21Error(Exception):
    """Base class for BIP21 parsing errors."""

    pass


class UriError(Bip21Error):
    """Raised when the non-extras part of the URI is invalid.

    Attributes:
        cause: The collaborator error (address, amount or percent-decoding
            failure) this error was derived from, if any.
    """

    def __init__(self, message: str, *, cause: BaseException | None = None):
        if cause is not None and not get_config().integrate_platform_errors:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.cause = cause


class TooShortError(UriError):
    """Raised when the input is shorter than the scheme."""

    def __init__(self) -> None:
        super().__init__("the URI is too short")


class InvalidSchemeError(UriError):
    """Raised when the input does not start with the ``bitcoin:`` scheme."""

    def __init__(self, scheme: str):
        super().__init__("the URI has invalid scheme")
        self.scheme = scheme


class InvalidAddressError(UriError):
    """Raised when the address fails to parse or is on the wrong network."""

    def __init__(self, cause: BaseException):
        super().__init__("the address is invalid", cause=cause)


class InvalidAmountError(UriError):
    """Raised when the ``amount`` parameter fails to parse."""

    def __init__(self, cause: BaseException):
        super().__init__("the amount is invalid", cause=cause)


class UnknownRequiredParameterError(UriError):
    """Raised when a ``req-`` parameter is not understood by the extras type."""

    def __init__(self, parameter: str):
        super().__init__(f"the URI contains unknown required parameter '{parameter}'")
        self.parameter = parameter


class PercentDecodeError(UriError):
    """Raised when the value of ``parameter`` is not valid percent-encoding."""

    def __init__(self, parameter: str, cause: BaseException):
        super().__init__(f"can not percent-decode parameter {parameter}", cause=cause)
        self.parameter = parameter


class MissingEqualsError(UriError):
    """Raised when a query pair has no ``=`` separator."""

    def __init__(self, parameter: str):
        super().__init__(f"the parameter '{parameter}' is missing a value")
        self.parameter = parameter


class ExtrasError(Bip21Error):
    """Raised when the extras type fails to deserialize its parameters.

    Attributes:
        error: The error reported by the extras implementation.
    """

    def __init__(self, error: Any):
        super().__init__(f"failed to parse extra argument(s): {error}")
        self.error = error


class NonTextValuesDisabledError(RuntimeError):
    """Raised on byte-oriented ``Param`` use while ``allow_non_text_values`` is off."""

    def __init__(self, operation: str):
        super().__init__(
            f"{operation} requires non-text values; enable them with "
            "bip21.configure(allow_non_text_values=True)"
        )
        self.operation = operation


def raise_uri_error(error: UriError) -> NoReturn:
    """Raise ``error``, chained to its cause when platform error integration is on."""
    if get_config().integrate_platform_errors:
        raise error from error.cause
    raise error from None
