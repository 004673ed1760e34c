"""The BIP21 URI."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from typing_extensions import Self

from .address import Address, AddressError, Network
from .errors import InvalidAddressError, raise_uri_error
from .extras import NoExtras
from .param import Param
from .ser import format_uri

Extras = TypeVar("Extras")


@dataclass
class Uri(Generic[Extras]):
    """A parsed BIP21 URI, or one about to be formatted.

    Attributes:
        address: Address to pay to. Mandatory in BIP21.
        amount: Requested amount in satoshis.
        label: Label of the address, e.g. name of the receiver.
        message: Message describing the transaction to the user.
        extras: Extra parameters; ``NoExtras`` unless another extras type is used.

    Example:
        ```python
        uri = Uri(Address.parse("1andreas3batLhQa2FawWjeyjCqyBzypd"), label="Luke-Jr")
        str(uri)  # "bitcoin:1andreas3batLhQa2FawWjeyjCqyBzypd?label=Luke-Jr"

        parsed = Uri.parse(str(uri))
        parsed.label.to_str()  # "Luke-Jr"
        ```
    """

    address: Address
    amount: int | None = None
    label: Param | None = None
    message: Param | None = None
    extras: Extras = field(default_factory=NoExtras)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.amount is not None and (
            not isinstance(self.amount, int) or isinstance(self.amount, bool) or self.amount < 0
        ):
            raise ValueError(f"amount must be a non-negative number of satoshis, got {self.amount!r}")
        self.label = _as_param(self.label)
        self.message = _as_param(self.message)

    @classmethod
    def with_extras(cls, address: Address, extras: Extras) -> Self:
        return cls(address=address, extras=extras)

    @classmethod
    def parse(cls, text: str, extras: type[Any] | None = None, *, detach: bool = False) -> Uri:
        """Parse ``text``, see ``bip21.de.parse_uri``."""
        from .de import parse_uri

        return parse_uri(text, extras, detach=detach)

    def detach(self) -> Uri[Extras]:
        """Return a copy whose label and message no longer refer to the parsed input.

        ``extras`` is left as is.
        """
        return dataclasses.replace(
            self,
            label=self.label.detach() if self.label is not None else None,
            message=self.message.detach() if self.message is not None else None,
        )

    def require_network(self, network: Network | str) -> Uri[Extras]:
        """Return a copy with a checked address.

        Raises:
            InvalidAddressError: If the address is not valid on ``network``
        """
        try:
            address = self.address.require_network(network)
        except AddressError as e:
            raise_uri_error(InvalidAddressError(e))
        return dataclasses.replace(self, address=address)

    def assume_checked(self) -> Uri[Extras]:
        """Return a copy whose address is marked checked without validation."""
        return dataclasses.replace(self, address=self.address.assume_checked())

    def to_qr_string(self) -> str:
        """Format with the uppercase scheme and address, for QR codes."""
        return format_uri(self, alternate=True)

    def __str__(self) -> str:
        return format_uri(self)


def _as_param(value: Param | str | bytes | None) -> Param | None:
    if value is None or isinstance(value, Param):
        return value
    return Param(value)
