"""bip21 - BIP21 payment URI parsing and formatting.

Parses and formats ``bitcoin:`` URIs with support for extra parameters
defined outside of this package, including the ``req-`` convention.

Quick Start:
    ```python
    from bip21 import Address, Uri

    # Parse; label and message are decoded lazily
    uri = Uri.parse("bitcoin:1andreas3batLhQa2FawWjeyjCqyBzypd?amount=20.3&label=Luke-Jr")
    uri.amount  # 2030000000
    uri.label.to_str()  # "Luke-Jr"
    uri = uri.require_network("bitcoin")

    # Format
    uri = Uri(Address.parse("1andreas3batLhQa2FawWjeyjCqyBzypd"), amount=50_000, message="Thanks!")
    str(uri)  # "bitcoin:1andreas3batLhQa2FawWjeyjCqyBzypd?amount=0.00050000&message=Thanks!"
    ```
"""

# Core components
from .uri import Uri
from .param import Param

# Collaborators
from .address import Address, AddressError, Network, NetworkMismatchError
from .amount import AmountError, Denomination, format_amount, parse_amount

# Interfaces (for implementing custom extras)
from .de import DeserializationState, DeserializeParams, ParamKind, parse_uri
from .ser import SerializeParams, format_uri
from .extras import EmptyState, ModelParams, NoExtras, NoExtrasError

# Configuration
from .config import Bip21Config, configure, get_config, override_config

# Errors
from .errors import (
    Bip21Error,
    ExtrasError,
    InvalidAddressError,
    InvalidAmountError,
    InvalidSchemeError,
    MissingEqualsError,
    NonTextValuesDisabledError,
    PercentDecodeError,
    TooShortError,
    UnknownRequiredParameterError,
    UriError,
)
from .percent import InvalidPercentEncodingError

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core components
    "Uri",
    "Param",
    "parse_uri",
    "format_uri",
    # Collaborators
    "Address",
    "AddressError",
    "Network",
    "NetworkMismatchError",
    "Denomination",
    "AmountError",
    "parse_amount",
    "format_amount",
    # Interfaces
    "ParamKind",
    "DeserializationState",
    "DeserializeParams",
    "SerializeParams",
    # Extras
    "NoExtras",
    "NoExtrasError",
    "EmptyState",
    "ModelParams",
    # Configuration
    "Bip21Config",
    "configure",
    "get_config",
    "override_config",
    # Errors
    "Bip21Error",
    "UriError",
    "TooShortError",
    "InvalidSchemeError",
    "InvalidAddressError",
    "InvalidAmountError",
    "UnknownRequiredParameterError",
    "PercentDecodeError",
    "MissingEqualsError",
    "ExtrasError",
    "NonTextValuesDisabledError",
    "InvalidPercentEncodingError",
]
