"""Bitcoin addresses as they appear in BIP21 URIs.

Supports base58check (P2PKH, P2SH) and segwit (bech32 for version 0,
bech32m for versions 1 to 16) addresses. Parsed addresses are *unchecked*:
the network they belong to is known but has not been validated against the
network the caller expects, see ``Address.require_network``.
"""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field

import base58
from typing_extensions import Self

# ============================================================================
# Networks
# ============================================================================


class Network(str, enum.Enum):
    BITCOIN = "bitcoin"
    TESTNET = "testnet"
    TESTNET4 = "testnet4"
    SIGNET = "signet"
    REGTEST = "regtest"


class NetworkKind(str, enum.Enum):
    """Address encoding family; test networks share their prefixes."""

    MAIN = "main"
    TEST = "test"
    REGTEST = "regtest"


# (version byte) -> (kind, network kind)
BASE58_VERSIONS = {
    0x00: ("p2pkh", NetworkKind.MAIN),
    0x05: ("p2sh", NetworkKind.MAIN),
    0x6F: ("p2pkh", NetworkKind.TEST),
    0xC4: ("p2sh", NetworkKind.TEST),
}

SEGWIT_HRPS = {
    "bc": NetworkKind.MAIN,
    "tb": NetworkKind.TEST,
    "bcrt": NetworkKind.REGTEST,
}

MAX_BASE58_LENGTH = 50


class AddressError(ValueError):
    """Raised when an address can not be parsed."""

    pass


class NetworkMismatchError(AddressError):
    """Raised when an address is not valid for the required network."""

    def __init__(self, address: Address, required: Network):
        super().__init__(f"address {address} is not valid on network {required.value}")
        self.address = address
        self.required = required


# ============================================================================
# Address
# ============================================================================


@dataclass(frozen=True)
class Address:
    """A parsed address.

    Attributes:
        text: Canonical string form (lowercase for segwit addresses).
        kind: One of ``p2pkh``, ``p2sh`` or ``segwit``.
        network_kind: Prefix family the address was encoded for.
        payload: Hash (base58) or witness program (segwit).
        witness_version: Segwit version, ``None`` for base58 addresses.
        checked: Whether the network was validated.
    """

    text: str
    kind: str
    network_kind: NetworkKind
    payload: bytes = field(repr=False)
    witness_version: int | None = None
    checked: bool = field(default=False, compare=False)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse an address without checking its network.

        Raises:
            AddressError: If the address is malformed
        """
        lowered = text.lower()
        for hrp, network_kind in sorted(SEGWIT_HRPS.items(), key=lambda item: -len(item[0])):
            if lowered.startswith(hrp + "1"):
                version, program = _decode_segwit(hrp, text)
                return cls(
                    text=lowered,
                    kind="segwit",
                    network_kind=network_kind,
                    payload=program,
                    witness_version=version,
                )
        return cls._parse_base58(text)

    @classmethod
    def _parse_base58(cls, text: str) -> Self:
        if len(text) > MAX_BASE58_LENGTH:
            raise AddressError(f"base58 address is too long: {len(text)} characters")
        try:
            data = base58.b58decode_check(text)
        except ValueError as e:
            raise AddressError(f"invalid base58 address: {e}") from e
        if len(data) != 21:
            raise AddressError(f"invalid base58 payload length: {len(data)}")
        try:
            kind, network_kind = BASE58_VERSIONS[data[0]]
        except KeyError:
            raise AddressError(f"unknown base58 version byte: {data[0]:#04x}") from None
        return cls(text=text, kind=kind, network_kind=network_kind, payload=data[1:])

    def is_valid_for_network(self, network: Network | str) -> bool:
        network = Network(network)
        if self.network_kind is NetworkKind.MAIN:
            return network is Network.BITCOIN
        if self.network_kind is NetworkKind.REGTEST:
            return network is Network.REGTEST
        # base58 test prefixes are shared with regtest, "tb" is not
        if network is Network.REGTEST:
            return self.kind != "segwit"
        return network is not Network.BITCOIN

    def require_network(self, network: Network | str) -> Address:
        """Return a checked copy if the address is valid on ``network``.

        Raises:
            NetworkMismatchError: If it is not
        """
        network = Network(network)
        if not self.is_valid_for_network(network):
            raise NetworkMismatchError(self, network)
        return dataclasses.replace(self, checked=True)

    def assume_checked(self) -> Address:
        """Return a checked copy without validating the network."""
        return dataclasses.replace(self, checked=True)

    def to_qr_string(self) -> str:
        """Uppercase form for segwit addresses, which encodes densely in QR codes."""
        if self.kind == "segwit":
            return self.text.upper()
        return self.text

    def __str__(self) -> str:
        return self.text


# ============================================================================
# Bech32 / bech32m (BIP173, BIP350)
# ============================================================================

BECH32_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
BECH32_CONST = 1
BECH32M_CONST = 0x2BC830A3
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)


def _polymod(values: list[int]) -> int:
    chk = 1
    for value in values:
        top = chk >> 25
        chk = (chk & 0x1FFFFFF) << 5 ^ value
        for i, generator in enumerate(_GENERATOR):
            if (top >> i) & 1:
                chk ^= generator
    return chk


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _convert_bits(data: list[int], from_bits: int, to_bits: int) -> list[int] | None:
    acc = 0
    bits = 0
    result = []
    max_value = (1 << to_bits) - 1
    max_acc = (1 << (from_bits + to_bits - 1)) - 1
    for value in data:
        acc = ((acc << from_bits) | value) & max_acc
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            result.append((acc >> bits) & max_value)
    if bits >= from_bits or ((acc << (to_bits - bits)) & max_value):
        return None
    return result


def _decode_segwit(expected_hrp: str, text: str) -> tuple[int, bytes]:
    if text.lower() != text and text.upper() != text:
        raise AddressError("segwit address mixes upper and lower case")
    if len(text) > 90:
        raise AddressError(f"segwit address is too long: {len(text)} characters")
    text = text.lower()
    separator = text.rfind("1")
    if separator != len(expected_hrp) or separator + 7 > len(text):
        raise AddressError("invalid segwit address separator position")
    hrp = text[:separator]
    try:
        data = [BECH32_CHARSET.index(c) for c in text[separator + 1 :]]
    except ValueError:
        raise AddressError("invalid character in segwit address") from None

    const = _polymod(_hrp_expand(hrp) + data)
    if const not in (BECH32_CONST, BECH32M_CONST):
        raise AddressError("invalid segwit address checksum")

    version = data[0]
    program = _convert_bits(data[1:-6], 5, 8)
    if program is None or not 2 <= len(program) <= 40:
        raise AddressError("invalid witness program length")
    if version > 16:
        raise AddressError(f"invalid witness version: {version}")
    if version == 0 and len(program) not in (20, 32):
        raise AddressError(f"invalid segwit v0 program length: {len(program)}")
    expected_const = BECH32_CONST if version == 0 else BECH32M_CONST
    if const != expected_const:
        variant = "bech32" if version == 0 else "bech32m"
        raise AddressError(f"witness version {version} must use {variant} checksum")
    return version, bytes(program)
