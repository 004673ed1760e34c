"""Parsing and formatting of amounts in fixed-point denominations."""

from __future__ import annotations

import enum
import re

MAX_SATOSHIS = 2**64 - 1
# Longer whole parts overflow in any denomination; checked before int() conversion.
MAX_WHOLE_DIGITS = len(str(MAX_SATOSHIS))

_AMOUNT_PATTERN = re.compile(r"(?P<whole>[0-9]*)(?:\.(?P<fraction>[0-9]*))?")


class Denomination(enum.Enum):
    """Units an amount can be written in, valued by their number of decimals."""

    BITCOIN = 8
    MILLI_BITCOIN = 5
    MICRO_BITCOIN = 2
    SATOSHI = 0

    @property
    def precision(self) -> int:
        return self.value


class AmountError(ValueError):
    """Raised when an amount can not be parsed."""

    pass


def parse_amount(text: str, denomination: Denomination = Denomination.BITCOIN) -> int:
    """Parse a decimal amount into satoshis.

    Args:
        text: Decimal string, e.g. "20.3"
        denomination: Unit ``text`` is written in

    Returns:
        Amount in satoshis

    Raises:
        AmountError: If the text is not a valid non-negative amount
    """
    if text.startswith("-"):
        raise AmountError(f"amount is negative: {text!r}")
    match = _AMOUNT_PATTERN.fullmatch(text)
    if match is None:
        raise AmountError(f"invalid character in amount: {text!r}")
    whole = match.group("whole")
    fraction = match.group("fraction") or ""
    if not whole and not fraction:
        raise AmountError(f"amount has no digits: {text!r}")

    precision = denomination.precision
    if len(fraction.rstrip("0")) > precision:
        raise AmountError(f"amount {text!r} is too precise for {denomination.name.lower()}")
    fraction = fraction[:precision].ljust(precision, "0")
    whole = whole.lstrip("0")
    if len(whole) > MAX_WHOLE_DIGITS:
        raise AmountError(f"amount is too big: {text!r}")

    satoshis = int(whole or "0") * 10**precision + int(fraction or "0")
    if satoshis > MAX_SATOSHIS:
        raise AmountError(f"amount is too big: {text!r}")
    return satoshis


def format_amount(satoshis: int, denomination: Denomination = Denomination.BITCOIN) -> str:
    """Format satoshis in ``denomination`` with its full precision.

    Example:
        ```python
        format_amount(2_030_000_000)  # "20.30000000"
        format_amount(150, Denomination.SATOSHI)  # "150"
        ```
    """
    if satoshis < 0:
        raise AmountError(f"amount is negative: {satoshis}")
    precision = denomination.precision
    if precision == 0:
        return str(satoshis)
    whole, fraction = divmod(satoshis, 10**precision)
    return f"{whole}.{fraction:0{precision}d}"
