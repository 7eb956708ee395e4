"""Amount string helpers.

Bank exports format amounts with whatever convention their locale uses. The
ledger output wants an ASCII dot as the decimal separator and no thousands
grouping, so amounts using the European convention (``1.344,01``) are
rewritten. This is a heuristic, not a locale parser: the decimal comma is
only recognized when followed by exactly two digits at the end of the value.
"""

from __future__ import annotations

import re

# Comma followed by exactly two trailing digits marks a decimal comma.
_DECIMAL_COMMA_RE = re.compile(r",\d{2}$")


def normalize_amount(raw: str) -> str:
    """Return ``raw`` with a European decimal comma rewritten to a dot.

    When the value ends in ``,dd`` every ``.`` is treated as a thousands
    separator and removed, then the comma becomes the decimal point. Any other
    input, including malformed values, is returned unchanged.

    >>> normalize_amount("1.344,01")
    '1344.01'
    >>> normalize_amount("100.50")
    '100.50'
    """

    if _DECIMAL_COMMA_RE.search(raw):
        return raw.replace(".", "").replace(",", ".")
    return raw


def negate_amount(amount: str) -> str:
    """Flip the sign of a signed amount string without parsing it."""

    if not amount:
        return amount
    if amount.startswith("-"):
        return amount[1:]
    if amount.startswith("+"):
        return f"-{amount[1:]}"
    return f"-{amount}"


def is_negative(amount: str) -> bool:
    return amount.startswith("-")


__all__ = ["is_negative", "negate_amount", "normalize_amount"]
