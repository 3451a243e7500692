"""
WPS PIN Checksum
=================

The last digit of an 8-digit WPS PIN is a mod-10 weighted check digit
over the first seven.  Digits are weighted 3, 1, 3, 1, ... starting from
the least significant one.

Reference:
    Wi-Fi Alliance. (2014). Wi-Fi Simple Configuration Technical
    Specification v2.0.5, Section 7.4: Device Password.
"""

from __future__ import annotations


def checksum(base: int) -> int:
    """Check digit for a base PIN (the PIN without its last digit).

    Args:
        base: Non-negative integer, normally 7 digits or fewer.

    Returns:
        Check digit in [0, 9].
    """
    accum = 0
    while base:
        accum += 3 * (base % 10)
        base //= 10
        accum += base % 10
        base //= 10
    return (10 - accum % 10) % 10


def with_checksum(base: int) -> int:
    """Append the check digit to a base PIN."""
    return base * 10 + checksum(base)


def is_valid_pin(pin: int) -> bool:
    """``True`` when the last digit of *pin* is the check digit of the rest."""
    return pin % 10 == checksum(pin // 10)
