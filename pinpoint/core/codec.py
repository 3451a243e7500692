"""
PinPoint BSSID / PIN Codec
===========================

Canonical text forms for BSSIDs and WPS PINs, plus the two integer
views of a BSSID used throughout the predictor.

A canonical BSSID is 12 uppercase hex digits with no separators.  The
canonicaliser is permissive: any characters other than hex digits are
dropped, short input is left-padded with zeros, and long input keeps its
*leftmost* 12 digits.
"""

from __future__ import annotations

import re

_NON_HEX = re.compile(r"[^0-9A-Fa-f]")

BSSID_DIGITS = 12
PIN_DIGITS = 8


def format_bssid(bssid: str) -> str:
    """Canonicalise a BSSID to 12 uppercase hex digits.

    >>> format_bssid("00:1a:2b:3c:4d:5e")
    '001A2B3C4D5E'
    >>> format_bssid("abc")
    '000000000ABC'
    >>> format_bssid("00112233445566")
    '001122334455'
    """
    digits = _NON_HEX.sub("", bssid)
    return digits.rjust(BSSID_DIGITS, "0")[:BSSID_DIGITS].upper()


def pin_to_str(pin: int) -> str:
    """Render a PIN as an 8-digit zero-padded decimal string."""
    return f"{pin:0{PIN_DIGITS}d}"


def bssid_to_int(bssid: str) -> int:
    """Full 48-bit integer value of a canonical BSSID."""
    return int(bssid, 16)


def int_to_bssid(value: int) -> str:
    """Canonical BSSID for a 48-bit integer."""
    return f"{value:0{BSSID_DIGITS}X}"


def low24(bssid: str) -> int:
    """Low 24 bits (last 6 hex digits) of a canonical BSSID."""
    return int(bssid[6:12], 16)


def bssid_octets(bssid: str) -> list[int]:
    """The six bytes of a canonical BSSID, most significant first."""
    return [int(bssid[i:i + 2], 16) for i in range(0, BSSID_DIGITS, 2)]
