"""
Unit tests for BSSID / PIN formatting and the WPS checksum.
"""

import pytest

from pinpoint.core.checksum import checksum, is_valid_pin, with_checksum
from pinpoint.core.codec import (
    bssid_octets,
    bssid_to_int,
    format_bssid,
    int_to_bssid,
    low24,
    pin_to_str,
)


class TestFormatBssid:
    """Test BSSID canonicalisation"""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("00:1a:2b:3c:4d:5e", "001A2B3C4D5E"),
            ("00-1A-2B-3C-4D-5E", "001A2B3C4D5E"),
            ("001a.2b3c.4d5e", "001A2B3C4D5E"),
            ("abc", "000000000ABC"),
            ("", "000000000000"),
            ("zz:yy", "000000000000"),
        ],
    )
    def test_canonical_forms(self, raw, expected):
        assert format_bssid(raw) == expected

    def test_long_input_keeps_leftmost_digits(self):
        """Excess digits are cut from the right, not the left"""
        assert format_bssid("00112233445566") == "001122334455"

    @pytest.mark.parametrize(
        "raw", ["00:1a:2b:3c:4d:5e", "abc", "", "00112233445566", "g-h-1"]
    )
    def test_idempotent(self, raw):
        once = format_bssid(raw)
        assert format_bssid(once) == once


class TestIntegerViews:
    """Test integer conversions of canonical BSSIDs"""

    def test_full_value_exceeds_32_bits(self):
        assert bssid_to_int("FFFFFFFFFFFF") == 2**48 - 1

    def test_round_trip_through_int(self):
        assert int_to_bssid(bssid_to_int("0A1B2C3D4E5F")) == "0A1B2C3D4E5F"

    def test_low24(self):
        assert low24("AABBCCDDEEFF") == 0xDDEEFF

    def test_octets(self):
        assert bssid_octets("0A1B2C3D4E5F") == [0x0A, 0x1B, 0x2C, 0x3D, 0x4E, 0x5F]

    def test_pin_to_str_pads(self):
        assert pin_to_str(1007) == "00001007"
        assert pin_to_str(12345670) == "12345670"


class TestChecksum:
    """Test the WPS check digit"""

    def test_known_default_pin(self):
        assert checksum(1234567) == 0
        assert is_valid_pin(12345670)

    def test_small_bases(self):
        assert checksum(0) == 0
        assert checksum(100) == 7
        assert with_checksum(110) == 1106

    @pytest.mark.parametrize("base", [0, 1, 9, 100, 4242424, 1234567, 9999999, 5000000])
    def test_appended_digit_is_valid(self, base):
        digit = checksum(base)
        assert 0 <= digit <= 9
        assert is_valid_pin(base * 10 + digit)

    @pytest.mark.parametrize("base", [0, 100, 1234567, 9999999])
    def test_exactly_one_valid_last_digit(self, base):
        valid = [d for d in range(10) if is_valid_pin(base * 10 + d)]
        assert valid == [checksum(base)]

    def test_sentinel_pin_is_invalid(self):
        assert not is_valid_pin(1)
