"""
Unit tests for the vendor PIN formulas and the generator catalog.
"""

from fractions import Fraction

import pytest

from pinpoint.core.checksum import is_valid_pin
from pinpoint.generators import (
    GeneratorError,
    GeneratorKind,
    PinGenerator,
    build_catalog,
    linear_generator,
    static_generator,
)
from pinpoint.generators import formulas

from tests.vectors import B100, B110, B120, ZERO


class TestFixedOffsetFormulas:
    """Test the BSSID-tail formulas"""

    def test_24_bit(self):
        assert formulas.fixed_offset_24("AABBCCDDEEFF") == 0xDDEEFF

    def test_28_bit_reduced_mod_1e8(self):
        assert formulas.fixed_offset_28("AABBCCDDEEFF") == 0xCDDEEFF % 100_000_000

    def test_32_bit_beyond_native_range(self):
        assert 0xCCDDEEFF > 2**31
        assert formulas.fixed_offset_32("AABBCCDDEEFF") == 37096703


class TestVendorFormulas:
    """Test D-Link, EasyBox, ASUS and Airocon formulas on hand-checked BSSIDs"""

    def test_dlink(self):
        assert formulas.dlink(ZERO) == 9065285
        assert formulas.dlink(B100) == 4504353

    def test_dlink_plus_one(self):
        assert formulas.dlink_plus_one(ZERO) == 1175060
        assert formulas.dlink_plus_one(B100) == 5614128

    def test_dlink_always_seven_digits(self):
        for bssid in (ZERO, B100, B110, B120, "FFFFFFFFFFFF"):
            assert 1_000_000 <= formulas.dlink(bssid) < 10_000_000
            assert 1_000_000 <= formulas.dlink_plus_one(bssid) < 10_000_000

    def test_easybox(self):
        assert formulas.easybox(ZERO) == 0
        assert formulas.easybox(B100) == 0xBB0664A
        assert formulas.easybox(B110) == 0x54176F4
        assert formulas.easybox(B120) == 0x2257A1

    def test_asus(self):
        assert formulas.asus(ZERO) == 0
        assert formulas.asus(B100) == 4240001
        assert formulas.asus(B110) == 202632
        assert formulas.asus(B120) == 3010000

    def test_airocon_realtek(self):
        assert formulas.airocon_realtek(ZERO) == 0
        assert formulas.airocon_realtek("010203040506") == 3579173


class TestPinGenerator:
    """Test PIN assembly and generator construction"""

    def test_checksum_variant_appends_check_digit(self):
        gen = PinGenerator(GeneratorKind.FIXED_OFFSET_24, checksum=True)
        assert gen.pin(B100) == 1007
        assert gen.pin_str(B100) == "00001007"

    def test_plain_variant_reduces_mod_1e8(self):
        gen = PinGenerator(GeneratorKind.EASYBOX, checksum=False)
        assert gen.pin(B100) == 0xBB0664A % 100_000_000

    def test_checksum_variant_reduces_base_mod_1e7(self):
        gen = PinGenerator(GeneratorKind.EASYBOX, checksum=True)
        pin = gen.pin(B100)
        assert pin // 10 == 0xBB0664A % 10_000_000
        assert is_valid_pin(pin)

    def test_names(self):
        assert PinGenerator(GeneratorKind.DLINK_PLUS_ONE, True).name == "D-Link PIN +1"
        assert static_generator(5, False).name == "Static PIN"
        assert linear_generator(1, 0, False).name == "Linear sequence"

    def test_generators_are_immutable(self):
        gen = PinGenerator(GeneratorKind.ASUS, True)
        with pytest.raises(AttributeError):
            gen.checksum = False  # type: ignore[misc]

    def test_wrong_parameter_count(self):
        with pytest.raises(GeneratorError):
            PinGenerator(GeneratorKind.STATIC, False)
        with pytest.raises(GeneratorError):
            PinGenerator(GeneratorKind.DLINK, False, (1,))


class TestDataDerivedGenerators:
    """Test Linear and Static generators"""

    def test_linear_zero_slope_rejected(self):
        with pytest.raises(GeneratorError):
            linear_generator(0, 10, False)
        with pytest.raises(ValueError):
            linear_generator(Fraction(0, 7), 10, True)

    def test_linear_exact_division(self):
        gen = linear_generator(1, -900, False)
        assert gen.base_pin(B100) == 1000
        assert gen.base_pin(B110) == 1010

    def test_linear_fractional_slope(self):
        gen = linear_generator(Fraction(1, 2), 0, False)
        assert gen.base_pin(B100) == 200

    def test_linear_truncates_toward_zero(self):
        gen = linear_generator(3, 0, False)
        assert gen.base_pin(B100) == 33

    def test_linear_negative_results_wrap(self):
        gen = linear_generator(1, 1000, False)
        assert gen.base_pin(B100) == 100_000_000 - 900

    def test_linear_on_full_48_bit_value(self):
        gen = linear_generator(1, 0xFFFFFF000000, False)
        assert gen.base_pin("FFFFFF000010") == 16

    def test_static_ignores_bssid(self):
        gen = static_generator(1234567, True)
        assert gen.pin(ZERO) == gen.pin(B120) == 12345670


class TestCatalog:
    """Test the 16-member catalog"""

    def test_sixteen_members_checksum_first(self):
        catalog = build_catalog()
        assert len(catalog) == 16
        assert all(g.checksum for g in catalog[:8])
        assert not any(g.checksum for g in catalog[8:])
        assert [g.kind for g in catalog[:8]] == [g.kind for g in catalog[8:]]

    def test_catalog_order(self):
        names = [g.name for g in build_catalog()[:8]]
        assert names == [
            "24-bit PIN",
            "ASUS PIN",
            "D-Link PIN +1",
            "32-bit PIN",
            "28-bit PIN",
            "Airocon Realtek PIN",
            "D-Link PIN",
            "Vodafone EasyBox PIN",
        ]

    def test_no_data_derived_members(self):
        kinds = {g.kind for g in build_catalog()}
        assert GeneratorKind.LINEAR not in kinds
        assert GeneratorKind.STATIC not in kinds

    @pytest.mark.parametrize("bssid", [ZERO, B100, "14D64D123456", "FFFFFFFFFFFF"])
    def test_pure_and_valid(self, bssid):
        for gen in build_catalog():
            first = gen.pin(bssid)
            assert gen.pin(bssid) == first
            assert 0 <= first < 100_000_000
            if gen.checksum:
                assert is_valid_pin(first)
