"""
Unit Tests - Currency Units
"""
import pytest

from storefront.dashboard.units import minor_amount, to_major_units, to_minor_units


class TestUnitConversion:
    """Tests for cents/dollars conversion"""

    def test_to_major_units(self):
        assert to_major_units(45000) == 450.00
        assert to_major_units(1) == 0.01

    def test_none_counts_as_zero(self):
        assert to_major_units(None) == 0
        assert to_minor_units(None) == 0

    def test_to_minor_units(self):
        assert to_minor_units(249.99) == 24999
        assert to_minor_units(19.9) == 1990

    def test_rounds_half_up(self):
        """0.005 is a tie that binary floats would otherwise round down"""
        assert to_minor_units(0.005) == 1
        assert to_minor_units(1.005) == 101
        assert to_minor_units(2.675) == 268

    @pytest.mark.parametrize("cents", [0, 1, 99, 100, 8999, 45000, 123456789, 10**12 + 37, 10**14 + 99])
    def test_round_trip(self, cents):
        assert to_minor_units(to_major_units(cents)) == cents


class TestMinorAmount:
    """Tests for reading stored amounts"""

    def test_ints_pass_through(self):
        assert minor_amount(45000) == 45000

    def test_missing_is_zero(self):
        assert minor_amount(None) == 0

    def test_fractional_cents_are_rounded(self):
        assert minor_amount(1999.5) == 2000

    @pytest.mark.parametrize("value", ["45000", True, [1]])
    def test_non_numeric_raises(self, value):
        with pytest.raises(TypeError):
            minor_amount(value)
