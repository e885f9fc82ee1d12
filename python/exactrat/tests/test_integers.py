# Tests for integers.py - GCD and checked arithmetic

import pytest


class TestGcd:
    """Tests for the Euclidean gcd helpers."""

    def test_basic(self):
        from exactrat.integers import gcd
        assert gcd(12, 18) == 6
        assert gcd(17, 5) == 1

    def test_zero_argument(self):
        from exactrat.integers import gcd
        assert gcd(7, 0) == 7
        assert gcd(0, 7) == 7

    def test_signed_inputs_up_to_sign(self):
        from exactrat.integers import gcd, abs_gcd
        assert abs(gcd(-12, 18)) == 6
        assert abs(gcd(12, -18)) == 6
        assert abs_gcd(-12, -18) == 6

    def test_abs_gcd_non_negative(self):
        from exactrat.integers import abs_gcd
        for a, b in [(-4, 6), (4, -6), (-4, -6), (0, -5)]:
            assert abs_gcd(a, b) >= 0

    def test_large_values(self):
        from exactrat.integers import gcd
        assert gcd(2**62, 2**40 * 3) == 2**40
        # consecutive Fibonacci numbers take the most steps
        assert gcd(7540113804746346429, 4660046610375530309) == 1


class TestFixedWidth:
    """Tests for FixedWidth checked arithmetic."""

    def test_in_range(self):
        from exactrat.integers import FixedWidth
        w = FixedWidth(-128, 127)
        assert w.add(100, 27) == 127
        assert w.sub(-100, 28) == -128
        assert w.mul(-16, 8) == -128
        assert w.neg(127) == -127

    def test_out_of_range(self):
        from exactrat.integers import FixedWidth
        from exactrat.exceptions import RationalOverflowError
        w = FixedWidth(-128, 127)
        with pytest.raises(RationalOverflowError, match="overflow in add"):
            w.add(100, 28)
        with pytest.raises(RationalOverflowError):
            w.mul(16, 8)
        with pytest.raises(RationalOverflowError, match="overflow in neg"):
            w.neg(-128)

    def test_operation_name_in_error(self):
        from exactrat.integers import FixedWidth
        from exactrat.exceptions import RationalOverflowError
        w = FixedWidth(-8, 7)
        with pytest.raises(RationalOverflowError, match="overflow in pow"):
            w.mul(4, 4, "pow")

    def test_fits(self):
        from exactrat.integers import FixedWidth
        w = FixedWidth(-8, 7)
        assert w.fits(7)
        assert w.fits(-8)
        assert not w.fits(8)

    def test_invalid_range(self):
        from exactrat.integers import FixedWidth
        with pytest.raises(ValueError, match="Invalid integer range"):
            FixedWidth(0, 10)

    def test_equality(self):
        from exactrat.integers import FixedWidth
        assert FixedWidth(-8, 7) == FixedWidth(-8, 7)
        assert FixedWidth(-8, 7) != FixedWidth(-7, 7)
        assert repr(FixedWidth(-8, 7)) == "FixedWidth[-8, 7]"
