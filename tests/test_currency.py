"""
Test suite for currency module

Tests two-decimal rounding, permissive amount parsing and display formatting.
All monetary values must come back as Decimal.
"""

import pytest
from decimal import Decimal

from account_ledger.currency import (
    round2, parse_amount, format_amount, add_amounts, subtract_amounts
)


class TestRound2:
    """Test normalization to two decimals"""

    def test_rounds_to_nearest_cent(self):
        """Test extra digits are rounded away"""
        assert round2(Decimal('1.234')) == Decimal('1.23')
        assert round2(Decimal('1.236')) == Decimal('1.24')

    def test_half_cent_rounds_away_from_zero(self):
        """Test half-cent ties round away from zero, not to even"""
        assert round2(Decimal('0.005')) == Decimal('0.01')
        assert round2(Decimal('0.015')) == Decimal('0.02')
        assert round2(Decimal('0.025')) == Decimal('0.03')
        assert round2(Decimal('-0.005')) == Decimal('-0.01')

    def test_accepts_int_float_and_string(self):
        """Test every numeric input type normalizes to Decimal"""
        assert round2(100) == Decimal('100.00')
        assert round2(12.34) == Decimal('12.34')
        assert round2('1.005') == Decimal('1.01')
        assert isinstance(round2(1), Decimal)

    def test_result_has_exactly_two_places(self):
        """Test exponent is always -2"""
        assert round2(Decimal('7')).as_tuple().exponent == -2
        assert str(round2(0)) == '0.00'

    def test_non_numeric_and_non_finite_become_zero(self):
        """Test garbage input normalizes to 0.00"""
        assert round2('abc') == Decimal('0.00')
        assert round2(Decimal('NaN')) == Decimal('0.00')
        assert round2(float('inf')) == Decimal('0.00')
        assert round2(None) == Decimal('0.00')

    def test_large_amounts_keep_cents(self):
        """Test values beyond default precision are not truncated"""
        big = Decimal('123456789012345678901234567890.125')
        assert round2(big) == Decimal('123456789012345678901234567890.13')


class TestParseAmount:
    """Test permissive parsing of console amount input"""

    @pytest.mark.parametrize("raw,expected", [
        ("250.00", Decimal('250.00')),
        ("100", Decimal('100.00')),
        ("  12.34  ", Decimal('12.34')),
        ("1.234", Decimal('1.23')),
        ("-50", Decimal('-50.00')),
        (".5", Decimal('0.50')),
        ("1e3", Decimal('1000.00')),
        ("12.50abc", Decimal('12.50')),
    ])
    def test_numeric_input(self, raw, expected):
        """Test numeric strings and numeric prefixes"""
        assert parse_amount(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", "   ", "$10", "-", None])
    def test_non_numeric_input_is_zero(self, raw):
        """Test input without a numeric prefix yields 0.00 and never raises"""
        assert parse_amount(raw) == Decimal('0.00')


class TestFormatAmount:
    """Test display formatting"""

    def test_two_decimals_without_grouping(self):
        """Test formatting matches the balance line format"""
        assert format_amount(Decimal('1000')) == "1000.00"
        assert format_amount(Decimal('1001000.5')) == "1001000.50"
        assert format_amount(Decimal('-50')) == "-50.00"
        assert format_amount(Decimal('1.234')) == "1.23"


class TestAmountArithmetic:
    """Test exact add/subtract helpers"""

    def test_add_and_subtract(self):
        """Test ordinary sums stay at two decimals"""
        assert add_amounts(Decimal('1000.00'), Decimal('1.23')) == Decimal('1001.23')
        assert subtract_amounts(Decimal('1000.00'), Decimal('200.00')) == Decimal('800.00')

    def test_no_precision_loss_on_large_balances(self):
        """Test a cent still counts beyond 28 significant digits"""
        big = Decimal('1000000000000000000000000000000.00')
        assert add_amounts(big, Decimal('0.01')) == Decimal('1000000000000000000000000000000.01')
        assert subtract_amounts(big, Decimal('0.01')) == Decimal('999999999999999999999999999999.99')
