"""
Amount Normalization Module

Every monetary value in the ledger passes through round2 so the balance never
carries more than two fractional digits. NEVER uses float arithmetic for
monetary values: floats are converted through their string form first.
"""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation, localcontext
from typing import Optional, Union
import re

CENT = Decimal('0.01')
ZERO = Decimal('0.00')
# Decimal default Emax; larger magnitudes cannot be quantized
MAX_ADJUSTED_EXPONENT = 999999

Numeric = Union[Decimal, int, float, str]

# Longest leading decimal literal, e.g. "12.50abc" -> "12.50"
_AMOUNT_PREFIX = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')


def _to_decimal(value: Numeric) -> Optional[Decimal]:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, str)):
        try:
            return Decimal(str(value).strip())
        except InvalidOperation:
            return None
    return None


def round2(value: Numeric) -> Decimal:
    """
    Round a numeric value to exactly two fractional digits.

    Half-cents round away from zero (ROUND_HALF_UP in the decimal module),
    so 0.005 -> 0.01 and -0.005 -> -0.01.

    Args:
        value: Decimal, int, float or numeric string

    Returns:
        Decimal quantized to 0.01, or 0.00 for non-numeric/non-finite input
    """
    amount = _to_decimal(value)
    if amount is None or not amount.is_finite():
        return ZERO

    if amount.adjusted() > MAX_ADJUSTED_EXPONENT:
        return ZERO

    with localcontext() as ctx:
        # Widen precision so large amounts keep every cent
        ctx.prec = max(28, amount.adjusted() + 4)
        try:
            return amount.quantize(CENT, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            return ZERO


def parse_amount(raw: Optional[str]) -> Decimal:
    """
    Parse a console amount string permissively.

    Leading whitespace is ignored and the longest numeric prefix is used.
    Input without a numeric prefix normalizes to 0.00 instead of raising.
    """
    if raw is None:
        return ZERO
    match = _AMOUNT_PREFIX.match(str(raw).strip())
    if not match:
        return ZERO
    return round2(match.group(0))


def format_amount(value: Numeric) -> str:
    """Format for display with exactly two decimals and no grouping"""
    return f"{round2(value):.2f}"


def add_amounts(a: Decimal, b: Decimal) -> Decimal:
    """Exact sum of two normalized amounts, rounded to two decimals"""
    with localcontext() as ctx:
        ctx.prec = max(28, a.adjusted(), b.adjusted()) + 4
        return round2(a + b)


def subtract_amounts(a: Decimal, b: Decimal) -> Decimal:
    """Exact difference of two normalized amounts, rounded to two decimals"""
    with localcontext() as ctx:
        ctx.prec = max(28, a.adjusted(), b.adjusted()) + 4
        return round2(a - b)
