"""
Value formatters for Brazilian Portuguese display.

Both formatters are total: anything that is not a finite number is shown
as zero.
"""

from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Any

from .config import CURRENCY_SYMBOL, DECIMAL_SEPARATOR, THOUSANDS_SEPARATOR
from .loaders.utils import safe_float

_TO_LOCALE = str.maketrans({",": THOUSANDS_SEPARATOR, ".": DECIMAL_SEPARATOR})

# Wide enough to quantize any finite float without InvalidOperation
_CONTEXT = Context(prec=400)


def _to_decimal(value: Any) -> Decimal:
    number = safe_float(value)
    if number is None:
        number = 0.0
    # str() keeps the shortest repr, so 1.005 rounds as written
    return Decimal(str(number))


def format_currency(value: Any) -> str:
    """Format as pt-BR currency, e.g. 1234.5 -> 'R$ 1.234,50'."""
    amount = _to_decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP, context=_CONTEXT)
    text = f"{amount.copy_abs():,.2f}".translate(_TO_LOCALE)
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL} {text}"


def format_number(value: Any) -> str:
    """Format with pt-BR grouping and up to three decimals, e.g. 1234.5 -> '1.234,5'."""
    number = _to_decimal(value).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP, context=_CONTEXT)
    if number == 0:
        number = Decimal(0)
    text = f"{number:,.3f}".rstrip("0").rstrip(".")
    return text.translate(_TO_LOCALE)
