from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from enum import Enum


class BalanceStyle(str, Enum):
    INTEGER = "integer"
    FIXED = "fixed"


_ONE = Decimal("1")
_CENTS = Decimal("0.01")


def to_decimal(value) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite():
        return None
    return number


def format_compact_number(value) -> str:
    number = to_decimal(value)
    if number is None:
        return "0"
    for threshold, suffix in ((Decimal("1e9"), "B"), (Decimal("1e6"), "M"), (Decimal("1e3"), "K")):
        if number >= threshold:
            scaled = _quantize(number / threshold, _CENTS)
            return f"{scaled}{suffix}"
    return _group(number)


def shorten_address(address: str | None) -> str:
    if not address:
        return ""
    return f"{address[:6]}...{address[-4:]}"


def scale_token_amount(raw, decimals: int) -> Decimal | None:
    number = to_decimal(raw)
    if number is None:
        return None
    return number.scaleb(-decimals)


def format_token_balance(raw, *, decimals: int, style: BalanceStyle = BalanceStyle.INTEGER) -> str:
    """Render a raw on-chain balance scaled down by ``10 ** decimals``.

    ``INTEGER`` rounds half-up to a whole number with thousands separators,
    ``FIXED`` keeps two decimal places without separators.
    """
    if raw in (None, ""):
        return "0"
    scaled = scale_token_amount(raw, decimals)
    if scaled is None:
        return "0"
    if style is BalanceStyle.INTEGER:
        return f"{_quantize(scaled, _ONE):,}"
    return f"{_quantize(scaled, _CENTS)}"


def format_usd(value) -> str:
    number = to_decimal(value)
    if number is None:
        return "$0.00"
    return f"${_quantize(number, _CENTS):,}"


def _group(number: Decimal) -> str:
    if number == number.to_integral_value():
        return f"{_quantize(number, _ONE):,}"
    # Up to three fraction digits, trailing zeros dropped.
    text = f"{_quantize(number, Decimal('0.001')):,}"
    return text.rstrip("0").rstrip(".")


def _quantize(number: Decimal, exp: Decimal) -> Decimal:
    # On-chain amounts (uint256) exceed the default 28-digit context.
    digits = max(number.adjusted(), 0) + 1 - exp.as_tuple().exponent
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits + 1)
        return number.quantize(exp, rounding=ROUND_HALF_UP)
