from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext

getcontext().prec = 28
CENTS = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")


def qround(d: Decimal) -> Decimal:
    return d.quantize(CENTS, rounding=ROUND_HALF_UP)


def to_decimal(value) -> Decimal | None:
    """
    Money and percentages travel as Decimal.

    Floats go through str() so 0.1 stays 0.1 instead of its binary
    expansion. Returns None for anything that is not a finite number.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        d = value
    else:
        try:
            d = Decimal(str(value))
        except (InvalidOperation, ValueError):
            return None

    if not d.is_finite():
        return None

    return d
