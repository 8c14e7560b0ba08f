import math
from decimal import Decimal, ROUND_HALF_UP, getcontext, localcontext

getcontext().prec = 28
CENTS = Decimal("0.01")

# one minor currency unit, anything within this of zero counts as settled
EPSILON = 0.01

# enough digits to quantize the largest float to cents
WIDE_PREC = 400


def qround(d: Decimal) -> Decimal:
    return d.quantize(CENTS, rounding=ROUND_HALF_UP)


def round2(amount: float) -> float:
    # inf and nan have no cent value
    if not math.isfinite(amount):
        return amount

    # go through str() so 0.1 + 0.2 rounds as the 0.3 a user sees
    with localcontext() as ctx:
        ctx.prec = WIDE_PREC
        return float(qround(Decimal(str(amount))))


def is_finite(amount: float) -> bool:
    return math.isfinite(amount)


def is_positive(amount: float) -> bool:
    return amount > EPSILON


def is_negative(amount: float) -> bool:
    return amount < -EPSILON


def is_zero(amount: float) -> bool:
    return abs(amount) <= EPSILON
