"""Monetary amounts in minor currency units (cents).

Every stored or computed amount is an ``int`` number of cents. Decimal input
is converted once, on its way into storage, and cents are turned into a
two-decimal string only for display. No float arithmetic is involved.
"""

from decimal import ROUND_HALF_UP, Decimal, DecimalException, InvalidOperation

from protean.exceptions import ValidationError

CENTS_PER_UNIT = 100

_ONE = Decimal("1")
_TWO_PLACES = Decimal("0.01")


def to_minor_units(value, field: str = "price") -> int:
    """Convert a decimal amount (``"19.99"``, ``19``, ``Decimal("1.5")``) to cents.

    Rounds half-up to the nearest cent, so ``"19.999"`` becomes ``2000``.
    Raises ``ValidationError`` keyed by ``field`` for blank, non-numeric,
    non-finite or negative input, and for amounts whose cent value does not
    fit the decimal context.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError({field: ["Price is required"]})
    if isinstance(value, bool):
        raise ValidationError({field: ["Price must be a decimal number"]})

    try:
        amount = Decimal(value.strip()) if isinstance(value, str) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError({field: ["Price must be a decimal number"]}) from None

    if not amount.is_finite():
        raise ValidationError({field: ["Price must be a decimal number"]})
    if amount < 0:
        raise ValidationError({field: ["Price must not be negative"]})

    try:
        cents = (amount * CENTS_PER_UNIT).quantize(_ONE, rounding=ROUND_HALF_UP)
    except DecimalException:
        raise ValidationError({field: ["Price is too large"]}) from None

    return int(cents)


def format_minor_units(cents: int) -> str:
    """Render cents as a two-decimal string: ``1300`` -> ``"13.00"``."""
    if isinstance(cents, bool) or not isinstance(cents, int):
        raise TypeError(f"Amounts are stored as integer cents, got {type(cents).__name__}")
    return str((Decimal(cents) / CENTS_PER_UNIT).quantize(_TWO_PLACES))


def line_total(unit_price: int, quantity: int) -> int:
    return unit_price * quantity
