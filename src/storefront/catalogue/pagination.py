"""Catalogue page-bounds computation.

Pure and stateless: given the authoritative item count and whatever the
client sent as ``page``, work out which page to serve, the record offset and
the navigation flags. Used identically by the public and admin listings.
"""

from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal, InvalidOperation


@dataclass(frozen=True)
class Page:
    """A clamped page request over ``total`` items."""

    number: int
    size: int
    total: int
    last_page: int

    @property
    def offset(self) -> int:
        return (self.number - 1) * self.size

    @property
    def has_next_page(self) -> bool:
        return self.number * self.size < self.total

    @property
    def has_previous_page(self) -> bool:
        return self.number > 1

    @property
    def next_page(self) -> int:
        return self.number + 1

    @property
    def previous_page(self) -> int:
        return self.number - 1


def last_page_for(total: int, page_size: int) -> int:
    return max(1, -(-total // page_size))


def _requested_page(raw, last_page: int) -> int:
    """Floor ``raw`` to an integer page; unusable input means page 1."""
    if raw is None or isinstance(raw, bool):
        return 1
    if isinstance(raw, int):
        return raw

    try:
        value = Decimal(raw.strip()) if isinstance(raw, str) else Decimal(str(raw))
    except (InvalidOperation, ValueError, TypeError):
        return 1

    if value.is_nan():
        return 1
    # Clamped as a Decimal; int() only ever sees an in-range value
    if value >= last_page:
        return last_page
    if value < 1:
        return 1
    return int(value.to_integral_value(rounding=ROUND_FLOOR))


def paginate(total: int, requested, page_size: int) -> Page:
    """Clamp ``requested`` into ``[1, max(1, ceil(total / page_size))]``.

    ``requested`` may be an int, a float, a numeric string or ``None``.
    Fractions are floored, anything below 1 becomes 1 and anything past the
    last page becomes the last page.
    """
    if total < 0:
        raise ValueError(f"total must be >= 0, got {total}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    last_page = last_page_for(total, page_size)
    number = min(max(_requested_page(requested, last_page), 1), last_page)
    return Page(number=number, size=page_size, total=total, last_page=last_page)
