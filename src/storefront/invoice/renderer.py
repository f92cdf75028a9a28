"""Invoice rendering.

The document is a pure function of the stored order: its lines in snapshot
order and its stored total. The total is never recomputed from the lines.
"""

from storefront.order.order import Order
from storefront.shared.money import format_minor_units

ENCODING = "utf-8"


def invoice_filename(order_id) -> str:
    return f"invoice-{order_id}.txt"


def line_text(name: str, quantity: int, unit_price: int) -> str:
    return f"{name} - {quantity} x ${format_minor_units(unit_price)}"


def render_invoice(order: Order) -> bytes:
    rows = [
        f"Invoice #{order.id}",
        "-----------------------",
        *(line_text(line.name, line.quantity, line.unit_price) for line in order.ordered_lines),
        "-----------",
        f"Total Price: ${format_minor_units(order.total)}",
    ]
    return ("\n".join(rows) + "\n").encode(ENCODING)
