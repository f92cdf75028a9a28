"""Order aggregate — an append-only record of a completed checkout.

Each line is a snapshot of the product's name and price taken at checkout
time; later catalogue edits never reach it. The total is computed once, when
the order is placed, and stored. Orders expose no methods that change them.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String

from storefront.domain import storefront
from storefront.order.events import OrderPlaced
from storefront.shared.money import line_total


@storefront.entity(part_of="Order")
class OrderLine:
    """Frozen copy of one cart entry."""

    product_id = Identifier()
    name = String(required=True, max_length=255)
    unit_price = Integer(required=True, min_value=0)  # cents at checkout time
    quantity = Integer(required=True, min_value=1)
    position = Integer(required=True, min_value=0)


@storefront.aggregate
class Order:
    user_id = Identifier(required=True)
    lines = HasMany(OrderLine)
    total = Integer(required=True, min_value=0)  # cents
    placed_at = DateTime()

    @classmethod
    def place(cls, user_id, lines_data: list[dict]):
        """Create an order from snapshot dicts of product_id, name, unit_price, quantity."""
        if not lines_data:
            raise ValidationError({"lines": ["An order needs at least one line"]})

        now = datetime.now(UTC)
        total = sum(line_total(line["unit_price"], line["quantity"]) for line in lines_data)

        order = cls(user_id=user_id, total=total, placed_at=now)
        for position, line in enumerate(lines_data):
            order.add_lines(
                OrderLine(
                    product_id=line.get("product_id"),
                    name=line["name"],
                    unit_price=line["unit_price"],
                    quantity=line["quantity"],
                    position=position,
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                total=total,
                line_count=len(lines_data),
                placed_at=now,
            )
        )
        return order

    @property
    def ordered_lines(self) -> list[OrderLine]:
        """Lines in the order they appeared in the cart."""
        return sorted(self.lines, key=lambda line: line.position)
