"""Cart view — cart entries joined with live catalogue data for display.

Prices shown here are informational only. Checkout reads the catalogue
again and freezes the prices it finds into the order.

Entries whose product has been deleted stay in the cart and are listed with
``available=False``; they carry no price and are left out of the total.
"""

from dataclasses import dataclass

from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.shared.money import format_minor_units, line_total
from storefront.user.user import User


@dataclass(frozen=True)
class CartLine:
    product_id: str
    quantity: int
    available: bool
    name: str | None = None
    description: str | None = None
    image_url: str | None = None
    price: str | None = None  # display only, e.g. "5.00"


@dataclass(frozen=True)
class CartView:
    lines: list[CartLine]
    total: str  # display only, over available lines

    @property
    def unavailable_product_ids(self) -> list[str]:
        return [line.product_id for line in self.lines if not line.available]


def cart_for(user_id) -> CartView:
    """Raises ``ObjectNotFoundError`` for an unknown user."""
    user = current_domain.repository_for(User).get(user_id)
    products = current_domain.repository_for(Product)

    lines = []
    total = 0
    for entry in user.cart_entries:
        product = products.find_by_id(entry.product_id)
        if product is None:
            lines.append(CartLine(product_id=str(entry.product_id), quantity=entry.quantity, available=False))
            continue

        total += line_total(product.price, entry.quantity)
        lines.append(
            CartLine(
                product_id=str(entry.product_id),
                quantity=entry.quantity,
                available=True,
                name=product.name,
                description=product.description,
                image_url=product.image_url,
                price=format_minor_units(product.price),
            )
        )

    return CartView(lines=lines, total=format_minor_units(total))
