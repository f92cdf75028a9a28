"""Checkout — converts the acting user's cart into an order.

Steps, in this order:
    1. Load the user's cart and resolve every entry against the catalogue.
    2. Snapshot name, current price and quantity for each entry.
    3. Compute the total from the snapshot (inside ``Order.place``).
    4. Save the order.
    5. Empty the cart.

Steps 4 and 5 are two writes to two documents. They run inside the
handler's unit of work, so with a transactional provider they commit or
roll back together. A failure in either propagates to the caller as is; it
is never retried or swallowed. Once a checkout has committed the cart is
empty, so a repeated checkout is rejected instead of ordering twice.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.order.order import Order
from storefront.user.user import User

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Order")
class Checkout:
    user_id = Identifier(required=True)


@storefront.command_handler(part_of=Order)
class CheckoutHandler:
    @handle(Checkout)
    def checkout(self, command):
        users = current_domain.repository_for(User)
        user = users.get(command.user_id)

        if not user.cart:
            raise ValidationError({"cart": ["Cannot check out an empty cart"]})

        products = current_domain.repository_for(Product)
        snapshot = []
        unavailable = []
        for entry in user.cart_entries:
            product = products.find_by_id(entry.product_id)
            if product is None:
                unavailable.append(str(entry.product_id))
                continue
            snapshot.append(
                {
                    "product_id": str(product.id),
                    "name": product.name,
                    "unit_price": product.price,
                    "quantity": entry.quantity,
                }
            )

        if unavailable:
            raise ValidationError(
                {"cart": [f"Product {product_id} is no longer available" for product_id in unavailable]}
            )

        order = Order.place(user_id=str(user.id), lines_data=snapshot)
        current_domain.repository_for(Order).add(order)

        user.reset_cart()
        users.add(user)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            user_id=str(user.id),
            total=order.total,
            line_count=len(snapshot),
        )
        return str(order.id)
