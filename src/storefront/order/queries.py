"""Order read side — order history and single-order access checks."""

from protean.utils.globals import current_domain

from storefront.order.order import Order
from storefront.shared.errors import AuthorizationError


def orders_for(user_id) -> list[Order]:
    return current_domain.repository_for(Order).find_for_user(user_id)


def order_for(user_id, order_id) -> Order:
    """Fetch an order the acting user owns.

    Raises ``ObjectNotFoundError`` when the order does not exist and
    ``AuthorizationError`` when it belongs to someone else.
    """
    order = current_domain.repository_for(Order).get(order_id)
    if str(order.user_id) != str(user_id):
        raise AuthorizationError("This order belongs to another user", resource="order", resource_id=str(order_id))
    return order
