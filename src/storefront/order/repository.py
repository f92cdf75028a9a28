"""Order store access."""

from storefront.domain import storefront
from storefront.order.order import Order


@storefront.repository(part_of=Order)
class OrderRepository:
    def find_for_user(self, user_id) -> list[Order]:
        """A user's orders, newest first."""
        return self._dao.query.filter(user_id=str(user_id)).order_by("-placed_at").all().items
