"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A cart was checked out into a new order."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    total = Integer(required=True)
    line_count = Integer(required=True)
    placed_at = DateTime(required=True)
