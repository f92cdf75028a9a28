"""Domain events for the User aggregate and its cart."""

from protean.fields import DateTime, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="User")
class UserRegistered:
    __version__ = 1

    user_id = Identifier(required=True)
    email = String(required=True, max_length=254)
    registered_at = DateTime(required=True)


@storefront.event(part_of="User")
class CartItemAdded:
    """A unit of a product was added; ``quantity`` is the entry's new quantity."""

    __version__ = 1

    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)


@storefront.event(part_of="User")
class CartItemRemoved:
    __version__ = 1

    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.event(part_of="User")
class CartReset:
    """The cart was emptied, either on request or at checkout."""

    __version__ = 1

    user_id = Identifier(required=True)
    entries_removed = Integer(required=True)
