"""User aggregate — the shopper record that owns the cart.

The cart is a list of (product, quantity) entries held inside the user
document and changed only through the methods below. There is at most one
entry per product and every quantity is at least 1. Stores do not keep the
rows in order, so readers go through ``cart_entries``, which orders them by
when each product was first added.

The document carries no concurrency token: two concurrent requests that
change the same cart race, and the later save wins.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, HasMany, Identifier, Integer, String

from storefront.domain import storefront
from storefront.user.events import CartItemAdded, CartItemRemoved, CartReset, UserRegistered


@storefront.entity(part_of="User")
class CartEntry:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime(required=True)


@storefront.aggregate
class User:
    email = String(required=True, max_length=254)
    name = String(max_length=255)
    cart = HasMany(CartEntry)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def register(cls, email, name=None):
        now = datetime.now(UTC)
        user = cls(email=email.strip().lower(), name=name, created_at=now, updated_at=now)
        user.raise_(UserRegistered(user_id=str(user.id), email=user.email, registered_at=now))
        return user

    @property
    def cart_entries(self) -> list[CartEntry]:
        """Cart entries in the order they were first added."""
        return sorted(self.cart, key=lambda entry: entry.added_at)

    def _entry_for(self, product_id):
        return next((e for e in self.cart if str(e.product_id) == str(product_id)), None)

    def add_to_cart(self, product_id):
        """Add one unit of ``product_id``, merging with an existing entry."""
        now = datetime.now(UTC)
        entry = self._entry_for(product_id)
        if entry:
            entry.quantity += 1
            quantity = entry.quantity
        else:
            self.add_cart(CartEntry(product_id=product_id, quantity=1, added_at=now))
            quantity = 1

        self.updated_at = now
        self.raise_(CartItemAdded(user_id=str(self.id), product_id=str(product_id), quantity=quantity))

    def remove_from_cart(self, product_id):
        """Drop the entry for ``product_id``; a product not in the cart is ignored."""
        entry = self._entry_for(product_id)
        if entry is None:
            return

        self.remove_cart(entry)
        self.updated_at = datetime.now(UTC)
        self.raise_(CartItemRemoved(user_id=str(self.id), product_id=str(product_id)))

    def reset_cart(self):
        entries = list(self.cart)
        for entry in entries:
            self.remove_cart(entry)

        self.updated_at = datetime.now(UTC)
        self.raise_(CartReset(user_id=str(self.id), entries_removed=len(entries)))
