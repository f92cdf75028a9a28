"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """An administrator added a product to the catalogue."""

    __version__ = 1

    product_id = Identifier(required=True)
    admin_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = Integer(required=True)
    added_at = DateTime(required=True)


@storefront.event(part_of="Product")
class ProductUpdated:
    """An administrator edited a product's details, price or image."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = Integer(required=True)
    image_url = String(max_length=500)
    previous_image_url = String(max_length=500)
    updated_at = DateTime(required=True)
