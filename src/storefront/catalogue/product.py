"""Product aggregate root.

Prices are held as integer cents. The decimal string an administrator types
is converted exactly once, by ``validate_product_input``, before it reaches
the aggregate.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, String, Text

from storefront.catalogue.events import ProductAdded, ProductUpdated
from storefront.domain import storefront
from storefront.shared.errors import AuthorizationError
from storefront.shared.money import to_minor_units

NAME_MAX_LENGTH = 255
DESCRIPTION_MIN_LENGTH = 5
DESCRIPTION_MAX_LENGTH = 400


def validate_product_input(name, description, price, image_url=None, image_required=True) -> int:
    """Check submitted product fields and return the price in cents.

    All problems are reported together as one ``ValidationError`` whose
    messages map each offending field to its errors.
    """
    errors: dict[str, list[str]] = {}

    name = (name or "").strip()
    if not name:
        errors.setdefault("name", []).append("Name is required")
    elif len(name) > NAME_MAX_LENGTH:
        errors.setdefault("name", []).append(f"Name must be at most {NAME_MAX_LENGTH} characters long")

    description = (description or "").strip()
    if not DESCRIPTION_MIN_LENGTH <= len(description) <= DESCRIPTION_MAX_LENGTH:
        errors.setdefault("description", []).append(
            f"Description must be between {DESCRIPTION_MIN_LENGTH} and {DESCRIPTION_MAX_LENGTH} characters long"
        )

    cents = None
    try:
        cents = to_minor_units(price, field="price")
    except ValidationError as exc:
        for field_name, messages in exc.messages.items():
            errors.setdefault(field_name, []).extend(messages)

    if image_required and not (image_url or "").strip():
        errors.setdefault("image_url", []).append("An image is required")

    if errors:
        raise ValidationError(errors)

    return cents


@storefront.aggregate
class Product:
    admin_id = Identifier(required=True)
    name = String(required=True, max_length=NAME_MAX_LENGTH)
    description = Text()
    price = Integer(required=True, min_value=0)  # cents
    image_url = String(required=True, max_length=500)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, admin_id, name, description, price, image_url):
        now = datetime.now(UTC)
        product = cls(
            admin_id=admin_id,
            name=name.strip(),
            description=description.strip(),
            price=price,
            image_url=image_url,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                admin_id=str(admin_id),
                name=product.name,
                price=price,
                added_at=now,
            )
        )
        return product

    def assert_owned_by(self, user_id) -> None:
        if str(self.admin_id) != str(user_id):
            raise AuthorizationError(
                "Only the administrator who added this product may change it",
                resource="product",
                resource_id=str(self.id),
            )

    def update_details(self, name, description, price, image_url=None):
        """Replace name, description and price; swap the image when a new one is given.

        Returns the image path that is no longer referenced, if any.
        """
        previous_image_url = self.image_url
        self.name = name.strip()
        self.description = description.strip()
        self.price = price
        if image_url:
            self.image_url = image_url

        now = datetime.now(UTC)
        self.updated_at = now

        orphaned = previous_image_url if previous_image_url != self.image_url else None
        self.raise_(
            ProductUpdated(
                product_id=str(self.id),
                name=self.name,
                price=self.price,
                image_url=self.image_url,
                previous_image_url=orphaned,
                updated_at=now,
            )
        )
        return orphaned
