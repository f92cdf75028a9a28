"""Catalogue read side — paginated listings and product details.

The count is fetched fresh on every request and paired with the page query
under the same filter; the admin listing differs from the public one only by
``admin_id``.
"""

from dataclasses import dataclass

from protean.utils.globals import current_domain

from storefront.catalogue.pagination import Page, paginate
from storefront.catalogue.product import Product
from storefront.shared.money import format_minor_units
from storefront.utils.settings import items_per_page


@dataclass(frozen=True)
class ProductCard:
    product_id: str
    name: str
    description: str | None
    price: str  # display only, e.g. "19.99"
    image_url: str

    @classmethod
    def from_product(cls, product: Product) -> "ProductCard":
        return cls(
            product_id=str(product.id),
            name=product.name,
            description=product.description,
            price=format_minor_units(product.price),
            image_url=product.image_url,
        )


@dataclass(frozen=True)
class ProductListing:
    products: list[ProductCard]
    page: Page


def list_products(requested_page=None, admin_id=None, page_size: int | None = None) -> ProductListing:
    """Serve one catalogue page; pass ``admin_id`` for an administrator's own products."""
    filters = {"admin_id": str(admin_id)} if admin_id else {}
    repo = current_domain.repository_for(Product)

    page = paginate(repo.count_products(**filters), requested_page, page_size or items_per_page())
    products = repo.find_page(page.offset, page.size, **filters) if page.total else []

    return ProductListing(products=[ProductCard.from_product(p) for p in products], page=page)


def product_details(product_id) -> ProductCard:
    """Raises ``ObjectNotFoundError`` for an unknown product."""
    product = current_domain.repository_for(Product).get(product_id)
    return ProductCard.from_product(product)
