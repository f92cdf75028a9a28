"""Catalogue store access for the Product aggregate."""

from protean.exceptions import ObjectNotFoundError

from storefront.catalogue.product import Product
from storefront.domain import storefront


@storefront.repository(part_of=Product)
class ProductRepository:
    """Product queries on top of the standard ``add``/``get``.

    ``filters`` are field lookups such as ``admin_id="..."``; an empty filter
    matches the whole catalogue. Counting and paging must be called with the
    same filter so the page bounds describe the rows being served.
    """

    def count_products(self, **filters) -> int:
        return self._query(**filters).all().total

    def find_page(self, offset: int, limit: int, **filters) -> list[Product]:
        return self._query(**filters).order_by("created_at").offset(offset).limit(limit).all().items

    def find_by_id(self, product_id) -> Product | None:
        try:
            return self.get(product_id)
        except ObjectNotFoundError:
            return None

    def delete_product(self, product: Product) -> None:
        self._dao.delete(product)

    def _query(self, **filters):
        query = self._dao.query
        if filters:
            query = query.filter(**filters)
        return query
