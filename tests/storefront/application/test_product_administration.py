"""Application tests for product administration commands."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.catalogue.administration import AddProduct, DeleteProduct, EditProduct, delete_product, edit_product
from storefront.catalogue.product import Product
from storefront.catalogue.repository import ProductRepository
from storefront.shared.errors import AuthorizationError, PersistenceError


def _add_product(**overrides):
    defaults = {
        "admin_id": "admin-001",
        "name": "Espresso Cup",
        "description": "Porcelain cup, 80 ml.",
        "price": "12.50",
        "image_url": "images/cup.png",
    }
    defaults.update(overrides)
    return current_domain.process(AddProduct(**defaults), asynchronous=False)


def _edit_product(product_id, **overrides):
    defaults = {
        "admin_id": "admin-001",
        "product_id": product_id,
        "name": "Tea Cup",
        "description": "Porcelain tea cup.",
        "price": "9.00",
    }
    defaults.update(overrides)
    edit_product(EditProduct(**defaults))


class TestAddProduct:
    def test_add_persists_price_in_cents(self):
        product_id = _add_product(price="19.999")

        product = current_domain.repository_for(Product).get(product_id)
        assert product.price == 2000
        assert product.name == "Espresso Cup"
        assert str(product.admin_id) == "admin-001"

    def test_invalid_submission_persists_nothing(self):
        with pytest.raises(ValidationError) as exc:
            _add_product(name="", price="abc", image_url=None)

        assert {"name", "price", "image_url"} <= set(exc.value.messages)
        assert current_domain.repository_for(Product).count_products() == 0


class TestEditProduct:
    def test_edit_updates_fields(self, image_store):
        product_id = _add_product()
        _edit_product(product_id)

        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "Tea Cup"
        assert product.price == 900
        assert product.image_url == "images/cup.png"
        assert image_store.deleted == []

    def test_new_image_releases_old_file(self, image_store):
        product_id = _add_product()
        _edit_product(product_id, image_url="images/tea.png")

        product = current_domain.repository_for(Product).get(product_id)
        assert product.image_url == "images/tea.png"
        assert image_store.deleted == ["images/cup.png"]

    def test_other_admin_cannot_edit(self):
        product_id = _add_product()

        with pytest.raises(AuthorizationError):
            _edit_product(product_id, admin_id="admin-002")

        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "Espresso Cup"

    def test_invalid_edit_changes_nothing(self, image_store):
        product_id = _add_product()

        with pytest.raises(ValidationError):
            _edit_product(product_id, price="-1", image_url="images/tea.png")

        product = current_domain.repository_for(Product).get(product_id)
        assert product.price == 1250
        assert image_store.deleted == []

    def test_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            _edit_product("missing-product")


class TestDeleteProduct:
    def test_delete_removes_product_and_image(self, image_store):
        product_id = _add_product()

        delete_product(DeleteProduct(admin_id="admin-001", product_id=product_id))

        assert current_domain.repository_for(Product).find_by_id(product_id) is None
        assert image_store.deleted == ["images/cup.png"]

    def test_other_admin_cannot_delete(self, image_store):
        product_id = _add_product()

        with pytest.raises(AuthorizationError):
            delete_product(DeleteProduct(admin_id="admin-002", product_id=product_id))

        assert current_domain.repository_for(Product).find_by_id(product_id) is not None
        assert image_store.deleted == []

    def test_image_failure_propagates(self, image_store):
        product_id = _add_product()
        image_store.configure(should_fail=True)

        with pytest.raises(PersistenceError):
            delete_product(DeleteProduct(admin_id="admin-001", product_id=product_id))

    def test_product_is_gone_when_image_release_fails(self, image_store):
        product_id = _add_product()
        image_store.configure(should_fail=True)

        with pytest.raises(PersistenceError):
            delete_product(DeleteProduct(admin_id="admin-001", product_id=product_id))

        assert current_domain.repository_for(Product).find_by_id(product_id) is None


class TestImageReleaseOrdering:
    def test_command_alone_reports_but_keeps_the_image(self, image_store):
        product_id = _add_product()

        released = current_domain.process(
            DeleteProduct(admin_id="admin-001", product_id=product_id), asynchronous=False
        )

        assert released == "images/cup.png"
        assert image_store.deleted == []

    def test_edit_command_reports_replaced_image(self, image_store):
        product_id = _add_product()

        orphaned = current_domain.process(
            EditProduct(
                admin_id="admin-001",
                product_id=product_id,
                name="Tea Cup",
                description="Porcelain tea cup.",
                price="9.00",
                image_url="images/tea.png",
            ),
            asynchronous=False,
        )

        assert orphaned == "images/cup.png"
        assert image_store.deleted == []

    def test_failed_store_write_keeps_the_image(self, image_store, monkeypatch):
        product_id = _add_product()

        def failing_delete(self, product):
            raise PersistenceError("catalogue store unavailable")

        monkeypatch.setattr(ProductRepository, "delete_product", failing_delete)

        with pytest.raises(PersistenceError):
            delete_product(DeleteProduct(admin_id="admin-001", product_id=product_id))

        assert image_store.deleted == []
        assert current_domain.repository_for(Product).find_by_id(product_id) is not None

    def test_failed_edit_keeps_the_old_image(self, image_store):
        product_id = _add_product()

        with pytest.raises(ValidationError):
            _edit_product(product_id, price="abc", image_url="images/tea.png")

        assert image_store.deleted == []
        assert current_domain.repository_for(Product).get(product_id).image_url == "images/cup.png"
