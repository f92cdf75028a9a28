"""Shared BDD fixtures and step definitions for the Storefront domain."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers
from storefront.catalogue.administration import AddProduct
from storefront.user.registration import RegisterUser


def _add_product(admin_id, name, price):
    return current_domain.process(
        AddProduct(
            admin_id=admin_id,
            name=name,
            description=f"{name} description",
            price=price,
            image_url=f"images/{name.lower().replace(' ', '-')}.png",
        ),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def admin_id():
    return "admin-001"


@pytest.fixture()
def products():
    """Product ids by name."""
    return {}


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a registered shopper", target_fixture="user_id")
def registered_shopper():
    return current_domain.process(RegisterUser(email="shopper@example.com"), asynchronous=False)


@given(parsers.cfparse('the catalogue has a product "{name}" priced "{price}"'))
def catalogue_product(admin_id, products, name, price):
    products[name] = _add_product(admin_id, name, price)


@given(parsers.cfparse("the catalogue holds {total:d} products"))
def catalogue_holds(admin_id, total):
    for index in range(total):
        _add_product(admin_id, f"Product {index:02d}", "1.00")
