"""Product administration — commands and handler.

Fields arrive as submitted (price as a decimal string) and are validated in
one pass inside the handler, so a rejected submission reports every bad
field and persists nothing.

Edit and delete handlers only report which image file the change orphans.
``edit_product`` and ``delete_product`` process the command, and so commit
its unit of work, before releasing that file; a failed commit therefore
never leaves a product pointing at a deleted image. A failed release after
the commit leaves an unreferenced file behind and is reported as
``PersistenceError``.
"""

import structlog
from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product, validate_product_input
from storefront.domain import storefront
from storefront.files import get_image_store

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Product")
class AddProduct:
    admin_id = Identifier(required=True)
    name = String(max_length=1000)
    description = Text()
    price = String(max_length=50)  # decimal string, e.g. "19.99"
    image_url = String(max_length=500)


@storefront.command(part_of="Product")
class EditProduct:
    admin_id = Identifier(required=True)
    product_id = Identifier(required=True)
    name = String(max_length=1000)
    description = Text()
    price = String(max_length=50)
    image_url = String(max_length=500)  # Optional: keeps the current image when absent


@storefront.command(part_of="Product")
class DeleteProduct:
    admin_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ManageProductsHandler:
    @handle(AddProduct)
    def add_product(self, command):
        price = validate_product_input(
            command.name,
            command.description,
            command.price,
            image_url=command.image_url,
        )
        product = Product.create(
            admin_id=command.admin_id,
            name=command.name,
            description=command.description,
            price=price,
            image_url=command.image_url,
        )
        current_domain.repository_for(Product).add(product)

        logger.info("Product added", product_id=str(product.id), admin_id=str(command.admin_id), price=price)
        return str(product.id)

    @handle(EditProduct)
    def edit_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.assert_owned_by(command.admin_id)

        price = validate_product_input(
            command.name,
            command.description,
            command.price,
            image_url=command.image_url,
            image_required=False,
        )
        orphaned_image = product.update_details(
            name=command.name,
            description=command.description,
            price=price,
            image_url=command.image_url,
        )
        repo.add(product)

        logger.info("Product updated", product_id=str(product.id), price=price, image_replaced=bool(orphaned_image))
        return orphaned_image

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.assert_owned_by(command.admin_id)

        repo.delete_product(product)

        logger.info("Product deleted", product_id=str(command.product_id), admin_id=str(command.admin_id))
        return product.image_url


def _release_image(path) -> None:
    get_image_store().delete_file(path)
    logger.info("Image released", path=path)


def edit_product(command: EditProduct) -> None:
    orphaned_image = current_domain.process(command, asynchronous=False)
    if orphaned_image:
        _release_image(orphaned_image)


def delete_product(command: DeleteProduct) -> None:
    image_url = current_domain.process(command, asynchronous=False)
    if image_url:
        _release_image(image_url)
