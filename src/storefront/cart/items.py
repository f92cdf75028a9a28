"""Cart mutations — commands and handler.

Every operation loads the owning user, changes the cart through the
aggregate and saves the whole user document. Product existence is not
checked here; entries whose product has since been deleted are dealt with
by the cart view and at checkout.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.user.user import User

logger = structlog.get_logger(__name__)


@storefront.command(part_of="User")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command(part_of="User")
class RemoveFromCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command(part_of="User")
class ResetCart:
    user_id = Identifier(required=True)


@storefront.command_handler(part_of=User)
class ManageCartHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.add_to_cart(command.product_id)
        repo.add(user)
        logger.info("Cart item added", user_id=str(command.user_id), product_id=str(command.product_id))

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.remove_from_cart(command.product_id)
        repo.add(user)
        logger.info("Cart item removed", user_id=str(command.user_id), product_id=str(command.product_id))

    @handle(ResetCart)
    def reset_cart(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.reset_cart()
        repo.add(user)
        logger.info("Cart reset", user_id=str(command.user_id))
