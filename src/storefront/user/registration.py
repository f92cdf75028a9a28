"""User registration — command and handler."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.user.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="User")
class RegisterUser:
    email = String(required=True, max_length=254)
    name = String(max_length=255)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        user = User.register(email=command.email, name=command.name)
        current_domain.repository_for(User).add(user)

        logger.info("User registered", user_id=str(user.id))
        return str(user.id)
