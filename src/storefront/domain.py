"""Storefront bounded context: catalogue, cart, orders and invoices.

Administrators maintain the product catalogue; shoppers browse a paginated
listing, build a cart owned by their user record, check out into an
immutable order and download a rendered invoice.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
