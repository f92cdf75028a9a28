"""Storefront failures that Protean does not already model.

Validation failures use ``protean.exceptions.ValidationError`` and missing
records use ``protean.exceptions.ObjectNotFoundError``. The classes here
cover ownership violations and store/sink failures.
"""


class AuthorizationError(Exception):
    """The acting user does not own the referenced product or order."""

    def __init__(self, message: str, resource: str | None = None, resource_id: str | None = None) -> None:
        super().__init__(message)
        self.resource = resource
        self.resource_id = resource_id


class PersistenceError(Exception):
    """A store, file or sink write failed. Never retried."""


class InvoiceDeliveryError(PersistenceError):
    """An invoice could not be delivered to every sink."""

    def __init__(self, order_id: str, sink: str, reason: str) -> None:
        super().__init__(f"Invoice for order {order_id} could not be written to {sink}: {reason}")
        self.order_id = order_id
        self.sink = sink
        self.reason = reason
