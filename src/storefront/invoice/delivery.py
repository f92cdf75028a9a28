"""Invoice delivery to the artifact and response sinks.

The invoice is rendered into memory first, so every sink receives the
same bytes. Writes go to all sinks, then all sinks are committed; if any
step fails, every sink is aborted and ``InvoiceDeliveryError`` is raised.
"""

from pathlib import Path

import structlog

from storefront.invoice.renderer import invoice_filename, render_invoice
from storefront.invoice.sinks import BufferSink, FileSink, InvoiceSink
from storefront.order.queries import order_for
from storefront.shared.errors import InvoiceDeliveryError
from storefront.utils.settings import invoice_dir

logger = structlog.get_logger(__name__)


def deliver(order_id, document: bytes, sinks: list[InvoiceSink]) -> None:
    current = None
    try:
        for current in sinks:
            current.write(document)
        for current in sinks:
            current.close()
    except Exception as exc:
        for sink in sinks:
            try:
                sink.abort()
            except Exception:
                logger.exception("Could not abort invoice sink", order_id=str(order_id), sink=sink.name)
        raise InvoiceDeliveryError(str(order_id), current.name, str(exc)) from exc


def invoice_for(user_id, order_id, directory=None) -> tuple[str, bytes]:
    """Render the acting user's invoice, store the artifact and return ``(filename, body)``.

    Raises ``ObjectNotFoundError`` or ``AuthorizationError`` before anything
    is written.
    """
    order = order_for(user_id, order_id)
    filename = invoice_filename(order.id)
    document = render_invoice(order)

    response = BufferSink()
    deliver(order.id, document, [FileSink(Path(directory or invoice_dir()) / filename), response])

    logger.info("Invoice delivered", order_id=str(order.id), user_id=str(user_id), size=len(document))
    return filename, response.getvalue()
