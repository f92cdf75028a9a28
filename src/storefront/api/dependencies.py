"""Request-scoped dependencies shared by the Storefront routers."""

from fastapi import Header, HTTPException

from storefront.shared.context import RequestContext
from storefront.utils.logging import add_context, clear_context


async def request_context(x_user_id: str | None = Header(None)):
    """Build the acting user's context from the session header.

    Sessions are handled upstream; by the time a request arrives here the
    authenticated user id travels in ``X-User-Id``.
    """
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Authentication required")

    add_context(user_id=x_user_id)
    try:
        yield RequestContext(user_id=x_user_id)
    finally:
        clear_context()
