"""Request-scoped context passed explicitly to every storefront operation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestContext:
    """Who is acting on this request.

    Built once at the HTTP boundary from the authenticated session (here, the
    ``X-User-Id`` header) and handed down; core code never reads ambient
    session state.
    """

    user_id: str
