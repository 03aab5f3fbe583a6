"""Visitor identification via a long-lived cookie.

The visitor id selects the storage namespace, so it plays the role of
"this browser" for purchase history.
"""

import logging
from uuid import UUID, uuid4

from fastapi import Request

from app.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


def parse_visitor_id(raw: str | None) -> str | None:
    """Return normalized visitor id, or None if the cookie is missing or forged."""
    if not raw:
        return None
    try:
        return str(UUID(raw))
    except ValueError:
        return None


async def visitor_middleware(request: Request, call_next):
    """Attach ``request.state.visitor_id``, issuing a cookie when absent."""
    visitor_id = parse_visitor_id(request.cookies.get(settings.visitor_cookie_name))
    issued = visitor_id is None
    if issued:
        visitor_id = str(uuid4())
        logger.debug(f"Issued new visitor id {visitor_id}")

    request.state.visitor_id = visitor_id
    response = await call_next(request)

    if issued:
        response.set_cookie(
            settings.visitor_cookie_name,
            visitor_id,
            max_age=settings.visitor_cookie_max_age,
            httponly=True,
            samesite="lax",
        )
    return response
