"""Error handling at the adapter boundary.

Maps routing failures and unexpected exceptions to JSON error envelopes.
Each failure is caught exactly once, here, and never reaches the
transport.
"""

import logging

from flashapi.errors import MethodNotAllowed, ResponderNotFound, RoutingError
from flashapi.http.request import Request
from flashapi.http.response import ResponseEnvelope

logger = logging.getLogger("flashapi.server")

INTERNAL_ERROR = "Internal Server Error"


def handle_routing_error(exc: RoutingError, request: Request) -> ResponseEnvelope:
    """404 envelope carrying the routing message.

    Wrong-method failures also get an ``Allow`` header.
    """
    logger.debug("404 %s %s: %s", request.method, request.path, exc)
    headers: dict[str, str] = {}
    if isinstance(exc, MethodNotAllowed):
        headers["Allow"] = ", ".join(exc.allowed)
    return ResponseEnvelope.error(404, str(exc), headers)


def handle_internal_error(exc: Exception, request: Request, *, debug: bool) -> ResponseEnvelope:
    """500 envelope for anything else raised while handling a request.

    The exception message only reaches the client when *debug* is on.
    """
    if isinstance(exc, ResponderNotFound):
        logger.error(
            "500 %s %s: route points at an unregistered responder",
            request.method,
            request.path,
            exc_info=exc,
        )
    else:
        logger.exception("500 %s %s", request.method, request.path)

    message = f"{INTERNAL_ERROR}: {exc}" if debug else INTERNAL_ERROR
    return ResponseEnvelope.error(500, message)


def payload_too_large(request: Request, limit: int) -> ResponseEnvelope:
    """413 envelope for bodies over ``AppConfig.max_content_length``."""
    logger.debug("413 %s %s: body exceeds %d bytes", request.method, request.path, limit)
    return ResponseEnvelope.error(413, f"Payload Too Large: limit is {limit} bytes")
