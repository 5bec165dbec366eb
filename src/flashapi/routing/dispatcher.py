"""Request dispatch — resolve a request to a responder name.

Lookup is a single dict probe on ``(METHOD, path)``. When that misses,
the table is asked which methods the path does have, which separates
"wrong method" from "unknown path".
"""

import logging

from flashapi.errors import InvalidRequest, MethodNotAllowed, NoRouteFound
from flashapi.http.request import Request
from flashapi.routing.route import MethodMismatch, NoRoute, Resolution, RouteMatch
from flashapi.routing.table import RouteTable

logger = logging.getLogger("flashapi.routing")


def match(request: Request, table: RouteTable) -> Resolution:
    """Classify *request* against *table* without raising for misses.

    Raises ``InvalidRequest`` if the request has no method or path.
    """
    if request.method is None or request.path is None:
        raise InvalidRequest

    method = request.method.upper()
    path = request.path

    route = table.lookup(method, path)
    if route is not None:
        return RouteMatch(route)

    allowed = table.methods_for(path)
    if allowed:
        return MethodMismatch(method=method, path=path, allowed=allowed)
    return NoRoute(path=path)


def resolve(request: Request, table: RouteTable) -> str:
    """Return the responder name for *request*.

    Raises ``InvalidRequest``, ``MethodNotAllowed`` or ``NoRouteFound``
    (all ``RoutingError``).
    """
    result = match(request, table)

    if isinstance(result, RouteMatch):
        logger.debug("%s %s -> %s", result.route.method, result.route.path, result.responder)
        return result.responder
    if isinstance(result, MethodMismatch):
        raise MethodNotAllowed(result.method, result.path, result.allowed)
    raise NoRouteFound(result.path)
