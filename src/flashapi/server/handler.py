"""Request handling — the adapter boundary.

The one place where a ``Request`` becomes a ``ResponseEnvelope``:
resolve the route, look up the responder, run it, and turn any failure
into an error envelope.
"""

from typing import Any

from flashapi.errors import RoutingError
from flashapi.http.request import Request
from flashapi.http.response import ResponseEnvelope
from flashapi.registry import ResponderRegistry
from flashapi.responder import Responder
from flashapi.routing.dispatcher import resolve
from flashapi.routing.table import RouteTable
from flashapi.server.errors import handle_internal_error, handle_routing_error


def handle_request(
    request: Request,
    *,
    table: RouteTable,
    responders: ResponderRegistry,
    debug: bool = False,
) -> ResponseEnvelope:
    """Process a single request through dispatch and the responder contract.

    ``RoutingError`` becomes a 404 envelope and any other exception a 500
    envelope. ``NotImplementedError`` propagates.
    """
    try:
        name = resolve(request, table)
        factory = responders.get(name)
        return run_responder(factory(request))
    except RoutingError as exc:
        return handle_routing_error(exc, request)
    except NotImplementedError:
        # A responder without call()/render() is a programming error
        raise
    except Exception as exc:
        return handle_internal_error(exc, request, debug=debug)


def run_responder(responder: Any) -> ResponseEnvelope:
    """Run a responder and normalize its output.

    ``Responder`` subclasses go through ``respond()``. Other objects are
    duck-typed: ``call()`` runs if present, and ``render()`` supplies
    the output when ``call()`` is absent or returns ``None``.
    """
    if isinstance(responder, Responder):
        return responder.respond()

    call = getattr(responder, "call", None)
    result = call() if callable(call) else None
    if result is None:
        render = getattr(responder, "render", None)
        if not callable(render):
            msg = f"{type(responder).__name__} must implement call() or render()"
            raise NotImplementedError(msg)
        result = render()
    return ResponseEnvelope.from_rendered(result)
