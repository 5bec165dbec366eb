"""flashapi — a minimal HTTP API framework.

Maps a request (method + path) to a responder class, hands it an
immutable request value, and wraps whatever it renders in a standard
JSON envelope.

Basic usage::

    from flashapi import App, Responder, draw

    app = App(routes=draw(("GET", "/hello", "HelloResponder")))

    @app.responder
    class HelloResponder(Responder):
        def call(self):
            return self.ok(message="Hello, World!")

    app.run()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from flashapi.adapters import Adapter
    from flashapi.app import App

__version__ = "0.1.0"
__all__ = [
    "AdapterNotFound",
    "App",
    "AppConfig",
    "ConfigurationError",
    "FlashAPIError",
    "MethodNotAllowed",
    "NoRouteFound",
    "Rendered",
    "Request",
    "Responder",
    "ResponderNotFound",
    "ResponderRegistry",
    "ResponseEnvelope",
    "RouteBuilder",
    "RouteTable",
    "RoutingError",
    "draw",
    "start",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import flashapi`` fast while providing a clean top-level API.
    """
    if name == "App":
        from flashapi.app import App

        return App

    if name == "AppConfig":
        from flashapi.config import AppConfig

        return AppConfig

    if name == "Request":
        from flashapi.http.request import Request

        return Request

    if name in ("Rendered", "ResponseEnvelope"):
        from flashapi.http import response

        return getattr(response, name)

    if name == "Responder":
        from flashapi.responder import Responder

        return Responder

    if name == "ResponderRegistry":
        from flashapi.registry import ResponderRegistry

        return ResponderRegistry

    if name in ("RouteBuilder", "RouteTable", "draw"):
        from flashapi import routing

        return getattr(routing, name)

    if name in (
        "AdapterNotFound",
        "ConfigurationError",
        "FlashAPIError",
        "MethodNotAllowed",
        "NoRouteFound",
        "ResponderNotFound",
        "RoutingError",
    ):
        from flashapi import errors

        return getattr(errors, name)

    msg = f"module 'flashapi' has no attribute {name!r}"
    raise AttributeError(msg)


def start(app: App, adapter: str | None = None, **options: Any) -> Adapter:
    """Start *app* with the named adapter (``"asgi"`` or ``"wsgi"``).

    Shorthand for ``app.run(adapter, **options)``.
    """
    return app.run(adapter, **options)
