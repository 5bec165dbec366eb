"""flashapi exception hierarchy.

Shared across the route table, dispatcher, registries, and adapters so
every module raises and catches the same types.
"""

from collections.abc import Iterable


class FlashAPIError(Exception):
    """Base for all flashapi-specific errors."""


class ConfigurationError(FlashAPIError):
    """Raised when application setup is invalid.

    Duplicate routes, a missing route table, or unknown responders and
    adapters. Fatal at startup, never retried.
    """


class ResponderNotFound(ConfigurationError):  # noqa: N818
    """A route names a responder that was never registered."""

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = tuple(available)
        known = ", ".join(self.available)
        super().__init__(f"Responder not found: {name!r}. Registered responders: {known}")


class AdapterNotFound(ConfigurationError):  # noqa: N818
    """No server adapter is registered under the requested name."""

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = tuple(available)
        known = ", ".join(self.available)
        super().__init__(f"Adapter '{name}' not found. Available adapters: {known}")


class RoutingError(FlashAPIError):
    """No responder can be resolved for a request.

    Raised per request by the dispatcher and converted into a 404
    envelope at the adapter boundary.
    """


class InvalidRequest(RoutingError):  # noqa: N818
    """The request has no method or no path."""

    def __init__(self, detail: str = "Invalid request: method and path cannot be None") -> None:
        super().__init__(detail)


class NoRouteFound(RoutingError):  # noqa: N818
    """No route is registered for the request path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No route found for: {path}")


class MethodNotAllowed(RoutingError):  # noqa: N818
    """The path is registered, but not for this HTTP method.

    ``allowed`` keeps the registered methods in registration order so
    the message and the ``Allow`` header list them the same way.
    """

    def __init__(self, method: str, path: str, allowed: Iterable[str]) -> None:
        self.method = method
        self.path = path
        self.allowed = tuple(allowed)
        methods = ", ".join(self.allowed)
        super().__init__(
            f"Method not allowed: {method} for {path}. Available methods: {methods}"
        )
