"""Server adapters — bridge a transport to ``App.handle``.

Adapters are looked up by name in an ``AdapterRegistry`` owned by the
composition root. ``default_adapters()`` returns a registry with the
built-in ``asgi`` and ``wsgi`` adapters.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from flashapi.errors import AdapterNotFound
from flashapi.http.request import Request
from flashapi.http.response import ResponseEnvelope

if TYPE_CHECKING:
    from flashapi.app import App


class Adapter:
    """Base class for server adapters.

    Holds the app and adapter options. Subclasses translate their
    transport into ``Request`` values, pass them to ``handle()``, and
    write the returned envelope back.
    """

    name: str = ""

    def __init__(self, app: App, **options: Any) -> None:
        self.app = app
        self.options = options

    def start(self) -> None:
        """Start serving. Subclasses must override."""
        msg = f"{type(self).__name__} must implement start()"
        raise NotImplementedError(msg)

    def stop(self) -> None:
        """Stop serving. Subclasses must override."""
        msg = f"{type(self).__name__} must implement stop()"
        raise NotImplementedError(msg)

    def handle(self, request: Request) -> ResponseEnvelope:
        """Run one request through the app."""
        return self.app.handle(request)

    @property
    def host(self) -> str:
        return self.options.get("host") or self.app.config.host

    @property
    def port(self) -> int:
        return self.options.get("port") or self.app.config.port


class AdapterRegistry:
    """Name -> adapter class mapping.

    Usage::

        adapters = AdapterRegistry()
        adapters.register("asgi", AsgiAdapter)
        adapters.get("asgi")  # -> AsgiAdapter
    """

    __slots__ = ("_adapters",)

    def __init__(self) -> None:
        self._adapters: dict[str, type[Adapter]] = {}

    def register(self, name: str, adapter_class: type[Adapter]) -> None:
        """Register *adapter_class* under *name*, replacing any previous entry."""
        self._adapters[str(name)] = adapter_class

    def get(self, name: str) -> type[Adapter]:
        """Return the adapter class for *name*. Raises ``AdapterNotFound``."""
        try:
            return self._adapters[str(name)]
        except KeyError:
            raise AdapterNotFound(str(name), self.available) from None

    @property
    def available(self) -> tuple[str, ...]:
        return tuple(self._adapters)

    def __contains__(self, name: object) -> bool:
        return name in self._adapters

    def __iter__(self) -> Iterator[str]:
        return iter(self._adapters)

    def __len__(self) -> int:
        return len(self._adapters)


def default_adapters() -> AdapterRegistry:
    """A new registry holding the built-in adapters."""
    from flashapi.adapters.asgi import AsgiAdapter
    from flashapi.adapters.wsgi import WsgiAdapter

    registry = AdapterRegistry()
    registry.register("asgi", AsgiAdapter)
    registry.register("wsgi", WsgiAdapter)
    return registry


__all__ = ["Adapter", "AdapterRegistry", "default_adapters"]
