"""flashapi application class.

Mutable during setup (route and responder registration).
Frozen at runtime when ``app.run()`` or ``app.handle()`` is first invoked.
"""

import threading
from typing import TYPE_CHECKING, Any

from flashapi.config import AppConfig
from flashapi.errors import ConfigurationError, ResponderNotFound
from flashapi.http.request import Request
from flashapi.http.response import ResponseEnvelope
from flashapi.registry import ResponderFactory, ResponderRegistry
from flashapi.routing.table import RouteTable
from flashapi.server.handler import handle_request

if TYPE_CHECKING:
    from flashapi.adapters import Adapter, AdapterRegistry


class App:
    """The flashapi application — composition root for one API.

    Owns the route table, the responder registry, and the config. A
    compiled table passed as ``routes`` is copied, so routes can still be
    added until the app freezes::

        app = App(routes=draw(("GET", "/hello", "HelloResponder")))

        @app.responder
        class HelloResponder(Responder):
            def call(self):
                return self.ok(message="Hello, World!")

        app.run(port=3000)

    Thread safety:
        The setup phase is single-threaded (decorators at import time).
        The freeze transition uses a Lock + double-check so exactly one
        thread compiles the app, even when several workers call
        ``handle()`` concurrently on the first request. After the freeze
        the route table and registry are only read.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_responders",
        "_routes",
        "config",
    )

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        routes: RouteTable | None = None,
        responders: ResponderRegistry | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        if routes is not None and routes.compiled:
            # draw() and RouteBuilder.build() hand back compiled tables
            routes = _editable_copy(routes)
        self._routes: RouteTable | None = routes
        self._responders: ResponderRegistry = responders or ResponderRegistry()
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Route registration --

    def route(self, method: str, path: str, *, to: str) -> None:
        """Register a route mapping *method* and *path* to a responder name.

        Raises ``ConfigurationError`` if the pair is already registered.
        """
        self._check_not_frozen()
        if self._routes is None:
            self._routes = RouteTable()
        self._routes.add(method, path, to)

    def get(self, path: str, *, to: str) -> None:
        self.route("GET", path, to=to)

    def post(self, path: str, *, to: str) -> None:
        self.route("POST", path, to=to)

    def put(self, path: str, *, to: str) -> None:
        self.route("PUT", path, to=to)

    def patch(self, path: str, *, to: str) -> None:
        self.route("PATCH", path, to=to)

    def delete(self, path: str, *, to: str) -> None:
        self.route("DELETE", path, to=to)

    # -- Responder registration --

    def responder(self, factory: Any = None, /, *, name: str | None = None) -> Any:
        """Register a responder class via decorator.

        Bare (``@app.responder``) registers under the class name;
        ``@app.responder(name="Home")`` uses an explicit name.
        """
        self._check_not_frozen()
        return self._responders.responder(factory, name=name)

    def register_responder(self, name: str, factory: ResponderFactory) -> None:
        """Register a responder factory under *name*."""
        self._check_not_frozen()
        self._responders.register(name, factory)

    @property
    def routes(self) -> RouteTable | None:
        """The route table (``None`` until a route is defined)."""
        return self._routes

    @property
    def responders(self) -> ResponderRegistry:
        return self._responders

    # -- Request handling --

    def handle(self, request: Request) -> ResponseEnvelope:
        """Turn one request into a response envelope.

        This is the contract adapters call. Routing and responder
        failures come back as error envelopes, never as exceptions.
        """
        self.freeze()
        assert self._routes is not None

        return handle_request(
            request,
            table=self._routes,
            responders=self._responders,
            debug=self.config.debug,
        )

    # -- Serving --

    def adapter(
        self,
        name: str | None = None,
        *,
        adapters: "AdapterRegistry | None" = None,
        **options: Any,
    ) -> "Adapter":
        """Build the adapter registered under *name* for this app.

        Defaults to ``config.adapter`` and the built-in adapter registry.
        Raises ``AdapterNotFound`` for unknown names.
        """
        if adapters is None:
            from flashapi.adapters import default_adapters

            adapters = default_adapters()
        adapter_class = adapters.get(name or self.config.adapter)
        return adapter_class(self, **options)

    def run(
        self,
        adapter: str | None = None,
        *,
        host: str | None = None,
        port: int | None = None,
        adapters: "AdapterRegistry | None" = None,
    ) -> "Adapter":
        """Start serving with the named adapter. Blocks until it stops.

        Freezes the app first, so configuration errors surface before
        the server binds its socket.
        """
        self.freeze()
        server = self.adapter(adapter, adapters=adapters, host=host, port=port)
        server.start()
        return server

    # -- Internal --

    def freeze(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        # 1. A route table is required
        if self._routes is None or len(self._routes) == 0:
            msg = (
                "Application has no routes. Pass routes=... to App() or "
                "register them with app.route() before serving."
            )
            raise ConfigurationError(msg)

        # 2. Every route must name a registered responder
        for route in self._routes.routes:
            if route.responder not in self._responders:
                raise ResponderNotFound(route.responder, self._responders.names)

        # 3. Compile route table
        self._routes.compile()
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes and responders before calling app.run()."
            )
            raise RuntimeError(msg)


def _editable_copy(table: RouteTable) -> RouteTable:
    """An uncompiled table holding the same routes, in the same order."""
    copy = RouteTable()
    for route in table.routes:
        copy.add(route.method, route.path, route.responder)
    return copy
