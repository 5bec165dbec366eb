"""Static route table keyed by (method, path).

Routes are added during setup and the table is compiled (frozen) before
the first request. After that it is read concurrently without locks.
"""

from flashapi.errors import ConfigurationError
from flashapi.routing.route import Route


class RouteTable:
    """Exact-match route table.

    Usage::

        table = RouteTable()
        table.add("GET", "/users", "UsersResponder")
        table.add("POST", "/users", "CreateUserResponder")
        table.compile()
        table.lookup("GET", "/users")   # -> Route
        table.methods_for("/users")     # -> ("GET", "POST")

    Paths are not parsed: ``/users/:id`` is just a string and only
    matches itself.
    """

    __slots__ = ("_compiled", "_methods_by_path", "_routes")

    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], Route] = {}
        self._methods_by_path: dict[str, list[str]] = {}
        self._compiled = False

    def add(self, method: str, path: str, responder: str) -> Route:
        """Register a route. Must be called before compile().

        Raises ``ConfigurationError`` if the (method, path) pair is
        already taken.
        """
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        route = Route(method=str(method).upper(), path=path, responder=str(responder))
        if route.key in self._routes:
            msg = f"Route already defined: {route.method} {route.path}"
            raise ConfigurationError(msg)

        self._routes[route.key] = route
        self._methods_by_path.setdefault(path, []).append(route.method)
        return route

    def lookup(self, method: str, path: str) -> Route | None:
        """Return the route registered for *method* and *path*, if any."""
        return self._routes.get((method.upper(), path))

    def methods_for(self, path: str) -> tuple[str, ...]:
        """Methods registered for *path*, in registration order."""
        return tuple(self._methods_by_path.get(path, ()))

    @property
    def routes(self) -> list[Route]:
        """All registered routes, in registration order."""
        return list(self._routes.values())

    @property
    def compiled(self) -> bool:
        return self._compiled

    def compile(self) -> None:
        """Freeze the table. No more routes can be added."""
        self._compiled = True

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        method, path = key
        return isinstance(method, str) and (method.upper(), path) in self._routes

    def __repr__(self) -> str:
        return f"RouteTable({len(self)} routes, compiled={self._compiled})"
