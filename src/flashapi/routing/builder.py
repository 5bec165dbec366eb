"""Declarative route declaration.

Two equivalent surfaces::

    routes = (
        RouteBuilder()
        .get("/", to="HomeResponder")
        .post("/users", to="CreateUserResponder")
        .build()
    )

    routes = draw(
        ("GET", "/", "HomeResponder"),
        ("POST", "/users", "CreateUserResponder"),
    )

Both return a compiled ``RouteTable``; duplicates fail at build time.
"""

from collections.abc import Iterable

from flashapi.routing.table import RouteTable

HTTP_METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS")


class RouteBuilder:
    """Collects route entries, then builds a frozen ``RouteTable``."""

    __slots__ = ("_table",)

    def __init__(self) -> None:
        self._table = RouteTable()

    def add(self, method: str, path: str, *, to: str) -> "RouteBuilder":
        """Add a route. Raises ``ConfigurationError`` on duplicates."""
        self._table.add(method, path, to)
        return self

    def get(self, path: str, *, to: str) -> "RouteBuilder":
        return self.add("GET", path, to=to)

    def post(self, path: str, *, to: str) -> "RouteBuilder":
        return self.add("POST", path, to=to)

    def put(self, path: str, *, to: str) -> "RouteBuilder":
        return self.add("PUT", path, to=to)

    def patch(self, path: str, *, to: str) -> "RouteBuilder":
        return self.add("PATCH", path, to=to)

    def delete(self, path: str, *, to: str) -> "RouteBuilder":
        return self.add("DELETE", path, to=to)

    def head(self, path: str, *, to: str) -> "RouteBuilder":
        return self.add("HEAD", path, to=to)

    def options(self, path: str, *, to: str) -> "RouteBuilder":
        return self.add("OPTIONS", path, to=to)

    def build(self) -> RouteTable:
        """Compile and return the table."""
        self._table.compile()
        return self._table


def draw(*entries: tuple[str, str, str] | Iterable[tuple[str, str, str]]) -> RouteTable:
    """Build a compiled table from ``(method, path, responder)`` tuples.

    Accepts the tuples as positional arguments or as a single iterable
    (list, tuple or generator) of tuples.
    """
    if len(entries) == 1 and not _is_entry(entries[0]):
        entries = tuple(entries[0])
    builder = RouteBuilder()
    for method, path, responder in entries:
        builder.add(method, path, to=responder)
    return builder.build()


def _is_entry(value: object) -> bool:
    """``("GET", "/", "Home")`` is an entry; a tuple of entries is not."""
    return isinstance(value, tuple) and bool(value) and isinstance(value[0], str)
