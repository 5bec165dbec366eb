"""Responder registry — explicit mapping from responder names to factories.

Populated during setup. A route that names an unregistered responder is
a configuration error, raised at freeze time and again at dispatch.
"""

from collections.abc import Callable, Iterator
from typing import Any, TypeVar, overload

from flashapi.errors import ResponderNotFound
from flashapi.http.request import Request

ResponderFactory = Callable[[Request], Any]
F = TypeVar("F", bound=ResponderFactory)


class ResponderRegistry:
    """Name -> factory mapping.

    A factory is called with the ``Request`` and returns a responder,
    usually a ``Responder`` subclass::

        registry = ResponderRegistry()

        @registry.responder
        class HelloResponder(Responder):
            def call(self):
                return self.ok(message="Hello, World!")

        registry.get("HelloResponder")  # -> HelloResponder
    """

    __slots__ = ("_factories",)

    def __init__(self) -> None:
        self._factories: dict[str, ResponderFactory] = {}

    def register(self, name: str, factory: ResponderFactory) -> None:
        """Register *factory* under *name*, replacing any previous entry."""
        self._factories[name] = factory

    @overload
    def responder(self, factory: F, /) -> F: ...

    @overload
    def responder(self, *, name: str | None = None) -> Callable[[F], F]: ...

    def responder(self, factory: Any = None, /, *, name: str | None = None) -> Any:
        """Register a responder class (or factory) via decorator.

        Uses ``__name__`` unless *name* is given. Works bare
        (``@registry.responder``) or called (``@registry.responder(name=...)``).
        """

        def decorator(func: F) -> F:
            self.register(name or func.__name__, func)
            return func

        if factory is not None:
            return decorator(factory)
        return decorator

    def get(self, name: str) -> ResponderFactory:
        """Return the factory for *name*. Raises ``ResponderNotFound``."""
        try:
            return self._factories[name]
        except KeyError:
            raise ResponderNotFound(name, self.names) from None

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)
