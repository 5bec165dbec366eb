"""Route and resolution result frozen dataclasses."""

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    ``responder`` is a symbolic name, looked up in the responder
    registry at dispatch time.
    """

    method: str
    path: str
    responder: str

    @property
    def key(self) -> tuple[str, str]:
        return (self.method, self.path)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """The request matched a route exactly."""

    route: Route

    @property
    def responder(self) -> str:
        return self.route.responder


@dataclass(frozen=True, slots=True)
class MethodMismatch:
    """The path is registered, but only under other methods."""

    method: str
    path: str
    allowed: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class NoRoute:
    """Nothing is registered for the path."""

    path: str


Resolution: TypeAlias = RouteMatch | MethodMismatch | NoRoute
