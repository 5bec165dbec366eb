"""Routing — static route table and exact-match dispatch.

Routes are registered during setup and frozen before the first request.
"""

from flashapi.routing.builder import RouteBuilder, draw
from flashapi.routing.dispatcher import match, resolve
from flashapi.routing.route import MethodMismatch, NoRoute, Resolution, Route, RouteMatch
from flashapi.routing.table import RouteTable

__all__ = [
    "MethodMismatch",
    "NoRoute",
    "Resolution",
    "Route",
    "RouteBuilder",
    "RouteMatch",
    "RouteTable",
    "draw",
    "match",
    "resolve",
]
