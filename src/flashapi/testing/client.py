"""Async test client for flashapi applications.

Sends requests through the ASGI adapter directly, without sockets or
HTTP parsing, so tests exercise the same path as production.
"""

import json as json_module
from dataclasses import dataclass
from typing import Any

from flashapi.adapters.asgi import AsgiAdapter
from flashapi.app import App
from flashapi.http.headers import Headers


@dataclass(frozen=True, slots=True)
class TestResponse:
    """What the ASGI adapter sent back."""

    __test__ = False  # Tell pytest this is not a test class

    status: int
    headers: Headers
    body: bytes

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json_module.loads(self.body)

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")


class TestClient:
    """Async test client for flashapi applications.

    Usage::

        async with TestClient(app) as client:
            response = await client.get("/hello")
            assert response.status == 200
            assert response.json()["success"] is True
    """

    __test__ = False  # Tell pytest this is not a test class

    __slots__ = ("adapter", "app")

    def __init__(self, app: App) -> None:
        self.app = app
        self.adapter = AsgiAdapter(app)

    async def __aenter__(self) -> "TestClient":
        self.app.freeze()
        return self

    async def __aexit__(self, *args: object) -> None:
        return None

    async def get(self, path: str, *, headers: dict[str, str] | None = None) -> TestResponse:
        """Send a GET request."""
        return await self.request("GET", path, headers=headers)

    async def delete(self, path: str, *, headers: dict[str, str] | None = None) -> TestResponse:
        """Send a DELETE request."""
        return await self.request("DELETE", path, headers=headers)

    async def post(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        json: Any = None,
    ) -> TestResponse:
        """Send a POST request. ``json`` is encoded and typed as JSON."""
        return await self.request("POST", path, headers=headers, body=body, json=json)

    async def put(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        json: Any = None,
    ) -> TestResponse:
        """Send a PUT request."""
        return await self.request("PUT", path, headers=headers, body=body, json=json)

    async def patch(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        json: Any = None,
    ) -> TestResponse:
        """Send a PATCH request."""
        return await self.request("PATCH", path, headers=headers, body=body, json=json)

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        json: Any = None,
    ) -> TestResponse:
        """Send an arbitrary request through the ASGI adapter.

        *path* may carry a query string (``"/users?page=2"``).
        """
        header_map = dict(headers or {})
        if json is not None:
            body = json_module.dumps(json).encode("utf-8")
            header_map.setdefault("content-type", "application/json")

        exchange = _Exchange(body or b"")
        await self.adapter(_http_scope(method, path, header_map), exchange.receive, exchange.send)
        return exchange.response()


def _http_scope(method: str, target: str, headers: dict[str, str]) -> dict[str, Any]:
    path, _, query = target.partition("?")
    return {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method.upper(),
        "scheme": "http",
        "path": path,
        "raw_path": path.encode("latin-1"),
        "query_string": query.encode("latin-1"),
        "root_path": "",
        "headers": [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in headers.items()
        ],
        "server": ("testserver", 80),
        "client": ("127.0.0.1", 0),
    }


class _Exchange:
    """One in-memory request/response pair on the ASGI channel."""

    def __init__(self, body: bytes) -> None:
        self._pending: list[dict[str, Any]] = [
            {"type": "http.request", "body": body, "more_body": False}
        ]
        self.status = 200
        self.headers: list[tuple[bytes, bytes]] = []
        self.chunks: list[bytes] = []

    async def receive(self) -> dict[str, Any]:
        if self._pending:
            return self._pending.pop()
        return {"type": "http.disconnect"}

    async def send(self, message: dict[str, Any]) -> None:
        if message["type"] == "http.response.start":
            self.status = message["status"]
            self.headers = list(message.get("headers", ()))
        elif message["type"] == "http.response.body":
            self.chunks.append(message.get("body", b""))

    def response(self) -> TestResponse:
        return TestResponse(
            status=self.status,
            headers=Headers.from_asgi(self.headers),
            body=b"".join(self.chunks),
        )
