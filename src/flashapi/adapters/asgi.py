"""ASGI adapter — the only component that touches raw ASGI directly.

Reads the request body, converts the scope into a ``Request``, runs it
through the app, and sends the envelope back through ASGI ``send()``.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

from flashapi.adapters import Adapter
from flashapi.http.request import Request
from flashapi.server.errors import payload_too_large
from flashapi.server.sender import Send, send_envelope

Scope: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[MutableMapping[str, Any]]]


class BodyTooLarge(Exception):  # noqa: N818
    """The streamed body went past the configured limit."""


class AsgiAdapter(Adapter):
    """ASGI 3 application wrapping a flashapi ``App``.

    Usable directly as the ASGI callable (``asgi_app = AsgiAdapter(app)``)
    or started with a pounce server via ``start()``.
    """

    name = "asgi"

    def __init__(self, app: Any, **options: Any) -> None:
        super().__init__(app, **options)
        self._server: Any = None

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        limit = self.app.config.max_content_length
        try:
            body = await _read_body(receive, limit)
        except BodyTooLarge:
            await send_envelope(payload_too_large(Request.from_asgi(scope), limit), send)
            return

        request = Request.from_asgi(scope, body)
        await send_envelope(self.handle(request), send)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Freeze the app at startup so configuration errors surface early."""
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                try:
                    self.app.freeze()
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    def start(self) -> None:
        """Serve with pounce. Blocks until the server exits."""
        from flashapi.server.dev import build_pounce_server

        self.app.freeze()
        self._server = build_pounce_server(
            self,
            self.host,
            self.port,
            workers=self.options.get("workers", 1),
            reload=self.options.get("reload", False),
        )
        self._server.run()

    def stop(self) -> None:
        if self._server is not None and hasattr(self._server, "shutdown"):
            self._server.shutdown()


async def _read_body(receive: Receive, limit: int) -> bytes:
    """Collect the full request body, refusing more than *limit* bytes."""
    chunks: list[bytes] = []
    size = 0
    while True:
        message = await receive()
        if message["type"] == "http.disconnect":
            break
        chunk = message.get("body", b"")
        if chunk:
            size += len(chunk)
            if size > limit:
                raise BodyTooLarge
            chunks.append(chunk)
        if not message.get("more_body", False):
            break
    return b"".join(chunks)
