"""WSGI adapter — serves a flashapi ``App`` to WSGI servers.

Converts the environ into a ``Request``, runs it through the app, and
returns the envelope as a single body chunk.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any
from wsgiref.simple_server import WSGIServer, make_server

from flashapi.adapters import Adapter
from flashapi.http.request import Request
from flashapi.server.errors import payload_too_large
from flashapi.server.sender import encode_envelope, status_line

StartResponse = Callable[..., Any]


class WsgiAdapter(Adapter):
    """WSGI application wrapping a flashapi ``App``.

    Usable directly as the WSGI callable, or started on the stdlib
    reference server via ``start()``.
    """

    name = "wsgi"

    def __init__(self, app: Any, **options: Any) -> None:
        super().__init__(app, **options)
        self._server: WSGIServer | None = None

    def __call__(self, environ: Mapping[str, Any], start_response: StartResponse) -> Iterable[bytes]:
        limit = self.app.config.max_content_length
        length = _content_length(environ)

        if length > limit:
            envelope = payload_too_large(Request.from_wsgi(environ), limit)
        else:
            body = environ["wsgi.input"].read(length) if length else b""
            envelope = self.handle(Request.from_wsgi(environ, body))

        headers, body_bytes = encode_envelope(envelope)
        start_response(status_line(envelope.status_code), headers)
        return [body_bytes]

    def start(self) -> None:
        """Serve with ``wsgiref``. Blocks until ``stop()`` is called."""
        self.app.freeze()
        self._server = make_server(self.host, self.port, self)
        self._server.serve_forever()

    def stop(self) -> None:
        if self._server is not None:
            self._server.shutdown()
            self._server.server_close()
            self._server = None


def _content_length(environ: Mapping[str, Any]) -> int:
    try:
        return max(int(environ.get("CONTENT_LENGTH") or 0), 0)
    except ValueError:
        return 0
