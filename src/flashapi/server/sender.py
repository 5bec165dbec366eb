"""Response sending — translates a ResponseEnvelope to ASGI messages or WSGI parts."""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

from flashapi.http.response import ResponseEnvelope

Send: TypeAlias = Callable[[MutableMapping[str, Any]], Awaitable[None]]

STATUS_PHRASES: dict[int, str] = {
    200: "OK",
    201: "Created",
    204: "No Content",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    413: "Payload Too Large",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
}


def body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def encode_envelope(envelope: ResponseEnvelope) -> tuple[list[tuple[str, str]], bytes]:
    """Header pairs (with ``Content-Length``) and body bytes for *envelope*."""
    body = envelope.body_bytes if body_allowed(envelope.status_code) else b""
    headers = [(name, value) for name, value in envelope.headers.items()]
    headers.append(("Content-Length", str(len(body))))
    return headers, body


def status_line(status: int) -> str:
    """WSGI status string, e.g. ``"404 Not Found"``."""
    return f"{status} {STATUS_PHRASES.get(status, 'Unknown')}"


async def send_envelope(envelope: ResponseEnvelope, send: Send) -> None:
    """Translate an envelope into ASGI send() calls."""
    headers, body = encode_envelope(envelope)
    raw_headers = [
        (name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in headers
    ]

    await send(
        {
            "type": "http.response.start",
            "status": envelope.status_code,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )
