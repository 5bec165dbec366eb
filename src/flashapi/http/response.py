"""Responder output and the JSON response envelope.

``Rendered`` is what a responder hands back; ``ResponseEnvelope`` is
what an adapter writes to the wire. Every envelope body carries
``status_code`` and ``success`` next to the responder's own keys.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

DEFAULT_STATUS = 200
JSON_HEADERS: Mapping[str, str] = {"Content-Type": "application/json"}
_ENVELOPE_KEYS = frozenset({"status_code", "success"})


def default_headers() -> dict[str, str]:
    """A fresh copy of the default JSON headers."""
    return dict(JSON_HEADERS)


def is_success(status_code: int) -> bool:
    """True for 2xx status codes."""
    return 200 <= status_code <= 299


def compute_body(status_code: int, body: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Merge the envelope keys with a responder body.

    Responder keys are kept, except ``status_code`` and ``success``,
    which always reflect *status_code*.
    """
    extra = {k: v for k, v in (body or {}).items() if k not in _ENVELOPE_KEYS}
    return {"status_code": status_code, "success": is_success(status_code), **extra}


@dataclass(frozen=True, slots=True)
class Rendered:
    """The result of a responder's ``render()``.

    Omitted fields fall back to the envelope defaults (status 200, JSON
    content type, empty body).
    """

    status_code: int | None = None
    headers: Mapping[str, str] | None = None
    body: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def coerce(cls, value: "Rendered | Mapping[str, Any] | None") -> "Rendered":
        """Accept a ``Rendered``, a mapping with the same keys, or ``None``."""
        if isinstance(value, Rendered):
            return value
        if value is None:
            return cls()
        if not isinstance(value, Mapping):
            msg = f"render() must return Rendered or a mapping, got {type(value).__name__}"
            raise TypeError(msg)
        return cls(
            status_code=value.get("status_code"),
            headers=value.get("headers"),
            body=value.get("body") or {},
        )


@dataclass(frozen=True, slots=True)
class ResponseEnvelope:
    """A normalized response: status, headers, and a JSON object body."""

    status_code: int = DEFAULT_STATUS
    headers: Mapping[str, str] = field(default_factory=default_headers)
    body: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_rendered(cls, rendered: "Rendered | Mapping[str, Any] | None") -> "ResponseEnvelope":
        """Apply defaults and envelope keys to a render result."""
        rendered = Rendered.coerce(rendered)
        status_code = rendered.status_code if rendered.status_code is not None else DEFAULT_STATUS
        headers = dict(rendered.headers) if rendered.headers is not None else default_headers()
        return cls(
            status_code=status_code,
            headers=headers,
            body=compute_body(status_code, rendered.body),
        )

    @classmethod
    def error(
        cls,
        status_code: int,
        message: str | None,
        headers: Mapping[str, str] | None = None,
    ) -> "ResponseEnvelope":
        """An error envelope: ``{"status_code", "success": false, "error"}``."""
        merged = default_headers()
        if headers:
            merged.update(headers)
        return cls(
            status_code=status_code,
            headers=merged,
            body=compute_body(status_code, {"error": message or ""}),
        )

    @property
    def success(self) -> bool:
        return is_success(self.status_code)

    def to_json(self) -> str:
        """Serialize the body as compact JSON."""
        return json.dumps(self.body, separators=(",", ":"), default=str)

    @property
    def body_bytes(self) -> bytes:
        """Serialized body as UTF-8 bytes."""
        return self.to_json().encode("utf-8")


# -- Convenience constructors --


def ok(**body: Any) -> Rendered:
    """200 with the given body."""
    return Rendered(status_code=200, body=body)


def created(**body: Any) -> Rendered:
    """201 with the given body."""
    return Rendered(status_code=201, body=body)


def no_content() -> Rendered:
    """204 with an empty body."""
    return Rendered(status_code=204, body={})


def bad_request(message: str = "Bad Request") -> Rendered:
    return Rendered(status_code=400, body={"error": message})


def unauthorized(message: str = "Unauthorized") -> Rendered:
    return Rendered(status_code=401, body={"error": message})


def forbidden(message: str = "Forbidden") -> Rendered:
    return Rendered(status_code=403, body={"error": message})


def not_found(message: str = "Not Found") -> Rendered:
    return Rendered(status_code=404, body={"error": message})


def unprocessable_entity(errors: Mapping[str, Any] | None = None) -> Rendered:
    """422 with validation errors under ``errors``."""
    return Rendered(status_code=422, body={"errors": dict(errors or {})})


def internal_server_error(message: str = "Internal Server Error") -> Rendered:
    return Rendered(status_code=500, body={"error": message})
