"""Immutable HTTP request.

Frozen metadata and raw body, built once by an adapter. Every derived
accessor is a pure function of the stored fields.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from flashapi.http.cookies import parse_cookies
from flashapi.http.headers import Headers
from flashapi.http.query import QueryParams

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``method`` and ``path`` are kept exactly as the adapter received them;
    the dispatcher decides what to do with odd values (including ``None``).

    Build one directly, or through ``create()`` with plain Python values,
    ``from_asgi()`` or ``from_wsgi()``. Plain mappings and query strings
    given to the constructor are wrapped in ``Headers``, ``QueryParams``
    and a read-only cookie mapping.
    """

    method: str | None = None
    path: str | None = None
    query: QueryParams = field(default_factory=QueryParams)
    headers: Headers = field(default_factory=Headers)
    content_type: str | None = None
    body: bytes | str | None = None
    protocol: str | None = None
    cookies: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Plain values passed to the constructor become the immutable helpers
        if not isinstance(self.headers, Headers):
            object.__setattr__(self, "headers", Headers.from_mapping(self.headers))
        if not isinstance(self.query, QueryParams):
            query = self.query if isinstance(self.query, (str, bytes)) else None
            object.__setattr__(self, "query", QueryParams(query))
        if not isinstance(self.cookies, MappingProxyType):
            cookies = self.cookies if isinstance(self.cookies, Mapping) else {}
            object.__setattr__(self, "cookies", MappingProxyType(dict(cookies)))

    # -- Method predicates --

    def _method_is(self, verb: str) -> bool:
        return self.method is not None and self.method.upper() == verb

    @property
    def is_get(self) -> bool:
        return self._method_is("GET")

    @property
    def is_post(self) -> bool:
        return self._method_is("POST")

    @property
    def is_put(self) -> bool:
        return self._method_is("PUT")

    @property
    def is_patch(self) -> bool:
        return self._method_is("PATCH")

    @property
    def is_delete(self) -> bool:
        return self._method_is("DELETE")

    @property
    def is_head(self) -> bool:
        return self._method_is("HEAD")

    @property
    def is_options(self) -> bool:
        return self._method_is("OPTIONS")

    # -- Content --

    @property
    def is_json(self) -> bool:
        """True if the content type mentions ``application/json`` (any case)."""
        return bool(self.content_type) and JSON_CONTENT_TYPE in self.content_type.lower()

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup; ``None`` when missing."""
        if not name:
            return None
        return self.headers.get(name)

    @property
    def query_params(self) -> dict[str, str]:
        """Query parameters as a plain dict (first value per key)."""
        return self.query.to_dict()

    def json_body(self) -> dict[str, Any]:
        """Parse the body as a JSON object.

        Returns ``{}`` when the request is not JSON, the body is empty,
        the payload is malformed, or it decodes to something other than
        an object.
        """
        if not self.is_json or not self.body:
            return {}
        try:
            data = json.loads(self.body)
        except (ValueError, UnicodeDecodeError, RecursionError):
            return {}
        if not isinstance(data, dict):
            return {}
        return data

    # -- Factories --

    @classmethod
    def create(
        cls,
        *,
        method: str | None = None,
        path: str | None = None,
        query_string: str | bytes | None = None,
        headers: object = None,
        content_type: str | None = None,
        body: bytes | str | None = None,
        protocol: str | None = None,
        cookies: Mapping[str, str] | None = None,
    ) -> Request:
        """Build a Request from plain values.

        ``headers`` may be any mapping (non-mappings are treated as no
        headers). ``content_type`` and ``cookies`` fall back to the
        matching headers when not given.
        """
        parsed_headers = Headers.from_mapping(headers)
        if content_type is None:
            content_type = parsed_headers.get("content-type")
        if cookies is None:
            cookies = parse_cookies(parsed_headers.get("cookie"))
        return cls(
            method=method,
            path=path,
            query=QueryParams(query_string),
            headers=parsed_headers,
            content_type=content_type,
            body=body,
            protocol=protocol,
            cookies=dict(cookies),
        )

    @classmethod
    def from_asgi(cls, scope: Mapping[str, Any], body: bytes = b"") -> Request:
        """Create a Request from an ASGI HTTP scope and the full body."""
        headers = Headers.from_asgi(scope.get("headers", ()))
        return cls(
            method=scope.get("method"),
            path=scope.get("path"),
            query=QueryParams(scope.get("query_string", b"")),
            headers=headers,
            content_type=headers.get("content-type"),
            body=body,
            protocol=scope.get("scheme", "http"),
            cookies=parse_cookies(headers.get("cookie")),
        )

    @classmethod
    def from_wsgi(cls, environ: Mapping[str, Any], body: bytes = b"") -> Request:
        """Create a Request from a WSGI environ and the full body.

        Header names are rebuilt from ``HTTP_*`` keys plus ``CONTENT_TYPE``
        and ``CONTENT_LENGTH``.
        """
        pairs: list[tuple[str, str]] = []
        for key, value in environ.items():
            if key.startswith("HTTP_"):
                pairs.append((_wsgi_header_name(key[5:]), value))
            elif key in ("CONTENT_TYPE", "CONTENT_LENGTH") and value:
                pairs.append((_wsgi_header_name(key), value))
        headers = Headers(pairs)
        return cls(
            method=environ.get("REQUEST_METHOD"),
            path=environ.get("PATH_INFO"),
            query=QueryParams(environ.get("QUERY_STRING", "")),
            headers=headers,
            content_type=environ.get("CONTENT_TYPE") or None,
            body=body,
            protocol=environ.get("wsgi.url_scheme", "http"),
            cookies=parse_cookies(headers.get("cookie")),
        )


def _wsgi_header_name(key: str) -> str:
    """``USER_AGENT`` -> ``User-Agent``."""
    return "-".join(part.capitalize() for part in key.split("_"))
