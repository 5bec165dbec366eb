"""Responder base class — the handler side of the responder contract.

A responder is built with the request, does its work in ``call()``, and
describes its output through ``render()``. The adapter boundary turns
that output into a ``ResponseEnvelope``.
"""

from collections.abc import Mapping
from functools import cached_property
from typing import Any

from flashapi.extraction import extract_params
from flashapi.http import response as _response
from flashapi.http.request import Request
from flashapi.http.response import Rendered, ResponseEnvelope, compute_body

_UNSET: Any = object()


class Responder:
    """Base class for responders.

    Subclasses implement ``call()``, usually by returning one of the
    status helpers::

        class HelloResponder(Responder):
            def call(self):
                return self.ok(message="Hello, World!")

    ``call()`` may also return ``None`` and implement ``render()``
    instead. Either way the render result is computed once.
    """

    # Status helpers, shared with flashapi.http.response
    ok = staticmethod(_response.ok)
    created = staticmethod(_response.created)
    no_content = staticmethod(_response.no_content)
    bad_request = staticmethod(_response.bad_request)
    unauthorized = staticmethod(_response.unauthorized)
    forbidden = staticmethod(_response.forbidden)
    not_found = staticmethod(_response.not_found)
    unprocessable_entity = staticmethod(_response.unprocessable_entity)
    internal_server_error = staticmethod(_response.internal_server_error)

    def __init__(self, request: Request) -> None:
        self.request = request
        self._rendered: Rendered = _UNSET

    @cached_property
    def params(self) -> dict[str, Any]:
        """Query parameters, plus the JSON body for POST/PUT/PATCH."""
        return extract_params(self.request)

    def call(self) -> Rendered | Mapping[str, Any] | None:
        """Handle the request. Subclasses must override."""
        msg = f"{type(self).__name__} must implement call()"
        raise NotImplementedError(msg)

    def render(self) -> Rendered | Mapping[str, Any]:
        """Describe the response. Needed when ``call()`` returns ``None``."""
        msg = f"{type(self).__name__} must implement render()"
        raise NotImplementedError(msg)

    # -- Responder contract --

    def respond(self) -> ResponseEnvelope:
        """Run ``call()`` and normalize the output into an envelope."""
        result = self.call()
        if result is not None:
            self._rendered = Rendered.coerce(result)
        return ResponseEnvelope.from_rendered(self.rendered)

    @property
    def rendered(self) -> Rendered:
        """The render result, computed on first access."""
        if self._rendered is _UNSET:
            self._rendered = Rendered.coerce(self.render())
        return self._rendered

    @property
    def status_code(self) -> int:
        status = self.rendered.status_code
        return status if status is not None else _response.DEFAULT_STATUS

    @property
    def headers(self) -> dict[str, str]:
        headers = self.rendered.headers
        return dict(headers) if headers is not None else _response.default_headers()

    @property
    def body(self) -> dict[str, Any]:
        """The envelope body: ``status_code`` and ``success`` plus render keys."""
        return compute_body(self.status_code, self.rendered.body)
