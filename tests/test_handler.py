"""Tests for flashapi.server.handler — the adapter boundary."""

import logging

import pytest

from flashapi.http.request import Request
from flashapi.registry import ResponderRegistry
from flashapi.responder import Responder
from flashapi.routing import draw
from flashapi.server.handler import handle_request, run_responder


class HomeResponder(Responder):
    def call(self):
        return self.ok(message="home")


class BoomResponder(Responder):
    def call(self):
        msg = "boom"
        raise RuntimeError(msg)


class LazyResponder(Responder):
    pass


@pytest.fixture
def table():
    return draw(
        ("GET", "/", "HomeResponder"),
        ("GET", "/boom", "BoomResponder"),
        ("GET", "/lazy", "LazyResponder"),
        ("GET", "/ghost", "GhostResponder"),
        ("POST", "/users", "HomeResponder"),
        ("PUT", "/users", "HomeResponder"),
    )


@pytest.fixture
def responders():
    registry = ResponderRegistry()
    registry.register("HomeResponder", HomeResponder)
    registry.register("BoomResponder", BoomResponder)
    registry.register("LazyResponder", LazyResponder)
    return registry


def _get(path: str, method: str = "GET") -> Request:
    return Request(method=method, path=path)


class TestHandleRequest:
    def test_success(self, table, responders) -> None:
        envelope = handle_request(_get("/"), table=table, responders=responders)
        assert envelope.status_code == 200
        assert envelope.body["message"] == "home"

    def test_no_route_is_404(self, table, responders) -> None:
        envelope = handle_request(_get("/nope"), table=table, responders=responders)
        assert envelope.status_code == 404
        assert envelope.body == {
            "status_code": 404,
            "success": False,
            "error": "No route found for: /nope",
        }
        assert "Allow" not in envelope.headers

    def test_wrong_method_is_404_with_allow(self, table, responders) -> None:
        envelope = handle_request(_get("/users", "DELETE"), table=table, responders=responders)
        assert envelope.status_code == 404
        assert envelope.headers["Allow"] == "POST, PUT"
        assert envelope.body["error"] == (
            "Method not allowed: DELETE for /users. Available methods: POST, PUT"
        )

    def test_invalid_request_is_404(self, table, responders) -> None:
        envelope = handle_request(Request(), table=table, responders=responders)
        assert envelope.status_code == 404
        assert envelope.body["error"] == "Invalid request: method and path cannot be None"

    def test_exception_is_500(self, table, responders, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="flashapi.server"):
            envelope = handle_request(_get("/boom"), table=table, responders=responders)
        assert envelope.status_code == 500
        assert envelope.body == {
            "status_code": 500,
            "success": False,
            "error": "Internal Server Error",
        }
        assert "500 GET /boom" in caplog.text

    def test_debug_includes_message(self, table, responders) -> None:
        envelope = handle_request(_get("/boom"), table=table, responders=responders, debug=True)
        assert envelope.body["error"] == "Internal Server Error: boom"

    def test_unregistered_responder_is_500(self, table, responders) -> None:
        envelope = handle_request(
            _get("/ghost"), table=table, responders=responders, debug=True
        )
        assert envelope.status_code == 500
        assert "GhostResponder" in envelope.body["error"]

    def test_not_implemented_propagates(self, table, responders) -> None:
        with pytest.raises(NotImplementedError):
            handle_request(_get("/lazy"), table=table, responders=responders)


class TestRunResponder:
    def test_duck_typed_call(self) -> None:
        class Plain:
            def call(self):
                return {"status_code": 201, "body": {"id": 1}}

        envelope = run_responder(Plain())
        assert envelope.status_code == 201
        assert envelope.body == {"status_code": 201, "success": True, "id": 1}

    def test_duck_typed_render(self) -> None:
        class RenderOnly:
            def render(self):
                return {"body": {"a": 1}}

        assert run_responder(RenderOnly()).body == {"status_code": 200, "success": True, "a": 1}

    def test_neither(self) -> None:
        with pytest.raises(NotImplementedError, match="object must implement"):
            run_responder(object())
