"""Tests for flashapi.app — setup, freezing, and request handling."""

import threading

import pytest

import flashapi
from flashapi import App, AppConfig, Responder, draw
from flashapi.errors import ConfigurationError, ResponderNotFound
from flashapi.http.request import Request


def _hello_app(**config) -> App:
    app = App(AppConfig(**config), routes=draw(("GET", "/hello", "HelloResponder")))

    @app.responder
    class HelloResponder(Responder):
        def call(self):
            return self.ok(message="Hello, World!")

    return app


class TestRouteRegistration:
    def test_verb_helpers(self) -> None:
        app = App()
        app.get("/", to="A")
        app.post("/", to="B")
        app.put("/", to="C")
        app.patch("/", to="D")
        app.delete("/", to="E")
        assert app.routes is not None
        assert app.routes.methods_for("/") == ("GET", "POST", "PUT", "PATCH", "DELETE")

    def test_duplicate_route(self) -> None:
        app = App()
        app.get("/", to="A")
        with pytest.raises(ConfigurationError, match="Route already defined: GET /"):
            app.get("/", to="B")

    def test_add_to_drawn_table(self) -> None:
        app = App(routes=draw(("GET", "/", "HomeResponder")))
        app.get("/x", to="HomeResponder")
        assert app.routes is not None
        assert app.routes.methods_for("/x") == ("GET",)
        assert [r.path for r in app.routes.routes] == ["/", "/x"]

    def test_drawn_table_duplicate_still_raises(self) -> None:
        app = App(routes=draw(("GET", "/", "HomeResponder")))
        with pytest.raises(ConfigurationError):
            app.get("/", to="Other")

    def test_register_responder(self) -> None:
        app = App()
        app.register_responder("Home", Responder)
        assert "Home" in app.responders


class TestFreeze:
    def test_no_routes(self) -> None:
        with pytest.raises(ConfigurationError, match="no routes"):
            App().freeze()

    def test_unregistered_responder(self) -> None:
        app = App(routes=draw(("GET", "/", "MissingResponder")))
        with pytest.raises(ResponderNotFound, match="MissingResponder"):
            app.freeze()

    def test_compiles_table(self) -> None:
        app = _hello_app()
        app.freeze()
        assert app.routes is not None
        assert app.routes.compiled

    def test_freeze_is_idempotent(self) -> None:
        app = _hello_app()
        app.freeze()
        app.freeze()

    def test_setup_after_freeze_raises(self) -> None:
        app = _hello_app()
        app.freeze()
        with pytest.raises(RuntimeError, match="Cannot modify the app"):
            app.get("/other", to="HelloResponder")
        with pytest.raises(RuntimeError):
            app.register_responder("Other", Responder)

    def test_concurrent_first_requests(self) -> None:
        app = _hello_app()
        results: list[int] = []

        def worker() -> None:
            results.append(app.handle(Request(method="GET", path="/hello")).status_code)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert results == [200] * 8


class TestHandle:
    def test_hello(self) -> None:
        envelope = _hello_app().handle(Request(method="GET", path="/hello"))
        assert envelope.status_code == 200
        assert envelope.headers == {"Content-Type": "application/json"}
        assert envelope.to_json() == '{"status_code":200,"success":true,"message":"Hello, World!"}'

    def test_debug_from_config(self) -> None:
        app = App(AppConfig(debug=True), routes=draw(("GET", "/", "Broken")))

        @app.responder(name="Broken")
        class BrokenResponder(Responder):
            def call(self):
                return {}["missing"]

        envelope = app.handle(Request(method="GET", path="/"))
        assert envelope.status_code == 500
        assert envelope.body["error"] == "Internal Server Error: 'missing'"


class TestPublicApi:
    def test_lazy_exports(self) -> None:
        for name in flashapi.__all__:
            assert getattr(flashapi, name) is not None

    def test_unknown_attribute(self) -> None:
        with pytest.raises(AttributeError):
            flashapi.NoSuchThing  # noqa: B018

    def test_config_defaults(self) -> None:
        config = AppConfig()
        assert (config.host, config.port, config.adapter) == ("127.0.0.1", 3000, "asgi")
        assert config.debug is False
