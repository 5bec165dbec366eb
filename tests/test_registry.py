"""Tests for flashapi.registry and flashapi.adapters registries."""

import pytest

from flashapi.adapters import Adapter, AdapterRegistry, default_adapters
from flashapi.adapters.asgi import AsgiAdapter
from flashapi.adapters.wsgi import WsgiAdapter
from flashapi.app import App
from flashapi.errors import AdapterNotFound, ConfigurationError, ResponderNotFound
from flashapi.registry import ResponderRegistry
from flashapi.responder import Responder


class TestResponderRegistry:
    def test_decorator_uses_class_name(self) -> None:
        registry = ResponderRegistry()

        @registry.responder
        class HomeResponder(Responder):
            pass

        assert registry.get("HomeResponder") is HomeResponder
        assert "HomeResponder" in registry

    def test_decorator_with_name(self) -> None:
        registry = ResponderRegistry()

        @registry.responder(name="Home")
        class HomeResponder(Responder):
            pass

        assert registry.get("Home") is HomeResponder
        assert "HomeResponder" not in registry

    def test_register_overwrites(self) -> None:
        registry = ResponderRegistry()
        registry.register("A", Responder)
        registry.register("A", HomeLike)
        assert registry.get("A") is HomeLike
        assert len(registry) == 1

    def test_missing(self) -> None:
        registry = ResponderRegistry()
        registry.register("A", Responder)
        with pytest.raises(ResponderNotFound) as exc_info:
            registry.get("B")
        assert exc_info.value.name == "B"
        assert exc_info.value.available == ("A",)
        assert isinstance(exc_info.value, ConfigurationError)

    def test_names_in_order(self) -> None:
        registry = ResponderRegistry()
        registry.register("B", Responder)
        registry.register("A", Responder)
        assert registry.names == ("B", "A")
        assert list(registry) == ["B", "A"]


class HomeLike(Responder):
    pass


class TestAdapterRegistry:
    def test_default_adapters(self) -> None:
        registry = default_adapters()
        assert registry.available == ("asgi", "wsgi")
        assert registry.get("asgi") is AsgiAdapter
        assert registry.get("wsgi") is WsgiAdapter

    def test_fresh_registry_each_call(self) -> None:
        assert default_adapters() is not default_adapters()

    def test_register_overwrites(self) -> None:
        registry = AdapterRegistry()
        registry.register("asgi", AsgiAdapter)
        registry.register("asgi", WsgiAdapter)
        assert registry.get("asgi") is WsgiAdapter
        assert len(registry) == 1

    def test_not_found_message(self) -> None:
        with pytest.raises(AdapterNotFound) as exc_info:
            default_adapters().get("puma")
        assert str(exc_info.value) == "Adapter 'puma' not found. Available adapters: asgi, wsgi"

    def test_contains(self) -> None:
        registry = default_adapters()
        assert "wsgi" in registry
        assert "thin" not in registry


class TestAdapterBase:
    def test_start_and_stop_not_implemented(self) -> None:
        adapter = Adapter(App())
        with pytest.raises(NotImplementedError, match="must implement start"):
            adapter.start()
        with pytest.raises(NotImplementedError, match="must implement stop"):
            adapter.stop()

    def test_host_and_port_fall_back_to_config(self) -> None:
        adapter = Adapter(App(), host=None, port=None)
        assert adapter.host == "127.0.0.1"
        assert adapter.port == 3000

    def test_options_override(self) -> None:
        adapter = Adapter(App(), host="0.0.0.0", port=9000)
        assert adapter.host == "0.0.0.0"
        assert adapter.port == 9000

    def test_app_adapter_by_name(self) -> None:
        app = App()
        assert isinstance(app.adapter("wsgi"), WsgiAdapter)
        assert isinstance(app.adapter(), AsgiAdapter)

    def test_app_adapter_unknown(self) -> None:
        with pytest.raises(AdapterNotFound):
            App().adapter("unicorn")
