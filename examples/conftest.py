"""Fixtures shared by the example apps.

``example_app`` executes the ``app.py`` sitting next to the requesting
test module and returns its ``app``. The file runs again for every test,
so in-memory example state never leaks between tests.
"""

import importlib.util

import pytest


@pytest.fixture
def example_app(request: pytest.FixtureRequest):
    source = request.path.with_name("app.py")
    loader_spec = importlib.util.spec_from_file_location(
        f"flashapi_example_{source.parent.name}", source
    )
    assert loader_spec is not None and loader_spec.loader is not None
    module = importlib.util.module_from_spec(loader_spec)
    loader_spec.loader.exec_module(module)
    return module.app
