"""Test utilities for flashapi applications.

    from flashapi.testing import TestClient
"""

from flashapi.testing.client import TestClient, TestResponse

__all__ = ["TestClient", "TestResponse"]
