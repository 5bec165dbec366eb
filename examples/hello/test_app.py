"""Tests for the hello example."""

import pytest

from flashapi.testing import TestClient


@pytest.mark.asyncio
async def test_hello(example_app) -> None:
    async with TestClient(example_app) as client:
        response = await client.get("/hello")

    assert response.status == 200
    assert response.headers["content-type"] == "application/json"
    assert response.text == '{"status_code":200,"success":true,"message":"Hello, World!"}'


@pytest.mark.asyncio
async def test_unknown_path(example_app) -> None:
    async with TestClient(example_app) as client:
        response = await client.get("/goodbye")

    assert response.status == 404
    assert response.json() == {
        "status_code": 404,
        "success": False,
        "error": "No route found for: /goodbye",
    }
