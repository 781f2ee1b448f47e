"""Tests for exception to HTTP response mapping."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from study_tracker.exceptions import (
    DatabaseConnectionError,
    DuplicateRecordError,
    RecordNotFoundError,
)
from study_tracker.utils.exception_handlers import (
    LOAD_FAILED_MESSAGE,
    SAVE_FAILED_MESSAGE,
    register_exception_handlers,
)


@pytest.fixture
async def client():
    """Client for a bare app whose routes raise application errors."""
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/db")
    async def read_fails():
        raise DatabaseConnectionError("connection refused by 10.0.0.5")

    @app.post("/db")
    async def write_fails():
        raise DatabaseConnectionError("connection refused by 10.0.0.5")

    @app.get("/missing")
    async def missing():
        raise RecordNotFoundError("Profile", 7)

    @app.post("/duplicate")
    async def duplicate():
        raise DuplicateRecordError("Profile", "name already used")

    @app.post("/boom")
    async def boom():
        raise RuntimeError("unexpected")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.mark.asyncio
async def test_database_error_on_read_hides_detail(client: AsyncClient):
    response = await client.get("/db")

    assert response.status_code == 503
    assert response.json()["message"] == LOAD_FAILED_MESSAGE
    assert "10.0.0.5" not in response.text


@pytest.mark.asyncio
async def test_database_error_on_write(client: AsyncClient):
    response = await client.post("/db")

    assert response.status_code == 503
    assert response.json()["message"] == SAVE_FAILED_MESSAGE


@pytest.mark.asyncio
async def test_not_found(client: AsyncClient):
    response = await client.get("/missing")

    assert response.status_code == 404
    assert response.json()["model_name"] == "Profile"
    assert response.json()["record_id"] == 7


@pytest.mark.asyncio
async def test_duplicate(client: AsyncClient):
    response = await client.post("/duplicate")

    assert response.status_code == 409
    assert response.json()["message"] == "name already used"


@pytest.mark.asyncio
async def test_unhandled_error(client: AsyncClient):
    response = await client.post("/boom")

    assert response.status_code == 500
    assert response.json()["message"] == SAVE_FAILED_MESSAGE
