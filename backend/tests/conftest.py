"""Test fixtures: temp-dir settings and FastAPI test client."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from sharebox.config import Settings
from sharebox.main import create_app

ADMIN = "admin@test.local"


@pytest.fixture
def settings(tmp_path):
    """Settings pointing every storage path into a temp directory."""
    return Settings(
        _env_file=None,
        data_dir=str(tmp_path),
        upload_dir=str(tmp_path / "uploads"),
        users_file=str(tmp_path / "users.json"),
        static_dir=str(tmp_path / "public"),
        admin_email=ADMIN,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def services(app):
    return app.state.services


@pytest_asyncio.fixture
async def client(app):
    """Provide an async test client bound to a fresh app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def signup(client: AsyncClient, email: str, password: str = "secret"):
    resp = await client.post("/api/signup", json={"email": email, "password": password})
    assert resp.status_code == 200
    return resp


async def upload(client: AsyncClient, owner: str, name: str = "notes.txt", data: bytes = b"hello"):
    return await client.post(
        "/api/upload",
        files={"file": (name, data, "text/plain")},
        data={"owner": owner},
    )
