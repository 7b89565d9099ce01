"""API test fixtures — app built from explicit Settings + httpx ASGI client.

Invariants:
    - Every test gets its own app and a fresh in-memory SQLite database
    - app.state is populated the way the lifespan populates it
      (ASGITransport does not run the lifespan)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from userapp.api.renderer import Renderer
from userapp.config import Settings
from userapp.main import create_app
from userapp.services.user_service import UserService


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:", log_format="text",
    )


@pytest.fixture
async def app(settings, db_manager, seeded_repository):
    application = create_app(settings)
    application.state.db_manager = db_manager
    application.state.user_service = UserService(seeded_repository)
    application.state.renderer = Renderer(settings.template_dir)
    return application


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
