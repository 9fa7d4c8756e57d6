from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from blog_summarizer.core.database import get_db
from blog_summarizer.main import app


def make_session():
    """AsyncSession stand-in: add() is sync, the rest are awaitable."""
    session = MagicMock()
    session.commit = AsyncMock()
    session.refresh = AsyncMock()
    session.rollback = AsyncMock()
    session.execute = AsyncMock()
    return session


@pytest.fixture
def db_session():
    return make_session()


@pytest.fixture
def client(db_session):
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    # Not entered as a context manager, so startup table creation is skipped
    yield TestClient(app)
    app.dependency_overrides.clear()
