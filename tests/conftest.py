from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.domain.entities.user import StoredUser, UserCreate
from app.domain.ports.user_repository import UserRepositoryPort


@pytest.fixture
def user_create():
    return UserCreate(id="id", name="A", email="a@b.com", password="p")


@pytest.fixture
def stored_user(user_create):
    return StoredUser(
        **user_create.model_dump(),
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def mock_repo():
    """Repository port double; get_by_email finds nobody unless told otherwise."""
    repo = MagicMock(spec=UserRepositoryPort)
    repo.get_by_email = AsyncMock(return_value=None)
    repo.create = AsyncMock(side_effect=lambda user: user)
    return repo
