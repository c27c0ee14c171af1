import pytest

from app.application.usecases.sign_in import SignInUseCase
from app.core.utils.result import ConflictError


@pytest.mark.asyncio
class TestSignInUseCase:

    async def test_conflict_when_lookup_finds_nobody(self, mock_repo, user_create):
        """
        Scenario: get_by_email returns no user.
        Expected: Conflict "User already exists" and nothing is created.
        """
        usecase = SignInUseCase(mock_repo)

        result = await usecase.execute(user_create)

        assert result.is_err()
        assert isinstance(result.error(), ConflictError)
        assert result.error().status_code == 409
        assert result.error().message == "User already exists"
        mock_repo.get_by_email.assert_awaited_once_with("a@b.com")
        mock_repo.create.assert_not_awaited()

    async def test_creates_when_lookup_finds_a_user(self, mock_repo, user_create, stored_user):
        """
        Scenario: get_by_email returns a stored user.
        Expected: create is called with the supplied record and the result is True.
        """
        mock_repo.get_by_email.return_value = stored_user
        usecase = SignInUseCase(mock_repo)

        result = await usecase.execute(user_create)

        assert result.is_ok()
        assert result.value() is True
        mock_repo.create.assert_awaited_once_with(user_create)

    async def test_lookup_failure_propagates(self, mock_repo, user_create):
        mock_repo.get_by_email.side_effect = RuntimeError("connection lost")
        usecase = SignInUseCase(mock_repo)

        with pytest.raises(RuntimeError, match="connection lost"):
            await usecase.execute(user_create)

    async def test_create_failure_propagates(self, mock_repo, user_create, stored_user):
        mock_repo.get_by_email.return_value = stored_user
        mock_repo.create.side_effect = RuntimeError("disk full")
        usecase = SignInUseCase(mock_repo)

        with pytest.raises(RuntimeError, match="disk full"):
            await usecase.execute(user_create)
