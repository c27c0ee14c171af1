import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from app.domain.entities.user import StoredUser, UserCreate
from app.domain.ports.user_repository import UserRepositoryPort
from app.infraestructure.models.user_model import UserModel

logger = logging.getLogger(__name__)

class UserRepository(UserRepositoryPort):
    """Opens one session per operation so a detached sign-in never shares the request's session."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def get_by_email(self, email: str) -> StoredUser | None:
        async with self.session_factory() as db:
            result = await db.execute(
                select(UserModel).where(UserModel.email == email)
            )
            row = result.scalars().first()
        if row is None:
            return None
        return StoredUser(
            id=row.id,
            name=row.name,
            email=row.email,
            password=row.password,
            created_at=row.created_at,
        )

    async def create(self, user: UserCreate) -> UserCreate:
        async with self.session_factory() as db:
            db.add(UserModel(**user.model_dump()))
            await db.commit()
        logger.debug("Persisted user %s", user.id)
        return user
