from abc import ABC, abstractmethod
from app.domain.entities.user import StoredUser, UserCreate

class UserRepositoryPort(ABC):
    @abstractmethod
    async def get_by_email(self, email: str) -> StoredUser | None:
        pass

    @abstractmethod
    async def create(self, user: UserCreate) -> UserCreate:
        pass
