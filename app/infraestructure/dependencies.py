import uuid

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from app.application.usecases.sign_in import SignInUseCase
from app.core.config import Settings, get_settings
from app.core.db import get_sessionmaker
from app.domain.ports.user_repository import UserRepositoryPort
from app.infraestructure.repository.user_repository import UserRepository
from app.interfaces.controllers.sign_in_controller import SignInController, placeholder_id


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    return get_sessionmaker()

# Injeta o repositório com a fábrica de sessões
def get_user_repository(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> UserRepositoryPort:
    return UserRepository(session_factory)

# Injeta o caso de uso com o repositório
def get_sign_in_usecase(repo: UserRepositoryPort = Depends(get_user_repository)) -> SignInUseCase:
    return SignInUseCase(repo)

def generate_user_id() -> str:
    return str(uuid.uuid4())

def get_sign_in_controller(
    request: Request,
    usecase: SignInUseCase = Depends(get_sign_in_usecase),
    settings: Settings = Depends(get_settings),
) -> SignInController:
    return SignInController(
        usecase,
        wait_for_use_case=settings.signin_wait_for_use_case,
        id_factory=generate_user_id if settings.generate_user_ids else placeholder_id,
        pending=request.app.state.signin_tasks,
    )
