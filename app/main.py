import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from app.api.user_routes import user_router
from app.core.config import get_settings
from app.core.db import get_engine
from app.core.logging import configure_logging
from app.core.utils.result import AppError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    if app.state.signin_tasks:
        logger.info("Waiting for %d pending sign-in task(s)", len(app.state.signin_tasks))
        await asyncio.gather(*app.state.signin_tasks, return_exceptions=True)
    if get_engine.cache_info().currsize:
        await get_engine().dispose()


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(_request: Request, exc: AppError) -> JSONResponse:
        logger.warning("Application error: status=%s message=%s", exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Hexagonal FastAPI Sign-in", lifespan=lifespan)
    app.state.signin_tasks = set()
    register_error_handlers(app)
    app.include_router(user_router, prefix="/api")
    logger.info("Loaded settings for env=%s", settings.environment)
    return app


app = create_app()


#execute a applicação com o comando: 'uvicorn app.main:app --reload'  na raiz do projeto
#em test: 'set APP_ENV=test && uvicorn app.main:app --reload' na raiz do projeto
#alterar o APP_ENV para o ambiente desejado de acordo com os arquivos .env existentes
