from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from app.infraestructure.dependencies import get_sign_in_controller
from app.interfaces.controllers.sign_in_controller import SignInController
from app.core.config import Settings, get_settings
from app.core.interfaces import HttpRequest

user_router = APIRouter(prefix="/users", tags=["users"])

class SignInRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    email: str | None = None
    password: str | None = None

class MessageResponse(BaseModel):
    message: str | None = None

@user_router.post(
    "/sign-in",
    status_code=201,
    summary="Cadastra um novo usuario",
    responses={400: {"model": MessageResponse}, 409: {"model": MessageResponse}},
)
async def sign_in(request: SignInRequest, controller: SignInController = Depends(get_sign_in_controller)):
    response = await controller.handle(HttpRequest(body=request.model_dump(exclude_none=True)))
    if response.body is None:
        return Response(status_code=response.status_code)
    return JSONResponse(status_code=response.status_code, content=response.body)

@user_router.get("/env")
def get_env(settings: Settings = Depends(get_settings)):
    return settings.environment
