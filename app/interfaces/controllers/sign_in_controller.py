import asyncio
import logging
from collections.abc import Callable

from app.application.usecases.sign_in import SignInUseCase
from app.core.interfaces import Controller, HttpRequest, HttpResponse
from app.core.utils.result import AppError
from app.domain.entities.user import User, UserCreate

logger = logging.getLogger(__name__)

PLACEHOLDER_USER_ID = "id"
INTERNAL_ERROR_STATUS = 500


def placeholder_id() -> str:
    return PLACEHOLDER_USER_ID


class SignInController(Controller):
    """Adapts an HttpRequest into a sign-in.

    By default the use case runs detached: the 201 goes back as soon as the
    entity validates and the use case outcome is only logged. With
    ``wait_for_use_case`` the outcome is awaited and mapped into the response.
    """

    def __init__(
        self,
        usecase: SignInUseCase,
        wait_for_use_case: bool = False,
        id_factory: Callable[[], str] = placeholder_id,
        pending: set[asyncio.Task] | None = None,
    ):
        self.usecase = usecase
        self.wait_for_use_case = wait_for_use_case
        self.id_factory = id_factory
        self._pending: set[asyncio.Task] = pending if pending is not None else set()

    async def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            body = request.body or {}
            user = User.create({
                "id": self.id_factory(),
                "email": body.get("email"),
                "name": body.get("name"),
                "password": body.get("password"),
            })
            if user.is_err():
                return self._error_response(user.error())

            if not self.wait_for_use_case:
                self._start_detached(user.value().props)
                return HttpResponse(status_code=201, body=None)

            created = await self.usecase.execute(user.value().props)
            if created.is_err():
                return self._error_response(created.error())

            return HttpResponse(status_code=201, body=None)
        except AppError as error:
            return self._error_response(error)
        except Exception as error:
            logger.exception("Unhandled error during sign-in: %s", type(error).__name__)
            status_code = getattr(error, "status_code", None)
            if not isinstance(status_code, int):
                status_code = INTERNAL_ERROR_STATUS
            return HttpResponse(status_code=status_code, body=None)

    async def wait_pending(self):
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    def _error_response(self, error: AppError) -> HttpResponse:
        logger.warning("Sign-in rejected: status=%s message=%s", error.status_code, error.message)
        return HttpResponse(status_code=error.status_code, body={"message": error.message})

    def _start_detached(self, user: UserCreate):
        task = asyncio.create_task(self._run_detached(user))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _run_detached(self, user: UserCreate):
        try:
            result = await self.usecase.execute(user)
        except Exception:
            logger.exception("Detached sign-in failed for user %s", user.id)
            return
        if result.is_err():
            error = result.error()
            logger.warning(
                "Detached sign-in rejected for user %s: status=%s message=%s",
                user.id, error.status_code, error.message,
            )
