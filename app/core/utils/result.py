from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")

class Result(Generic[T, E]):
    def __init__(self, value: Union[T, None] = None, error: Union[E, None] = None):
        self._value = value
        self._error = error

    @staticmethod
    def Ok(value: T) -> "Result[T, E]":
        return Result(value=value)

    @staticmethod
    def Err(error: E) -> "Result[T, E]":
        return Result(error=error)

    def is_ok(self) -> bool:
        return self._error is None

    def is_err(self) -> bool:
        return self._error is not None

    def value(self) -> T:
        if self.is_err():
            raise Exception(f"Tried to unwrap an error: {self._error}")
        return self._value

    def error(self) -> E:
        if self.is_ok():
            raise Exception(f"Tried to unwrap a value: {self._value}")
        return self._error

class AppError(Exception):
    """Base error carrying an HTTP status code"""

    def __init__(self, status_code: int, message: str | None = None):
        super().__init__(message)
        self._status_code = status_code
        self.message = message

    @property
    def status_code(self) -> int:
        return self._status_code

    def __str__(self):
        return self.message or ""


class BadRequestError(AppError):
    """Error 400"""

    def __init__(self, message: str | None = None):
        super().__init__(400, message)


class ConflictError(AppError):
    """Error 409"""

    def __init__(self, message: str | None = None):
        super().__init__(409, message)
