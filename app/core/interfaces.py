from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

I = TypeVar("I")
O = TypeVar("O")

class HttpRequest(BaseModel):
    body: dict[str, Any] = Field(default_factory=dict)

class HttpResponse(BaseModel):
    status_code: int
    body: dict[str, Any] | None = None

class UseCase(ABC, Generic[I, O]):
    @abstractmethod
    async def execute(self, inputs: I) -> O:
        pass

class Controller(ABC):
    @abstractmethod
    async def handle(self, request: HttpRequest) -> HttpResponse:
        pass
