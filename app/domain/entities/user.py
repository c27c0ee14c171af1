from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from app.core.utils.result import BadRequestError, Result

class UserCreate(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    password: str

class StoredUser(UserCreate):
    created_at: datetime

# Checked in this order; the first missing field wins.
REQUIRED_FIELDS = (
    ("id", "Id"),
    ("name", "Name"),
    ("email", "E-mail"),
    ("password", "Password"),
)

class User:
    """Sign-up entity. Construction fails with BadRequestError on the first missing field."""

    def __init__(self, props: Mapping[str, Any] | UserCreate | None):
        if isinstance(props, UserCreate):
            props = props.model_dump()
        props = props or {}
        self._validate(props)
        self._props = UserCreate(
            id=props["id"],
            name=props["name"],
            email=props["email"],
            password=props["password"],
        )

    @staticmethod
    def _validate(props: Mapping[str, Any]):
        for field, label in REQUIRED_FIELDS:
            if not props.get(field):
                raise BadRequestError(f"{label} is required")
        for field, label in REQUIRED_FIELDS:
            if not isinstance(props[field], str):
                raise BadRequestError(f"{label} must be a string")

    @classmethod
    def create(cls, props: Mapping[str, Any] | UserCreate | None) -> Result["User", BadRequestError]:
        try:
            return Result.Ok(cls(props))
        except BadRequestError as error:
            return Result.Err(error)

    @property
    def props(self) -> UserCreate:
        return self._props

    def __repr__(self):
        return f"User(id={self._props.id!r}, email={self._props.email!r})"
