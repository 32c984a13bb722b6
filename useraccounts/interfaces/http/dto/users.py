from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_serializer

from useraccounts.domain.users.entities import User, UserChanges

_CREATED_AT_FORMAT = "%Y-%m-%d %H:%M:%S"


class RegisterRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=180)
    password: str = Field(min_length=1, max_length=4096)
    email: str = Field(min_length=1, max_length=255)


class UpdateUserRequestDTO(BaseModel):
    """All fields optional; an omitted or ``null`` field stays as it is."""

    username: str | None = Field(None, min_length=1, max_length=180)
    email: str | None = Field(None, min_length=1, max_length=255)
    password: str | None = Field(None, min_length=1, max_length=4096)

    def to_changes(self) -> UserChanges:
        return UserChanges(username=self.username, email=self.email, password=self.password)


class UserDTO(BaseModel):
    id: int
    username: str
    email: str
    created_at: datetime

    @field_serializer("created_at")
    def _format_created_at(self, value: datetime) -> str:
        return value.strftime(_CREATED_AT_FORMAT)

    @classmethod
    def from_entity(cls, user: User) -> UserDTO:
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
        )


class UserCreatedDTO(BaseModel):
    message: str = "User created"
    id: int


class MessageDTO(BaseModel):
    message: str
