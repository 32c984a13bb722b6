from __future__ import annotations

from pydantic import BaseModel, Field


class LoginRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=180)
    password: str = Field(min_length=1, max_length=4096)  # no strength check on login


class LoginSuccessDTO(BaseModel):
    message: str = "Login successful"
    user_id: int
    token: str
