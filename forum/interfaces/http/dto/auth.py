from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from forum.domain.users.entities import User


class RegisterRequestDTO(BaseModel):
    # Shape only; the character and length rules live in the domain validator.
    username: str = Field(max_length=256)
    email: str = Field(max_length=320)
    password: str = Field(max_length=256)


class LoginRequestDTO(BaseModel):
    identifier: str = Field(
        min_length=1,
        max_length=320,
        validation_alias=AliasChoices("identifier", "email", "username"),
    )
    password: str = Field(min_length=1, max_length=256)


class AuthSuccessDTO(BaseModel):
    ok: bool = True


class RegisterSuccessDTO(AuthSuccessDTO):
    user_id: int


class LoginSuccessDTO(AuthSuccessDTO):
    expires_at: datetime


class UserDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> UserDTO:
        return cls.model_validate(user)
