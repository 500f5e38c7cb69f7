from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator

# Older clients send ``userName``.
_USERNAME_ALIASES = AliasChoices("username", "userName")


class _CredentialsDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64, validation_alias=_USERNAME_ALIASES)
    password: str = Field(min_length=1, max_length=128)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("User name cannot be blank")
        return value


class RegisterRequestDTO(_CredentialsDTO):
    password2: str | None = Field(default=None, max_length=128)

    @model_validator(mode="after")
    def _passwords_match(self) -> "RegisterRequestDTO":
        if self.password2 is not None and self.password2 != self.password:
            raise ValueError("Passwords do not match")
        return self


class LoginRequestDTO(_CredentialsDTO):
    pass


class MessageDTO(BaseModel):
    message: str


class LoginSuccessDTO(BaseModel):
    message: str = "success"
    token: str
