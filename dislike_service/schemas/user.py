from pydantic import BaseModel, ConfigDict, Field, field_validator

from dislike_service.core.security import MAX_PASSWORD_BYTES


class UserBase(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
    )
    username: str


class UserFromDB(UserBase):
    id: str


class UserOut(UserFromDB):
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class UserProfile(UserOut):
    """Профиль в сессии; пароль всегда замаскирован."""

    password: str = ""


class UserInSignIn(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        # bcrypt принимает не больше 72 байт
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"пароль длиннее {MAX_PASSWORD_BYTES} байт")
        return value


class UserInCreate(UserInSignIn):
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class UserTokenData(BaseModel):
    access_token: str | None = None
    token_type: str | None = None
