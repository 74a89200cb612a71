from typing import Annotated, Any, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer

from dislike_service.core import settings, token as t
from dislike_service.core.constant import FAIL_AUTH_CHECK, FAIL_AUTH_NO_PROFILE, FAIL_INVALID_TOKEN
from dislike_service.schemas.user import UserFromDB

ME = "me"
PROFILE_KEY = "profile"

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.api_v1_prefix}/auth/token", auto_error=False)


def get_session_profile(request: Request) -> Optional[dict[str, Any]]:
    return request.session.get(PROFILE_KEY)


def get_required_profile(
    profile: Annotated[Optional[dict[str, Any]], Depends(get_session_profile)]
) -> dict[str, Any]:
    if not profile:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=FAIL_AUTH_NO_PROFILE,
        )
    return profile


def get_current_user_optional(
    profile: Annotated[Optional[dict[str, Any]], Depends(get_session_profile)],
    token: Annotated[Optional[str], Depends(oauth2_scheme)],
) -> Optional[UserFromDB]:
    """Сначала профиль из сессии, затем Bearer-токен."""
    if profile:
        return UserFromDB.model_validate(profile)
    if not token:
        return None
    try:
        return t.get_user_from_token(token, settings.secret_key.get_secret_value())
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=FAIL_INVALID_TOKEN + f"({str(e)})",
        )


def resolve_user_id(
    uid: str,
    current_user: Annotated[Optional[UserFromDB], Depends(get_current_user_optional)],
) -> str:
    """Подставляет id текущего пользователя вместо ``me``."""
    if uid != ME:
        return uid
    if current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=FAIL_AUTH_CHECK,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user.id
