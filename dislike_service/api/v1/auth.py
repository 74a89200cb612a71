from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi.security import OAuth2PasswordRequestForm
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession
from starlette import status

from dislike_service.api.dependencies.auth import PROFILE_KEY, get_required_profile
from dislike_service.api.dependencies.database import get_session
from dislike_service.core import settings
from dislike_service.core.constant import (
    FAIL_AUTH_VALIDATION_CREDENTIAL,
    FAIL_USER_ALREADY_EXISTS,
    FAIL_USER_NOT_FOUND,
    SUCCESS_LOGOUT,
)
from dislike_service.core.security import MASKED_PASSWORD
from dislike_service.core.token import create_token_for_user
from dislike_service.models.user import User
from dislike_service.schemas.user import (
    UserFromDB,
    UserInCreate,
    UserInSignIn,
    UserOut,
    UserProfile,
    UserTokenData,
)
from dislike_service.services.auth import authenticate_user, get_user_by_username
from dislike_service.services.users import create_user

router = APIRouter()


def _open_session(request: Request, user: User, password: str) -> UserProfile:
    profile = UserProfile(**UserOut.model_validate(user).model_dump(), password=password)
    request.session[PROFILE_KEY] = profile.model_dump()
    return profile


@router.post("/register", response_model=UserProfile)
async def register(
    request: Request,
    user_in: Annotated[UserInCreate, Body()],
    db: AsyncSession = Depends(get_session),
) -> UserProfile:
    existing_user = await get_user_by_username(db, user_in.username)
    if existing_user:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=FAIL_USER_ALREADY_EXISTS,
        )

    user = await create_user(db, user_in)
    logger.info("Registered user {0}", user.username)
    return _open_session(request, user, "")


@router.post("/login", response_model=UserProfile)
async def login(
    request: Request,
    user_in: Annotated[UserInSignIn, Body()],
    db: AsyncSession = Depends(get_session),
) -> UserProfile:
    existing_user = await get_user_by_username(db, user_in.username)
    if existing_user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=FAIL_USER_NOT_FOUND,
        )
    if not existing_user.check_password(user_in.password):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=FAIL_AUTH_VALIDATION_CREDENTIAL,
        )

    return _open_session(request, existing_user, MASKED_PASSWORD)


@router.post("/profile", response_model=UserProfile)
async def profile(
    current_profile: Annotated[dict[str, Any], Depends(get_required_profile)],
) -> UserProfile:
    return UserProfile.model_validate(current_profile)


@router.post("/logout", status_code=status.HTTP_200_OK)
async def logout(request: Request) -> dict:
    request.session.clear()
    return {"message": SUCCESS_LOGOUT}


@router.post("/token", response_model=UserTokenData, status_code=200)
async def login_for_token(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    db: AsyncSession = Depends(get_session),
) -> UserTokenData:
    user = await authenticate_user(db, form_data.username, form_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=FAIL_AUTH_VALIDATION_CREDENTIAL,
        )

    return create_token_for_user(
        UserFromDB.model_validate(user),
        settings.secret_key.get_secret_value(),
    )
