from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from dislike_service.api.dependencies.auth import resolve_user_id
from dislike_service.api.dependencies.database import get_session
from dislike_service.core.constant import FAIL_VALIDATION_MATCHED_DISLIKE_ID
from dislike_service.schemas.dislike import DislikeDeleteResponse, DislikeOut
from dislike_service.schemas.post import PostOut
from dislike_service.schemas.user import UserOut
from dislike_service.services.dislikes import (
    count_dislikes,
    delete_dislike,
    find_all_posts_disliked_by_user,
    find_all_users_that_disliked_post,
    find_dislike_by_id,
    toggle_dislike,
)

router = APIRouter()


@router.get("/users/{uid}/dislikes", response_model=List[PostOut])
async def find_all_tuits_disliked_by_user(
    user_id: str = Depends(resolve_user_id),
    db: AsyncSession = Depends(get_session),
) -> List[PostOut]:
    posts = await find_all_posts_disliked_by_user(db, user_id)
    return [PostOut.model_validate(p) for p in posts]


@router.get("/tuits/{tid}/dislikes", response_model=List[UserOut])
async def find_all_users_that_disliked_tuit(
    tid: str,
    db: AsyncSession = Depends(get_session),
) -> List[UserOut]:
    users = await find_all_users_that_disliked_post(db, tid)
    return [UserOut.model_validate(u) for u in users]


@router.put("/users/{uid}/dislikes/{tid}", status_code=status.HTTP_200_OK)
async def user_toggles_tuit_dislikes(
    tid: str,
    user_id: str = Depends(resolve_user_id),
    db: AsyncSession = Depends(get_session),
) -> Response:
    await toggle_dislike(db, user_id, tid)
    return Response(status_code=status.HTTP_200_OK)


# Отладочные эндпоинты

@router.get("/tuits/{tid}/dislikes/count", response_model=int)
async def count_dislikes_on_tuit(
    tid: str,
    db: AsyncSession = Depends(get_session),
) -> int:
    return await count_dislikes(db, tid)


@router.delete("/tuits/dislikes/{did}/delete", response_model=DislikeDeleteResponse)
async def remove_dislike(
    did: str,
    db: AsyncSession = Depends(get_session),
) -> DislikeDeleteResponse:
    deleted_count = await delete_dislike(db, did)
    return DislikeDeleteResponse(deleted_count=deleted_count)


@router.get("/dislikes/{did}", response_model=DislikeOut)
async def get_dislike(
    did: str,
    db: AsyncSession = Depends(get_session),
) -> DislikeOut:
    dislike = await find_dislike_by_id(db, did)
    if dislike is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, FAIL_VALIDATION_MATCHED_DISLIKE_ID)
    return DislikeOut.model_validate(dislike)
