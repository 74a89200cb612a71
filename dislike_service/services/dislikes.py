from fastapi import HTTPException, status
from loguru import logger
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from dislike_service.core.constant import (
    FAIL_DISLIKE_CONFLICT,
    FAIL_DISLIKE_DELETE,
    FAIL_DISLIKE_TOGGLE,
    FAIL_VALIDATION_MATCHED_POST_ID,
    FAIL_VALIDATION_MATCHED_USER_ID,
)
from dislike_service.models.dislike import Dislike
from dislike_service.models.post import Post
from dislike_service.models.user import User
from dislike_service.services.posts import find_post_by_id, update_dislikes
from dislike_service.services.users import get_user_by_id


# ————————————————————————————————————————————————————————————
# Запросы
# ————————————————————————————————————————————————————————————

async def find_all_users_that_disliked_post(db: AsyncSession, post_id: str) -> list[User]:
    stmt = (
        select(User)
        .join(Dislike, Dislike.disliked_by == User.id)
        .where(Dislike.post_id == post_id)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def find_all_posts_disliked_by_user(db: AsyncSession, user_id: str) -> list[Post]:
    """
    Тьюты, которые дизлайкнул пользователь.

    Inner join отбрасывает дизлайки, чей тьют уже удалён.
    """
    stmt = (
        select(Post)
        .join(Dislike, Dislike.post_id == Post.id)
        .where(Dislike.disliked_by == user_id)
        .options(joinedload(Post.author))
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def count_dislikes(db: AsyncSession, post_id: str) -> int:
    cnt = await db.scalar(
        select(func.count())
        .select_from(Dislike)
        .where(Dislike.post_id == post_id)
    )
    return cnt or 0


async def find_dislike_by_id(db: AsyncSession, dislike_id: str) -> Dislike | None:
    return await db.get(Dislike, dislike_id)


async def find_user_dislikes_post(db: AsyncSession, user_id: str, post_id: str) -> Dislike | None:
    result = await db.execute(
        select(Dislike).where(
            Dislike.disliked_by == user_id,
            Dislike.post_id == post_id,
        )
    )
    return result.scalar_one_or_none()


# ————————————————————————————————————————————————————————————
# Изменения (commit делает вызывающий код)
# ————————————————————————————————————————————————————————————

async def user_dislikes_post(db: AsyncSession, user_id: str, post_id: str) -> Dislike:
    """Бросает IntegrityError, если такая пара уже сохранена."""
    dislike = Dislike(post_id=post_id, disliked_by=user_id)
    db.add(dislike)
    await db.flush()
    return dislike


async def user_undislikes_post(db: AsyncSession, user_id: str, post_id: str) -> int:
    """Возвращает количество удалённых строк (0 или 1)."""
    result = await db.execute(
        delete(Dislike).where(
            Dislike.disliked_by == user_id,
            Dislike.post_id == post_id,
        )
    )
    return result.rowcount


# ————————————————————————————————————————————————————————————
# Toggle
# ————————————————————————————————————————————————————————————

async def toggle_dislike(db: AsyncSession, user_id: str, post_id: str) -> bool:
    """
    Если дизлайк уже существует, удалить его, иначе добавить.
    Возвращает True если дизлайк был поставлен, False если убран.

    Запись и счётчик тьюта меняются в одной транзакции; счётчик меняется
    атомарно на стороне БД. Если параллельный запрос уже изменил пару
    (user, post), транзакция откатывается и возвращается 409.
    """
    try:
        if await find_post_by_id(db, post_id) is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, FAIL_VALIDATION_MATCHED_POST_ID)
        if await get_user_by_id(db, user_id) is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, FAIL_VALIDATION_MATCHED_USER_ID)

        existing = await find_user_dislikes_post(db, user_id, post_id)
        if existing is not None:
            removed = await user_undislikes_post(db, user_id, post_id)
            if removed == 0:
                # уже удалён параллельным запросом
                await db.rollback()
                logger.warning("Dislike {0}/{1} vanished during toggle", user_id, post_id)
                raise HTTPException(status.HTTP_409_CONFLICT, FAIL_DISLIKE_CONFLICT)
            await update_dislikes(db, post_id, -1)
        else:
            await user_dislikes_post(db, user_id, post_id)
            await update_dislikes(db, post_id, 1)
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning("Dislike {0}/{1} already created by a concurrent toggle", user_id, post_id)
        raise HTTPException(status.HTTP_409_CONFLICT, FAIL_DISLIKE_CONFLICT) from e
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("Failed to toggle dislike {0}/{1}", user_id, post_id)
        raise HTTPException(status.HTTP_404_NOT_FOUND, FAIL_DISLIKE_TOGGLE) from e

    disliked = existing is None
    logger.debug("User {0} {1} tuit {2}", user_id, "disliked" if disliked else "undisliked", post_id)
    return disliked


async def delete_dislike(db: AsyncSession, dislike_id: str) -> int:
    """
    Удалить дизлайк по id (отладочный эндпоинт).

    Счётчик тьюта уменьшается в той же транзакции.
    """
    try:
        dislike = await find_dislike_by_id(db, dislike_id)
        if dislike is None:
            return 0
        post_id = dislike.post_id

        result = await db.execute(delete(Dislike).where(Dislike.id == dislike_id))
        if result.rowcount:
            await update_dislikes(db, post_id, -result.rowcount)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception("Failed to delete dislike {0}", dislike_id)
        raise HTTPException(status.HTTP_404_NOT_FOUND, FAIL_DISLIKE_DELETE) from e
    return result.rowcount
