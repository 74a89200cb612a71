from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from dislike_service.models.post import Post


async def find_post_by_id(db: AsyncSession, post_id: str) -> Post | None:
    """Получить тьют по id"""
    return await db.get(Post, post_id)


async def update_dislikes(db: AsyncSession, post_id: str, step: int) -> None:
    """
    Изменяет счётчик дизлайков тьюта на step на стороне БД.

    Счётчик не ограничивается нулём. Транзакцией управляет вызывающий код.
    """
    await db.execute(
        update(Post)
        .where(Post.id == post_id)
        .values(dislikes=Post.dislikes + step)
    )
