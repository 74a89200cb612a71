from sqlalchemy import select

from dislike_service.models import Dislike, Post

PASSWORD = "Sup3rSecret!"


async def get_post(pool, post_id: str) -> Post | None:
    async with pool() as session:
        return await session.get(Post, post_id)


async def get_dislikes(pool, post_id: str) -> list[Dislike]:
    async with pool() as session:
        result = await session.execute(select(Dislike).where(Dislike.post_id == post_id))
        return list(result.scalars().all())
