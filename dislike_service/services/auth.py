from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dislike_service.models.user import User


async def get_user_by_username(db: AsyncSession, username: str) -> User | None:
    """Получить пользователя по логину из базы данных"""
    result = await db.execute(select(User).filter(User.username == username))
    return result.scalars().first()


async def authenticate_user(db: AsyncSession, username: str, password: str) -> User | None:
    """Аутентифицирует пользователя по логину и паролю"""
    user = await get_user_by_username(db, username)
    if user is None:
        return None

    if user.check_password(password):
        return user
    return None
