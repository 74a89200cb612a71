from sqlalchemy.ext.asyncio import AsyncSession

from dislike_service.models.user import User
from dislike_service.schemas.user import UserInCreate


async def create_user(db: AsyncSession, user_in: UserInCreate) -> User:
    """Создать нового пользователя"""
    user = User(
        username=user_in.username,
        email=user_in.email,
        first_name=user_in.first_name,
        last_name=user_in.last_name,
    )
    user.change_password(user_in.password)
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


async def get_user_by_id(db: AsyncSession, user_id: str) -> User | None:
    return await db.get(User, user_id)
