from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from dislike_service.schemas.user import UserOut


class PostStats(BaseModel):
    replies: int = 0
    retuits: int = 0
    likes: int = 0
    dislikes: int = 0


class PostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    tuit: str
    posted_on: datetime | None = None
    posted_by: UserOut = Field(validation_alias="author")
    stats: PostStats
