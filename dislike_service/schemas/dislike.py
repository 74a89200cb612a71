from pydantic import BaseModel, ConfigDict


class DislikeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    post_id: str
    disliked_by: str


class DislikeDeleteResponse(BaseModel):
    deleted_count: int
