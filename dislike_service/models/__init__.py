from dislike_service.models.rwmodel import RWModel
from dislike_service.models.user import User
from dislike_service.models.post import Post
from dislike_service.models.dislike import Dislike

__all__ = ["RWModel", "User", "Post", "Dislike"]
