from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from dislike_service.models.rwmodel import RWModel as Base, generate_id


class Post(Base):
    """Тьют. Счётчики ``stats`` хранятся денормализованно."""

    __tablename__ = "posts"

    id = Column(String(36), primary_key=True, default=generate_id)
    tuit = Column(Text, nullable=False)
    posted_by_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    posted_on = Column(DateTime, server_default=func.now())

    replies = Column(Integer, default=0, nullable=False)
    retuits = Column(Integer, default=0, nullable=False)
    likes = Column(Integer, default=0, nullable=False)
    dislikes = Column(Integer, default=0, nullable=False)

    author = relationship("User", back_populates="tuits")
    dislike_records = relationship("Dislike", back_populates="post", passive_deletes=True)

    @property
    def stats(self) -> dict[str, int]:
        return {
            "replies": self.replies,
            "retuits": self.retuits,
            "likes": self.likes,
            "dislikes": self.dislikes,
        }
