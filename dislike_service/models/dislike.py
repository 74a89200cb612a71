from sqlalchemy import Column, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import relationship

from dislike_service.models.rwmodel import RWModel as Base, generate_id


class Dislike(Base):
    __tablename__ = "dislikes"

    id = Column(String(36), primary_key=True, default=generate_id)
    post_id = Column(String(36), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    disliked_by = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    post = relationship("Post", back_populates="dislike_records")
    user = relationship("User")

    __table_args__ = (
        UniqueConstraint("post_id", "disliked_by", name="uq_dislikes_post_user"),
    )
