from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from dislike_service.core import security
from dislike_service.models.rwmodel import RWModel as Base, generate_id


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_id)
    username = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)

    tuits = relationship("Post", back_populates="author", passive_deletes=True)

    def check_password(self, password: str) -> bool:
        return security.verify_password(password, self.password)

    def change_password(self, password: str) -> None:
        self.password = security.get_password_hash(password)
