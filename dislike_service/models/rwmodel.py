import uuid

from sqlalchemy.orm import DeclarativeBase


def generate_id() -> str:
    return uuid.uuid4().hex


class RWModel(DeclarativeBase):
    pass
