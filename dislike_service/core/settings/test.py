import logging

from pydantic import SecretStr

from dislike_service.core.settings.app import AppSettings


class TestAppSettings(AppSettings):
    debug: bool = True
    title: str = "Test Tuiter dislikes API"

    secret_key: SecretStr = SecretStr("secret-test")
    session_https_only: bool = False

    db_url: str = "sqlite+aiosqlite:///:memory:"
    logging_level: int = logging.DEBUG
