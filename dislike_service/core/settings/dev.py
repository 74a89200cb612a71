import logging

from pydantic import SecretStr

from dislike_service.core.settings.app import AppSettings


class DevAppSettings(AppSettings):
    # fastapi_kwargs
    debug: bool = True
    title: str = "Dev Tuiter dislikes API"

    # back-end app settings
    secret_key: SecretStr = SecretStr("secret-dev")
    session_https_only: bool = False

    db_url: str = "sqlite+aiosqlite:///./tuiter-dev.db"
    create_tables: bool = True
    logging_level: int = logging.DEBUG
