import logging
import sys
from typing import Any

from loguru import logger
from pydantic import SecretStr

from dislike_service.core.logging import InterceptHandler
from dislike_service.core.settings.base import BaseAppSettings


class AppSettings(BaseAppSettings):
    debug: bool = False
    docs_url: str = "/docs"
    openapi_url: str = "/openapi.json"
    redoc_url: str = "/redoc"
    title: str = "Tuiter dislikes API"
    version: str = "0.1.0"

    db_url: str = "sqlite+aiosqlite:///./tuiter.db"
    db_echo: bool = False
    create_tables: bool = False

    secret_key: SecretStr
    session_cookie: str = "tuiter_session"
    session_max_age: int = 14 * 24 * 60 * 60
    session_https_only: bool = True

    api_v1_prefix: str = "/api"

    allowed_hosts: list[str] = ["http://localhost:3000"]

    logging_level: int = logging.INFO
    loggers: tuple[str, ...] = ("uvicorn.asgi", "uvicorn.access", "sqlalchemy.engine")

    @property
    def fastapi_kwargs(self) -> dict[str, Any]:
        return {
            "debug": self.debug,
            "docs_url": self.docs_url,
            "openapi_url": self.openapi_url,
            "redoc_url": self.redoc_url,
            "title": self.title,
            "version": self.version,
        }

    def configure_logging(self) -> None:
        logging.getLogger().handlers = [InterceptHandler()]
        for logger_name in self.loggers:
            logging_logger = logging.getLogger(logger_name)
            logging_logger.handlers = [InterceptHandler(level=self.logging_level)]
            logging_logger.propagate = False

        logger.configure(handlers=[{"sink": sys.stderr, "level": self.logging_level}])
