from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from dislike_service.api.v1 import api_router
from dislike_service.core import settings
from dislike_service.core.events import create_start_app_handler, create_stop_app_handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Подключение к БД при старте и отключение при остановке.
    """
    await create_start_app_handler(app, settings)()
    yield
    await create_stop_app_handler(app)()


def create_app() -> FastAPI:
    settings.configure_logging()

    _app = FastAPI(**settings.fastapi_kwargs, lifespan=lifespan)

    _app.add_middleware(
        SessionMiddleware,
        secret_key=settings.secret_key.get_secret_value(),
        session_cookie=settings.session_cookie,
        max_age=settings.session_max_age,
        https_only=settings.session_https_only,
    )
    _app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_hosts,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _app.include_router(api_router, prefix=settings.api_v1_prefix)

    return _app


app = create_app()
