from fastapi import FastAPI
from loguru import logger
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from dislike_service.core.settings.app import AppSettings
from dislike_service.models.rwmodel import RWModel


async def connect_to_db(app: FastAPI, settings: AppSettings) -> None:
    engine = create_async_engine(
        settings.db_url,
        echo=settings.db_echo,
        pool_pre_ping=True,
    )
    logger.info("Connecting to {0}", engine.url.render_as_string(hide_password=True))

    if settings.create_tables:
        async with engine.begin() as conn:
            await conn.run_sync(RWModel.metadata.create_all)

    app.state.engine = engine
    app.state.pool = async_sessionmaker(engine, expire_on_commit=False)

    logger.info("Connection established")


async def close_db_connection(app: FastAPI) -> None:
    logger.info("Closing connection to database")

    await app.state.engine.dispose()

    logger.info("Connection closed")
