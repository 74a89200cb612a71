from functools import lru_cache

from loguru import logger

from dislike_service.core.settings.app import AppSettings
from dislike_service.core.settings.base import AppEnvTypes, BaseAppSettings
from dislike_service.core.settings.dev import DevAppSettings
from dislike_service.core.settings.prod import ProdAppSettings
from dislike_service.core.settings.test import TestAppSettings

environments: dict[AppEnvTypes, type[AppSettings]] = {
    AppEnvTypes.dev: DevAppSettings,
    AppEnvTypes.prod: ProdAppSettings,
    AppEnvTypes.test: TestAppSettings,
}


@lru_cache
def get_app_settings() -> AppSettings:
    app_env = BaseAppSettings().app_env
    logger.debug("Loading settings for {0} environment", app_env.value)
    config = environments[app_env]
    return config()
