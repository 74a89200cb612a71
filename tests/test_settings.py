from dislike_service.core import settings
from dislike_service.core.config import get_app_settings
from dislike_service.core.settings.base import AppEnvTypes


def test_test_environment_is_selected():
    assert settings.app_env is AppEnvTypes.test
    assert get_app_settings() is settings
    assert settings.session_https_only is False


def test_fastapi_kwargs():
    kwargs = settings.fastapi_kwargs
    assert kwargs["debug"] is True
    assert kwargs["title"] == settings.title
    assert "secret_key" not in kwargs
