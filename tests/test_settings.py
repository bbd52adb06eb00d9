import pytest
from pydantic import ValidationError as SettingsValidationError

from plantscan import main as main_module
from tests.conftest import make_settings


def test_has_credentials_needs_both_keys():
    assert make_settings().has_credentials is True
    assert make_settings(PERENUAL_API_KEY=None).has_credentials is False
    assert make_settings(PLANT_ID_API_KEY="").has_credentials is False


def test_environment_and_log_level_are_normalized():
    settings = make_settings(ENVIRONMENT="Development", LOG_LEVEL="debug")
    assert settings.ENVIRONMENT == "development"
    assert settings.is_development is True
    assert settings.LOG_LEVEL == "DEBUG"
    assert make_settings().is_development is False


@pytest.mark.parametrize("field, value", [
    ("ENVIRONMENT", "qa"),
    ("LOG_LEVEL", "loud"),
    ("LOG_FORMAT", "xml"),
    ("DEFAULT_LOCALE", "en"),
])
def test_invalid_values_are_rejected(field, value):
    with pytest.raises(SettingsValidationError):
        make_settings(**{field: value})


@pytest.mark.parametrize("environment, reload", [("development", True), ("production", False)])
def test_main_reloads_only_in_development(monkeypatch, environment, reload):
    calls = []
    monkeypatch.setattr(main_module, "get_settings", lambda: make_settings(ENVIRONMENT=environment))
    monkeypatch.setattr(main_module.uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))

    main_module.main()

    target, kwargs = calls[0]
    assert target == "plantscan.main:app"
    assert kwargs["reload"] is reload
    assert kwargs["log_level"] == "info"
