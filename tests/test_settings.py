from drivedesk.app.core.settings import Settings, get_settings


def test_settings_defaults():
    settings = get_settings()
    assert settings.app_name == "DriveDesk"
    assert isinstance(settings.secret_key, str) and settings.secret_key
    assert settings.database_url == "sqlite://"
    assert settings.access_token_expire_minutes == 480
    assert settings.lesson_price == 50
    assert settings.default_lesson_type == "Standard"
    assert settings.default_pickup_location == "Driving school office"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DRIVEDESK_SECRET_KEY", "from-env")
    monkeypatch.setenv("DRIVEDESK_TOKEN_MINUTES", "15")
    monkeypatch.setenv("DRIVEDESK_LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.SECRET_KEY == "from-env"
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 15
    assert settings.log_level == "debug"


def test_get_settings_is_singleton():
    assert get_settings() is get_settings()
