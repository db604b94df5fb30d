import os


class Settings:
    def __init__(self):
        self.app_name = "DriveDesk"
        self.api_version = "1.0.0"
        self.environment = os.getenv("DRIVEDESK_ENV", "development")
        self.secret_key = os.getenv("DRIVEDESK_SECRET_KEY", "super-secret-demo-key")
        self.SECRET_KEY = self.secret_key
        self.access_token_expire_minutes = int(os.getenv("DRIVEDESK_TOKEN_MINUTES", "480"))
        self.ACCESS_TOKEN_EXPIRE_MINUTES = self.access_token_expire_minutes
        self.database_url = os.getenv("DRIVEDESK_DATABASE_URL", "sqlite://")
        self.lesson_price = 50
        self.default_lesson_type = "Standard"
        self.default_pickup_location = "Driving school office"
        self.cors_origins = ["*"]
        self.static_dir = os.getenv("DRIVEDESK_STATIC_DIR", "public")
        self.log_level = os.getenv("DRIVEDESK_LOG_LEVEL", "INFO")


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
