from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True)

    ENVIRONMENT: str = "development"

    # Database settings
    DATABASE_URL: str = "sqlite+aiosqlite:///./catalog.db"
    DB_ECHO: bool = False

    # Database initialization settings
    DB_INIT_RETRY_INTERVAL: int = 2
    DB_INIT_MAX_RETRIES: int = 5

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_FILE_PATH: str = "logs/logging_errors.log"

    # Loki settings
    LOKI_ENABLED: bool = False
    LOKI_URL: str = "http://loki:3100"
    LOKI_VERSION: str = "1"

    # When enabled, the author id submitted with the delete form must match
    # the id in the request path. When disabled, the submitted id is deleted
    # and the book check runs against it.
    STRICT_DELETE_ID_CHECK: bool = True


app_settings = Settings()
