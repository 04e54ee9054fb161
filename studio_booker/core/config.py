from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    STUDIO_NAME: str = "H Music Studio"
    STUDIO_TIMEZONE: str = "Asia/Seoul"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    API_PREFIX: str = "/api"

    STORE_PROVIDER: str = "memory"  # "memory" | "json"
    DATA_DIR: str = "./data"

    # Placeholder gate for the admin page, not an auth system.
    ADMIN_PASSWORD: str = "063103"

    BOOKING_LEAD_DAYS: int = 1
    MAX_DURATION_HOURS: int = 10


settings = Settings()
