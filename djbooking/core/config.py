from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    BUSINESS_NAME: str = "DJ Nuff Jamz Entertainment"
    BUSINESS_EMAIL: str = "bookings@djnuffjamz.com"
    ADMIN_EMAIL: str = "admin@djnuffjamz.com"
    BUSINESS_TIMEZONE: str = "America/New_York"

    STORE_PROVIDER: str = "memory"
    MONGODB_URI: str | None = None
    MONGODB_DB: str = "djbooking"

    SENDGRID_API_KEY: str | None = None
    SENDGRID_BASE_URL: str = "https://api.sendgrid.com/v3"
    MOCK_EMAIL: bool = False

    DRAFT_DIR: str = "./data/drafts"
    DRAFT_AUTOSAVE_SECONDS: float = 2.0
    BOOKING_API_BASE_URL: str = "http://127.0.0.1:8000"

    CORS_ORIGINS: list[str] = ["*"]


settings = Settings()
