from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./cuesheet.db"
    CORS_ORIGINS: list[str] = ["http://localhost:5173", "https://equesheet.com"]
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    JWT_SECRET: str = "dev-only-cuesheet-session-secret-change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_HOURS: int = 5
    COOKIE_NAME: str = "token"
    COOKIE_SECURE: bool = False
    COOKIE_SAMESITE: str = "lax"  # lax | strict | none

    FIREBASE_CREDENTIALS_JSON: str | None = None  # service account key as JSON
    FIREBASE_PROJECT_ID: str | None = None
    FIREBASE_CHECK_REVOKED: bool = False

    ADMIN_EMAILS: list[str] = []
    OWNER_SCOPED: bool = False
    SONG_SOURCE: str = "programs"  # programs | catalog
    SEED_SONG_CATALOG: bool = True

    LOGIN_RATE_LIMIT_CALLS: int = 10
    LOGIN_RATE_LIMIT_PERIOD: int = 60

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
