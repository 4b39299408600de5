from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # ─────────── APP ───────────
    app_name: str = "University Research Portal"
    environment: str = "dev"
    log_level: str = "INFO"

    # ─────────── API ───────────
    api_prefix: str = "/api"
    request_id_header: str = "X-Request-Id"

    # ─────────── DATABASE ───────────
    database_url: str = "sqlite:///./research_portal.db"

    # ─────────── JWT / AUTH ───────────
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    jwt_access_token_minutes: int = 10080  # 7 days

    # ─────────── SEED ───────────
    seed_admin_email: str = "admin@university.edu"
    seed_admin_password: str = "admin123"

    # ─────────── QUERY / STATS ───────────
    default_page_size: int = 10
    recent_window_days: int = 30
    report_top_agencies: int = 10


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
