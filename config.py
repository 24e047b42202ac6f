"""Environment-driven settings for the roast API."""

import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.environ.get(name, default).split(",") if item.strip()]


class Settings(BaseModel):
    google_api_key: Optional[str] = None
    gemini_model: str = "gemini-2.5-flash"
    ghin_base_url: str = "https://api2.ghin.com/api/v1/"
    ghin_service_user: Optional[str] = None
    ghin_service_password: Optional[str] = None
    service_token_ttl_seconds: float = Field(3600.0, gt=0)
    rate_limit_requests: int = Field(10, ge=1)
    rate_limit_window_seconds: float = Field(60.0, gt=0)
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    static_dir: str = "public"
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Read settings from the environment (after .env has been loaded)."""
    env = os.environ
    return Settings(
        google_api_key=env.get("GOOGLE_API_KEY") or None,
        gemini_model=env.get("GEMINI_MODEL", "gemini-2.5-flash"),
        ghin_base_url=env.get("GHIN_BASE_URL", "https://api2.ghin.com/api/v1/"),
        ghin_service_user=env.get("GHIN_SERVICE_USER") or None,
        ghin_service_password=env.get("GHIN_SERVICE_PASSWORD") or None,
        service_token_ttl_seconds=env.get("SERVICE_TOKEN_TTL_SECONDS", 3600),
        rate_limit_requests=env.get("RATE_LIMIT_REQUESTS", 10),
        rate_limit_window_seconds=env.get("RATE_LIMIT_WINDOW_SECONDS", 60),
        cors_origins=_env_list("CORS_ORIGINS", "*"),
        static_dir=env.get("STATIC_DIR", "public"),
        log_level=env.get("LOG_LEVEL", "INFO"),
    )
