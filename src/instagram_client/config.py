from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env if present
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    client_id: str = os.getenv("INSTAGRAM_CLIENT_ID", "")
    client_secret: str = os.getenv("INSTAGRAM_CLIENT_SECRET", "")
    access_token: str = os.getenv("INSTAGRAM_ACCESS_TOKEN", "")
    endpoint: str = os.getenv("INSTAGRAM_ENDPOINT", "https://api.instagram.com/v1/")
    format: str = os.getenv("INSTAGRAM_FORMAT", "json")
    adapter: str = os.getenv("INSTAGRAM_ADAPTER", "httpx")
    proxy: str = os.getenv("INSTAGRAM_PROXY", "")
    user_agent: str = os.getenv("INSTAGRAM_USER_AGENT", "instagram-client/0.1.0")
    auth_placement: str = os.getenv("INSTAGRAM_AUTH_PLACEMENT", "query")
    sign_requests: bool = _env_flag("INSTAGRAM_SIGN_REQUESTS")
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "45"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
