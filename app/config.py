import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


class Settings(BaseModel):
    gemini_api_url: str | None = None
    gemini_api_key: str | None = None
    gemini_timeout: Optional[float] = None   # None → httpx default
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        timeout = os.getenv("GEMINI_TIMEOUT")
        return cls(
            gemini_api_url=os.getenv("GEMINI_API_URL"),
            gemini_api_key=os.getenv("GEMINI_API_KEY"),
            gemini_timeout=float(timeout) if timeout else None,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
