from __future__ import annotations

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)


@dataclass(frozen=True)
class Settings:
    # Title fetching
    fetch_timeout: float = float(os.getenv("ORGLINK_FETCH_TIMEOUT", "10"))
    max_workers: int = int(os.getenv("ORGLINK_MAX_WORKERS", "8"))
    user_agent: str = os.getenv("ORGLINK_USER_AGENT", DEFAULT_USER_AGENT)
    # Output
    music_label: str = os.getenv("ORGLINK_MUSIC_LABEL", "MUSIC")
    log_level: str = os.getenv("ORGLINK_LOG_LEVEL", "WARNING")


def get_settings() -> Settings:
    return Settings()
