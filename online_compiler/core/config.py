from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


DEFAULT_CHAT_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-4.1-mini"


def _str_from_env(name: str, default: str | None = None) -> str | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


@dataclass(frozen=True, slots=True)
class Settings:
    judge0_base_url: str | None = None
    judge0_api_key: str | None = None    # sent as X-RapidAPI-Key when present
    openai_api_key: str | None = None
    openai_chat_url: str = DEFAULT_CHAT_URL
    openai_model: str = DEFAULT_MODEL
    log_level: str = "INFO"

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            judge0_base_url=_str_from_env("JUDGE0_BASE_URL"),
            judge0_api_key=_str_from_env("JUDGE0_API_KEY"),
            openai_api_key=_str_from_env("OPENAI_API_KEY"),
            openai_chat_url=_str_from_env("OPENAI_CHAT_URL", DEFAULT_CHAT_URL) or DEFAULT_CHAT_URL,
            openai_model=_str_from_env("OPENAI_MODEL", DEFAULT_MODEL) or DEFAULT_MODEL,
            log_level=(_str_from_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Values already in the environment take precedence over both files.
    load_dotenv(".env.local")
    load_dotenv(".env")
    return Settings.from_env()
