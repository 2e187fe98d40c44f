# gerador/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    rate_limit_per_minute: int
    debug: bool
    seed: int | None
    max_lote: int
    clipboard_timeout: float


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    seed_raw = os.environ.get("GERADOR_SEED", "")
    return Settings(
        rate_limit_per_minute=int(os.environ.get("API_RATE_LIMIT_PER_MINUTE", "60")),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
        seed=int(seed_raw) if seed_raw else None,
        max_lote=int(os.environ.get("GERADOR_MAX_LOTE", "100")),
        clipboard_timeout=float(os.environ.get("GERADOR_CLIPBOARD_TIMEOUT", "5")),
    )
