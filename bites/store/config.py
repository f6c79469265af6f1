from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class StoreConfig:
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    key_prefix: str = os.getenv("BITES_KEY_PREFIX", "bites")
    bloom_error_rate: float = 0.0001
    bloom_capacity: int = 1_000_000


DEFAULT_STORE_CONFIG = StoreConfig()
