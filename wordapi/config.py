from __future__ import annotations
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import List

# Word lists ship inside the package so installed copies find them too
DEFAULT_DICTIONARIES_DIR = Path(__file__).resolve().parent / "dictionaries"

DEFAULT_PORT = 3000
DEFAULT_LIMIT = 10


def _split_origins(raw: str) -> List[str]:
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    dictionaries_dir: Path = DEFAULT_DICTIONARIES_DIR
    default_limit: int = DEFAULT_LIMIT
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        # int() raises on garbage; a bad PORT should stop startup
        return cls(
            host=env.get("HOST", "0.0.0.0"),
            port=int(env.get("PORT") or DEFAULT_PORT),
            dictionaries_dir=Path(env.get("DICTIONARIES_DIR") or DEFAULT_DICTIONARIES_DIR),
            default_limit=int(env.get("DEFAULT_LIMIT") or DEFAULT_LIMIT),
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
            cors_origins=_split_origins(env.get("CORS_ORIGINS", "*")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
