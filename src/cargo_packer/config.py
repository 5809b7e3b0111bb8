"""Settings read from the environment; loads .env locally via python-dotenv."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    default_preset: str = "DEFAULT"
    max_workers: int = 2
    pack_timeout: float = 60.0


def load_settings() -> Settings:
    # does not override variables already set in the environment
    load_dotenv()
    return Settings(
        log_level=os.getenv("CARGO_PACKER_LOG_LEVEL", "INFO").upper(),
        default_preset=os.getenv("CARGO_PACKER_DEFAULT_PRESET", "DEFAULT"),
        max_workers=int(os.getenv("CARGO_PACKER_MAX_WORKERS", "2")),
        pack_timeout=float(os.getenv("CARGO_PACKER_PACK_TIMEOUT", "60")),
    )
