"""Settings loaded from environment variables (+ optional .env file).

PORT keeps its conventional unprefixed name; everything else uses the
TODO_ prefix.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "TODO"
DEFAULT_PORT = 3000


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Optional[Path]) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    data_file: Path = Path("todos.json")
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @staticmethod
    def from_env(dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv(override=False)
        return Settings(
            host=_env(_k("HOST"), "127.0.0.1"),
            port=_env_int("PORT", DEFAULT_PORT),
            data_file=_env_path(_k("DATA_FILE"), Path("todos.json")) or Path("todos.json"),
            log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
            log_file=_env_path(_k("LOG_FILE"), None),
        )
