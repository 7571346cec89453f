from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv
from platformdirs import user_log_dir

load_dotenv()

APP_NAME = "Daybook"
APP_AUTHOR = "Daybook"
DEFAULT_ADDRESS = "127.0.0.1:8080"


@dataclass(frozen=True)
class HttpSettings:
    host: str
    port: int
    timeout: float
    idle_timeout: float

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class LogSettings:
    level: str
    directory: Path


@dataclass(frozen=True)
class AppSettings:
    app_name: str
    http: HttpSettings
    logging: LogSettings

    def describe(self) -> dict:
        return {
            "app_name": self.app_name,
            "http": {
                "address": self.http.address,
                "timeout": self.http.timeout,
                "idle_timeout": self.http.idle_timeout,
            },
            "logging": {"level": self.logging.level, "directory": str(self.logging.directory)},
        }


def parse_address(raw: str, *, source: str = "DAYBOOK_HTTP_ADDRESS") -> Tuple[str, int]:
    host, sep, port = raw.strip().rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"{source} must look like host:port, got {raw!r}")
    return host or "0.0.0.0", int(port)


def _seconds_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        seconds = float(raw.rstrip("s"))
    except ValueError:
        return default
    return seconds if seconds > 0 else default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    host, port = parse_address(os.getenv("DAYBOOK_HTTP_ADDRESS", DEFAULT_ADDRESS))
    http = HttpSettings(
        host=host,
        port=port,
        timeout=_seconds_from_env("DAYBOOK_HTTP_TIMEOUT", 4.0),
        idle_timeout=_seconds_from_env("DAYBOOK_HTTP_IDLE_TIMEOUT", 60.0),
    )

    logging = LogSettings(
        level=os.getenv("DAYBOOK_LOG_LEVEL", "INFO").upper(),
        directory=Path(os.getenv("DAYBOOK_LOG_DIR") or user_log_dir(APP_NAME, APP_AUTHOR)),
    )

    return AppSettings(
        app_name=os.getenv("DAYBOOK_APP_NAME", APP_NAME),
        http=http,
        logging=logging,
    )
