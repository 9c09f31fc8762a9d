import os
from pathlib import Path

# Basic settings helper to read environment configuration.

BACKEND_ROOT = Path(__file__).resolve().parent


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


class Settings:
    def __init__(self) -> None:
        self.DATABASE_URL: str = os.getenv(
            "CATALOG_DATABASE_URL", f"sqlite:///{BACKEND_ROOT / 'catalog.db'}"
        )
        self.SQL_ECHO: bool = _as_bool(os.getenv("CATALOG_SQL_ECHO"), False)
        self.LOG_LEVEL: str = os.getenv("CATALOG_LOG_LEVEL", "INFO").upper()
        self.DEBUG: bool = _as_bool(os.getenv("CATALOG_DEBUG"), False)


settings = Settings()
