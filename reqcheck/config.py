"""
Application configuration using Pydantic Settings.
All environment-specific values are centralized here.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

_PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── App ──────────────────────────────────────────────
    app_name: str = "Requirement Checker"
    debug: bool = False

    # ── Framework being checked ──────────────────────────
    framework_name: str = "FastAPI"
    framework_url: str = "https://fastapi.tiangolo.com/"
    framework_package: str = "fastapi"
    min_python_version: str = "3.10.0"

    # ── Server ───────────────────────────────────────────
    server_software: str = "uvicorn"
    entry_script: str = str(_PACKAGE_DIR / "api" / "__init__.py")  # reported as SCRIPT_FILENAME over HTTP
    host: str = "0.0.0.0"
    port: int = 8000

    # ── Resources ────────────────────────────────────────
    messages_dir: str = str(_PACKAGE_DIR / "messages")
    views_dir: str = str(_PACKAGE_DIR / "views")

    # ── Logging ──────────────────────────────────────────
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "REQCHECK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    @field_validator("min_python_version")
    @classmethod
    def _check_version(cls, value: str) -> str:
        parts = value.split(".")
        if not parts or not all(p.isdigit() for p in parts):
            raise ValueError(f"min_python_version must be dotted digits, got '{value}'")
        return value

    @property
    def min_python_tuple(self) -> tuple[int, ...]:
        return tuple(int(p) for p in self.min_python_version.split("."))


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings (singleton)."""
    return Settings()
