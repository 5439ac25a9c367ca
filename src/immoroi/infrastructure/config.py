# infrastructure/config.py
from __future__ import annotations
from dataclasses import dataclass, field
import os


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean environment variable tolerantly."""
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() not in {"0", "false", "no", "off", ""}


def _env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.getenv(name)
    if not raw:
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Comma separated, e.g. API_CORS_ORIGINS=http://localhost:3000,https://app.example.ch
    API_CORS_ORIGINS: tuple[str, ...] = field(
        default_factory=lambda: _env_list(
            "API_CORS_ORIGINS",
            ("http://localhost:3000", "http://127.0.0.1:3000"),
        )
    )

    # "en" (en-CH) or "de" (de-CH)
    DEFAULT_LOCALE: str = os.getenv("DEFAULT_LOCALE", "en")
    DEFAULT_CURRENCY: str = os.getenv("DEFAULT_CURRENCY", "CHF")

    # Include the 12 month loan expense preview in /loans/payments responses.
    LOAN_EXPENSE_PREVIEW: bool = _env_bool("LOAN_EXPENSE_PREVIEW", True)


SETTINGS = Settings()
