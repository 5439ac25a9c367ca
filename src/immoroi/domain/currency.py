"""CHF formatting for amounts stored in cents.

``en`` renders the en-CH style (``CHF 1,234.5``), ``de`` the de-CH style
(``CHF 1’234.5``). Any other locale falls back to ``en``.
"""
from __future__ import annotations

from typing import Optional, Tuple

from immoroi.infrastructure.config import SETTINGS

_GROUP_SEPARATORS = {"en": ",", "de": "’"}
# Ascending; de-CH separates the compact suffix with a no-break space.
_COMPACT_LEVELS: dict[str, Tuple[Tuple[float, str], ...]] = {
    "en": ((1.0, ""), (1e3, "K"), (1e6, "M"), (1e9, "B")),
    "de": ((1.0, ""), (1e3, "\u00a0Tsd."), (1e6, "\u00a0Mio."), (1e9, "\u00a0Mrd.")),
}


def _locale_key(locale: Optional[str]) -> str:
    key = (locale or SETTINGS.DEFAULT_LOCALE).split("-")[0].lower()
    return key if key in _GROUP_SEPARATORS else "en"


def format_number(value: float, max_decimals: int, group_sep: str = ",") -> str:
    """Group thousands and keep at most ``max_decimals`` digits, trailing zeros dropped."""
    text = f"{abs(value):,.{max_decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    text = text.replace(",", group_sep)
    if value < 0 and text != "0":
        text = "-" + text
    return text


def format_currency(amount_cents: float, locale: Optional[str] = None) -> str:
    key = _locale_key(locale)
    amount = amount_cents / 100
    return f"{SETTINGS.DEFAULT_CURRENCY} {format_number(amount, 2, _GROUP_SEPARATORS[key])}"


def format_currency_compact(amount_cents: float, locale: Optional[str] = None) -> str:
    key = _locale_key(locale)
    levels = _COMPACT_LEVELS[key]
    amount = amount_cents / 100

    index = 0
    for position, (threshold, _) in enumerate(levels):
        if abs(amount) >= threshold:
            index = position
    # 999.95K prints as 1,000K once rounded; carry into the next suffix.
    if index + 1 < len(levels) and float(f"{abs(amount) / levels[index][0]:.1f}") >= 1000:
        index += 1

    threshold, suffix = levels[index]
    scaled = format_number(amount / threshold, 1, _GROUP_SEPARATORS[key])
    return f"{SETTINGS.DEFAULT_CURRENCY} {scaled}{suffix}"


__all__ = ["format_number", "format_currency", "format_currency_compact"]
