"""Editable static currency, preset and rounding configuration."""

from __future__ import annotations

CURRENCY_BY_LOCALE: dict[str, str] = {
    "en-US": "USD",
    "en-GB": "GBP",
    "en-CA": "CAD",
    "fr-CA": "CAD",
    "en-AU": "AUD",
    "en-NZ": "NZD",
    "en-IN": "INR",
    "hi-IN": "INR",
    "ja-JP": "JPY",
    "de-DE": "EUR",
    "fr-FR": "EUR",
    "es-ES": "EUR",
    "it-IT": "EUR",
}

FALLBACK_CURRENCY = "USD"

TIP_PRESETS: tuple[float, ...] = (12, 15, 18, 20, 22, 25)

ROUNDING_MODE_LABELS: dict[str, str] = {
    "none": "No Rounding",
    "tip": "Round Tip",
    "total": "Round Total",
    "perPerson": "Round Per Person",
}
