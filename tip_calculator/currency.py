"""Locale resolution and currency formatting."""

from __future__ import annotations

import math
import re
from decimal import localcontext

from babel import Locale, UnknownLocaleError
from babel.core import default_locale
from babel.numbers import format_currency, format_decimal

from tip_calculator.config import DEFAULT_LOCALE, LOCALE_OVERRIDE
from tip_calculator.constant import CURRENCY_BY_LOCALE, FALLBACK_CURRENCY

_PERCENT_PATTERN = "#,##0.##"
# Enough significant digits to quantize the largest float to cents.
_FORMAT_PRECISION = 400


def normalize_locale_tag(tag: str | None) -> str:
    """Turn ``en_US.UTF-8``, ``en-us`` or ``en_US_POSIX`` into ``en-US``."""
    if not tag:
        return DEFAULT_LOCALE
    parts = [part for part in re.split(r"[-_.@]", tag.strip()) if part]
    if not parts or not parts[0].isalpha():
        return DEFAULT_LOCALE
    language = parts[0].lower()
    if language in {"c", "posix"}:
        return DEFAULT_LOCALE
    if len(parts) > 1 and len(parts[1]) == 2 and parts[1].isalpha():
        return f"{language}-{parts[1].upper()}"
    return language


def guess_currency(locale_tag: str) -> str:
    """Map a locale tag to an ISO currency code, ``USD`` when unmapped."""
    return CURRENCY_BY_LOCALE.get(locale_tag, FALLBACK_CURRENCY)


def resolve_locale() -> str:
    """
    Pick the display locale.

    Resolution order:
    1. TIP_CALCULATOR_LOCALE (if set)
    2. The process locale (LC_ALL / LC_CTYPE / LANG) as Babel reports it
    3. DEFAULT_LOCALE
    """
    if LOCALE_OVERRIDE:
        return normalize_locale_tag(LOCALE_OVERRIDE)
    try:
        detected = default_locale()
    except ValueError:
        detected = None
    return normalize_locale_tag(detected)


def _babel_locale(locale_tag: str) -> Locale:
    try:
        return Locale.parse(locale_tag, sep="-")
    except (UnknownLocaleError, ValueError):
        return Locale.parse(DEFAULT_LOCALE, sep="-")


class CurrencyFormatter:
    """Formats amounts in the currency guessed from one locale."""

    def __init__(self, locale_tag: str | None = None) -> None:
        self.locale_tag = normalize_locale_tag(locale_tag) if locale_tag else resolve_locale()
        self.currency = guess_currency(self.locale_tag)
        self._locale = _babel_locale(self.locale_tag)

    def money(self, amount: float) -> str:
        if not math.isfinite(amount):
            return f"{_non_finite_text(amount)} {self.currency}"
        with localcontext() as ctx:
            ctx.prec = _FORMAT_PRECISION
            return format_currency(amount, self.currency, locale=self._locale)

    def percent(self, value: float) -> str:
        """Format a percentage number with at most two fraction digits (no sign)."""
        if not math.isfinite(value):
            return _non_finite_text(value)
        with localcontext() as ctx:
            ctx.prec = _FORMAT_PRECISION
            return format_decimal(value, format=_PERCENT_PATTERN, locale=self._locale)


def _non_finite_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "-∞" if value < 0 else "∞"
