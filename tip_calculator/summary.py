"""Clipboard summary text."""

from __future__ import annotations

from tip_calculator.calculator import safe_number
from tip_calculator.currency import CurrencyFormatter
from tip_calculator.models import TipInputs, TipResult


def plain_number(value: float) -> str:
    """Render a percentage the way a user typed it: ``10`` not ``10.0``."""
    return f"{value:.15g}"


def build_summary(inputs: TipInputs, result: TipResult, formatter: CurrencyFormatter) -> str:
    """Return the fixed five-line bill summary."""
    tax_percent = safe_number(inputs.tax_percent, 0.0)
    lines = [
        f"Bill: {formatter.money(result.bill)}",
        f"Tax ({plain_number(tax_percent)}%): {formatter.money(result.tax)}",
        f"Tip ({formatter.percent(result.effective_tip_percent)}%): {formatter.money(result.tip)}",
        f"Total: {formatter.money(result.total)}",
        f"Split ({result.people}): {formatter.money(result.per_person)} each",
    ]
    return "\n".join(lines)
