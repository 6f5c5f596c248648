"""Rendering helpers for form rows and result blocks."""

from __future__ import annotations

from rich.text import Text

from tip_calculator.config import TIP_SLIDER_MAX, TIP_SLIDER_MIN
from tip_calculator.constant import ROUNDING_MODE_LABELS, TIP_PRESETS
from tip_calculator.currency import CurrencyFormatter
from tip_calculator.models import ROUNDING_MODES, TipResult

SLIDER_WIDTH = 24


def focus_style(focused: bool) -> str:
    """Return a consistent style for the focused form row."""
    if focused:
        return "bold #ffffff on #2f6db5"
    return "bold"


def format_field_row(label: str, value: str | Text, focused: bool) -> Text:
    """Render one form row with a pointer on the focused field."""
    text = Text()
    text.append("➤ " if focused else "  ")
    text.append(f"{label}:", style=focus_style(focused))
    text.append(" ")
    if isinstance(value, Text):
        text.append_text(value)
    else:
        text.append(value)
    return text


def format_checkbox(checked: bool) -> str:
    return "[x]" if checked else "[ ]"


def format_tip_slider(tip_percent: float, formatter: CurrencyFormatter) -> Text:
    """Render the tip slider as a bar plus the current percentage."""
    span = TIP_SLIDER_MAX - TIP_SLIDER_MIN
    clamped = min(max(tip_percent, TIP_SLIDER_MIN), TIP_SLIDER_MAX)
    filled = int(SLIDER_WIDTH * (clamped - TIP_SLIDER_MIN) // span) if span > 0 else 0
    text = Text()
    text.append("█" * filled, style="#5fbf72")
    text.append("░" * (SLIDER_WIDTH - filled), style="dim")
    text.append(f" {formatter.percent(tip_percent)}%")
    return text


def format_presets(tip_percent: float) -> Text:
    """Render preset chips, highlighting the active one."""
    text = Text()
    for idx, preset in enumerate(TIP_PRESETS):
        if idx > 0:
            text.append(" ")
        style = "bold #ffffff on #2f6db5" if tip_percent == preset else "white"
        text.append(f" {preset:g}% ", style=style)
    return text


def format_rounding_choices(rounding: str) -> Text:
    """Render all rounding modes with the selected one marked."""
    text = Text()
    for idx, mode in enumerate(ROUNDING_MODES):
        if idx > 0:
            text.append("  ")
        label = ROUNDING_MODE_LABELS[mode]
        if mode == rounding:
            text.append(f"(•) {label}", style="bold")
        else:
            text.append(f"( ) {label}", style="dim")
    return text


def rounding_caption(rounding: str) -> str:
    return "Rounded per person" if rounding == "perPerson" else "Exact split"


def format_results(result: TipResult, rounding: str, formatter: CurrencyFormatter) -> Text:
    """Render the results pane: KPI rows and the per-person block."""
    text = Text()
    for label, amount in (
        ("Bill", result.bill),
        ("Tax", result.tax),
        ("Tip", result.tip),
        ("Total", result.total),
    ):
        text.append(f"{label:<6}", style="dim")
        text.append(f"{formatter.money(amount):>16}\n", style="bold")

    text.append("\n")
    text.append(f"Per Person ({result.people})\n", style="dim")
    text.append(formatter.money(result.per_person), style="bold #5fbf72")
    text.append(f"  {rounding_caption(rounding)}", style="italic")
    return text
