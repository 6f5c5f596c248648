"""Main Textual app class."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from tip_calculator.calculator import compute, safe_number
from tip_calculator.config import (
    DEBUG_LOG_PATH,
    DEFAULT_BILL,
    DEFAULT_INCLUDE_TAX_IN_TIP,
    DEFAULT_PEOPLE,
    DEFAULT_ROUNDING,
    DEFAULT_TAX_PERCENT,
    DEFAULT_TIP_PERCENT,
    TIP_SLIDER_MAX,
    TIP_SLIDER_MIN,
    TIP_SLIDER_STEP,
)
from tip_calculator.constant import TIP_PRESETS
from tip_calculator.currency import CurrencyFormatter
from tip_calculator.models import ROUNDING_MODES, TipInputs, TipResult
from tip_calculator.rendering import (
    format_checkbox,
    format_field_row,
    format_presets,
    format_results,
    format_rounding_choices,
    format_tip_slider,
)
from tip_calculator.summary import build_summary, plain_number

FIELDS = ("bill", "tax", "include_tax", "tip", "people", "rounding")
TEXT_FIELDS = {"bill", "tax", "people"}


def _default_field_text() -> dict[str, str]:
    return {
        "bill": DEFAULT_BILL,
        "tax": plain_number(DEFAULT_TAX_PERCENT),
        "people": str(DEFAULT_PEOPLE),
    }


class TipCalculatorApp(App):
    """A Textual app for splitting a bill with tax and tip."""

    TITLE = "Smart Tip Calculator"
    SUB_TITLE = "Bill / Tax / Tip / Split"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #form-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #results-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #form {
        height: 1fr;
        padding: 0 1;
    }

    #results {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 4;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    field_index = reactive(0)
    tip_percent = reactive(DEFAULT_TIP_PERCENT)
    include_tax_in_tip = reactive(DEFAULT_INCLUDE_TAX_IN_TIP)
    rounding = reactive(DEFAULT_ROUNDING)

    BINDINGS = [
        Binding("tab", "move_field(1)", "Next field", priority=True),
        Binding("shift+tab", "move_field(-1)", "Previous field", priority=True),
        ("down", "move_field(1)", "Next field"),
        ("up", "move_field(-1)", "Previous field"),
        ("left", "adjust(-1)", "Decrease"),
        ("right", "adjust(1)", "Increase"),
        ("enter", "activate", "Toggle / cycle"),
        ("backspace", "backspace", "Delete char"),
        Binding("ctrl+y", "copy_summary", "Copy summary", priority=True),
        Binding("ctrl+r", "reset", "Reset", priority=True),
        Binding("ctrl+t", "toggle_theme", "Light/Dark", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, locale_tag: str | None = None) -> None:
        super().__init__()
        self.formatter = CurrencyFormatter(locale_tag)
        self.field_text = _default_field_text()
        self.result: TipResult = compute(self.current_inputs())
        self.last_summary = ""
        self.system_status = ""
        self._debug_log_path = Path(DEBUG_LOG_PATH)
        self._log_debug(f"app_init locale={self.formatter.locale_tag!r} currency={self.formatter.currency!r}")

    def _log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except Exception:
            # Logging must never interfere with app flow.
            return

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="form-pane"):
                yield Static("Bill & Settings", classes="pane-title")
                yield Static(id="form")
            with Vertical(id="results-pane"):
                yield Static("Results", classes="pane-title")
                yield Static(id="results")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._log_debug("on_mount")
        self._refresh_all()

    @property
    def focused_field(self) -> str:
        return FIELDS[self.field_index]

    def current_inputs(self) -> TipInputs:
        """Snapshot the form into calculator inputs."""
        return TipInputs(
            bill=self.field_text["bill"],
            tax_percent=safe_number(self.field_text["tax"], 0.0),
            tip_percent=self.tip_percent,
            people=max(1.0, safe_number(self.field_text["people"], 1.0)),
            include_tax_in_tip=self.include_tax_in_tip,
            rounding=self.rounding,
        )

    def on_key(self, event: Key) -> None:
        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        char = event.character
        field = self.focused_field

        if field in TEXT_FIELDS:
            self.field_text[field] += char
            self._recompute()
            event.stop()
            return

        if field == "include_tax" and char == " ":
            self._toggle_include_tax()
            event.stop()
            return

        if field == "tip":
            if char.lower() == "p":
                self._cycle_preset()
            elif char in {"+", "="}:
                self._step_tip(1)
            elif char == "-":
                self._step_tip(-1)
            else:
                return
            event.stop()
            return

        if field == "rounding" and char == " ":
            self._cycle_rounding(1)
            event.stop()

    def action_move_field(self, delta: int) -> None:
        self.field_index = (self.field_index + delta) % len(FIELDS)
        self._refresh_form()

    def action_adjust(self, delta: int) -> None:
        field = self.focused_field
        if field == "tip":
            self._step_tip(delta)
        elif field == "rounding":
            self._cycle_rounding(delta)
        elif field == "include_tax":
            self._toggle_include_tax()

    def action_activate(self) -> None:
        field = self.focused_field
        if field == "include_tax":
            self._toggle_include_tax()
        elif field == "rounding":
            self._cycle_rounding(1)
        elif field == "tip":
            self._cycle_preset()
        else:
            self.action_move_field(1)

    def action_backspace(self) -> None:
        field = self.focused_field
        if field not in TEXT_FIELDS or not self.field_text[field]:
            return
        self.field_text[field] = self.field_text[field][:-1]
        self._recompute()

    def action_copy_summary(self) -> None:
        summary = build_summary(self.current_inputs(), self.result, self.formatter)
        self.last_summary = summary
        try:
            self.copy_to_clipboard(summary)
        except Exception as exc:
            self._log_debug(f"copy_summary_failed error={exc!r}")
            return
        self._log_debug("copy_summary")
        self.system_status = "Summary copied"
        self._refresh_status()

    def action_reset(self) -> None:
        self.field_text = _default_field_text()
        self.tip_percent = DEFAULT_TIP_PERCENT
        self.include_tax_in_tip = DEFAULT_INCLUDE_TAX_IN_TIP
        self.rounding = DEFAULT_ROUNDING
        self.system_status = "Reset"
        self._log_debug("reset")
        self._recompute()

    def action_toggle_theme(self) -> None:
        self.theme = "textual-light" if self.current_theme.dark else "textual-dark"
        self.system_status = f"Theme: {self.theme}"
        self._refresh_status()

    def _toggle_include_tax(self) -> None:
        self.include_tax_in_tip = not self.include_tax_in_tip
        self._recompute()

    def _step_tip(self, delta: int) -> None:
        stepped = self.tip_percent + delta * TIP_SLIDER_STEP
        self.tip_percent = min(TIP_SLIDER_MAX, max(TIP_SLIDER_MIN, stepped))
        self._recompute()

    def _cycle_preset(self) -> None:
        larger = [preset for preset in TIP_PRESETS if preset > self.tip_percent]
        self.tip_percent = float(larger[0] if larger else TIP_PRESETS[0])
        self._recompute()

    def _cycle_rounding(self, delta: int) -> None:
        idx = ROUNDING_MODES.index(self.rounding) if self.rounding in ROUNDING_MODES else 0
        self.rounding = ROUNDING_MODES[(idx + delta) % len(ROUNDING_MODES)]
        self._recompute()

    def _recompute(self) -> None:
        self.result = compute(self.current_inputs())
        self._refresh_all()

    def _refresh_all(self) -> None:
        self._refresh_form()
        self._refresh_results()
        self._refresh_status()

    def _refresh_form(self) -> None:
        try:
            form = self.query_one("#form", Static)
        except NoMatches:
            return

        field = self.focused_field
        rows = [
            format_field_row("Bill Amount", self.field_text["bill"], field == "bill"),
            format_field_row("Sales Tax %", self.field_text["tax"], field == "tax"),
            format_field_row(
                "Include tax in tip",
                format_checkbox(self.include_tax_in_tip),
                field == "include_tax",
            ),
            format_field_row("Tip Percentage", format_tip_slider(self.tip_percent, self.formatter), field == "tip"),
            format_field_row("Presets", format_presets(self.tip_percent), False),
            format_field_row("Split Between", self.field_text["people"], field == "people"),
            format_field_row("Rounding", format_rounding_choices(self.rounding), field == "rounding"),
        ]
        form.update(Text("\n").join(rows))

    def _refresh_results(self) -> None:
        try:
            results = self.query_one("#results", Static)
        except NoMatches:
            return
        results.update(format_results(self.result, self.rounding, self.formatter))

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        status = self.system_status or "Ready"
        bar.update(
            "Tab/↑/↓ move, ←/→ adjust, Space/Enter toggle, P presets. "
            "Ctrl+Y copy, Ctrl+R reset, Ctrl+T theme, Ctrl+Q quit.\n"
            f"{status}"
        )
