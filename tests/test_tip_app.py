"""Tests for the Textual presentation layer."""

import pytest

from tip_calculator.tip_app import FIELDS, TipCalculatorApp


def _app() -> TipCalculatorApp:
    return TipCalculatorApp(locale_tag="en-US")


class TestTipCalculatorApp:
    """Keyboard-driven form behavior."""

    @pytest.mark.asyncio
    async def test_typing_bill_recomputes(self):
        app = _app()
        async with app.run_test() as pilot:
            await pilot.press("$", "1", "0", "0")
            assert app.field_text["bill"] == "$100"
            assert app.result.bill == 100
            assert app.result.tip == pytest.approx(18)
            assert app.result.total == pytest.approx(118)

    @pytest.mark.asyncio
    async def test_backspace_edits_focused_field(self):
        app = _app()
        async with app.run_test() as pilot:
            await pilot.press("4", "2", "backspace")
            assert app.field_text["bill"] == "4"
            assert app.result.bill == 4

    @pytest.mark.asyncio
    async def test_tab_cycles_fields(self):
        app = _app()
        async with app.run_test() as pilot:
            await pilot.press("tab")
            assert app.focused_field == "tax"
            await pilot.press("shift+tab", "shift+tab")
            assert app.focused_field == FIELDS[-1]
            await pilot.press("down")
            assert app.focused_field == "bill"

    @pytest.mark.asyncio
    async def test_full_scenario(self):
        app = _app()
        async with app.run_test() as pilot:
            await pilot.press("1", "0", "0")
            await pilot.press("tab", "backspace", "1", "0")
            await pilot.press("tab", "tab")
            assert app.focused_field == "tip"
            await pilot.press("right", "right", "right", "right")
            assert app.tip_percent == 20
            await pilot.press("tab", "backspace", "4")
            assert app.result.tax == pytest.approx(10)
            assert app.result.tip == pytest.approx(20)
            assert app.result.total == pytest.approx(130)
            assert app.result.per_person == pytest.approx(32.5)

    @pytest.mark.asyncio
    async def test_include_tax_checkbox(self):
        app = _app()
        async with app.run_test() as pilot:
            await pilot.press("tab", "tab", "space")
            assert app.include_tax_in_tip is True
            await pilot.press("enter")
            assert app.include_tax_in_tip is False

    @pytest.mark.asyncio
    async def test_tip_slider_is_clamped_and_presets_cycle(self):
        app = _app()
        async with app.run_test() as pilot:
            await pilot.press("tab", "tab", "tab")
            await pilot.press("right")
            assert app.tip_percent == 18.5
            await pilot.press("p")
            assert app.tip_percent == 20
            await pilot.press("p", "p", "p")
            assert app.tip_percent == 12
            for _ in range(30):
                await pilot.press("left")
            assert app.tip_percent == 0

    @pytest.mark.asyncio
    async def test_people_field_never_below_one(self):
        app = _app()
        async with app.run_test() as pilot:
            await pilot.press("3", "0")
            await pilot.press("tab", "tab", "tab", "tab")
            assert app.focused_field == "people"
            await pilot.press("backspace", "0")
            assert app.result.people == 1
            await pilot.press("backspace", "-", "5")
            assert app.result.people == 1
            await pilot.press("backspace", "backspace", "3")
            assert app.result.people == 3

    @pytest.mark.asyncio
    async def test_rounding_cycle(self):
        app = _app()
        async with app.run_test() as pilot:
            await pilot.press("5", "0", "shift+tab")
            assert app.focused_field == "rounding"
            await pilot.press("right")
            assert app.rounding == "tip"
            await pilot.press("left", "left")
            assert app.rounding == "perPerson"
            assert float(app.result.per_person).is_integer()

    @pytest.mark.asyncio
    async def test_reset_restores_defaults(self):
        app = _app()
        async with app.run_test() as pilot:
            await pilot.press("9", "9", "tab", "tab", "space", "shift+tab", "right")
            await pilot.press("ctrl+r")
            assert app.field_text == {"bill": "", "tax": "0", "people": "1"}
            assert app.tip_percent == 18
            assert app.include_tax_in_tip is False
            assert app.rounding == "none"
            assert app.result.total == 0
            assert app.system_status == "Reset"

    @pytest.mark.asyncio
    async def test_copy_summary(self):
        app = _app()
        async with app.run_test() as pilot:
            await pilot.press("1", "0", "0", "ctrl+y")
            assert app.last_summary.splitlines()[0] == "Bill: $100.00"
            assert app.last_summary.splitlines()[-1] == "Split (1): $118.00 each"
            assert app.system_status == "Summary copied"

    @pytest.mark.asyncio
    async def test_clipboard_failure_is_ignored(self):
        app = _app()

        def broken_clipboard(text):
            raise RuntimeError("no clipboard")

        async with app.run_test() as pilot:
            app.copy_to_clipboard = broken_clipboard
            await pilot.press("2", "0", "ctrl+y")
            assert app.last_summary.startswith("Bill: $20.00")
            assert app.result.bill == 20
            assert app.system_status == ""

    @pytest.mark.asyncio
    async def test_huge_bill_keeps_app_running(self):
        app = _app()
        async with app.run_test() as pilot:
            await pilot.press("1", *"0" * 26)
            assert app.result.bill == 1e26
            await pilot.press("tab", *"9" * 301)
            assert app.result.tax > 0
            await pilot.press("ctrl+y")
            assert app.last_summary.startswith("Bill: $100,000,000,000,000,000,000,000,000.00")

    @pytest.mark.asyncio
    async def test_toggle_theme(self):
        app = _app()
        async with app.run_test() as pilot:
            start_dark = app.current_theme.dark
            await pilot.press("ctrl+t")
            assert app.current_theme.dark is not start_dark
