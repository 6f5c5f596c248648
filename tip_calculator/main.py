"""Entry point for the tip-calculator Textual app."""

from __future__ import annotations

from tip_calculator.tip_app import TipCalculatorApp


def main() -> None:
    """Run the Textual application."""
    TipCalculatorApp().run()


if __name__ == "__main__":
    main()
