"""Runtime configuration defaults for the calculator and its debug log."""

from __future__ import annotations

import os

# Empty means "ask the process locale".
LOCALE_OVERRIDE = os.getenv("TIP_CALCULATOR_LOCALE", "").strip()
DEFAULT_LOCALE = "en-US"

DEBUG_LOG_PATH = os.getenv("TIP_CALCULATOR_DEBUG_LOG", "/tmp/tip-calculator-debug.log")

# Reset values for the form.
DEFAULT_BILL = ""
DEFAULT_TIP_PERCENT = 18.0
DEFAULT_PEOPLE = 1
DEFAULT_TAX_PERCENT = 0.0
DEFAULT_INCLUDE_TAX_IN_TIP = False
DEFAULT_ROUNDING = "none"

TIP_SLIDER_MIN = 0.0
TIP_SLIDER_MAX = 40.0
TIP_SLIDER_STEP = 0.5
