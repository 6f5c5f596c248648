"""Tip, tax and split computation.

Everything here is pure and never raises: malformed form input degrades to a
safe default (0 for money and percentages, 1 for the person count) so the
results can be recomputed on every keystroke.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal

from tip_calculator.models import TipInputs, TipResult

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_NUMBER_TEXT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_WHOLE_UNIT = Decimal("1")
# Floats at or above this magnitude carry no fractional part.
_INTEGRAL_FLOAT_LIMIT = 2.0**52


def parse_to_number(value: str | None) -> float:
    """Parse free-form bill text such as ``"$12.50"`` into a number.

    Every character except digits, ``-`` and ``.`` is stripped first. Empty,
    malformed (``"--"``, ``"1.2.3"``) or non-finite results give 0.
    """
    if not value:
        return 0.0
    cleaned = _NON_NUMERIC.sub("", str(value))
    try:
        number = float(cleaned)
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def safe_number(value: object, fallback: float = 0.0) -> float:
    """Read a numeric form field, returning ``fallback`` when it is not a finite number."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip() if value is not None else ""
        if not _NUMBER_TEXT.fullmatch(text):
            return fallback
        try:
            number = float(text)
        except ValueError:
            return fallback
    return number if math.isfinite(number) else fallback


def safe_people(value: object) -> int:
    """Effective person count: ``max(1, floor(value or 1))``."""
    number = safe_number(value, 1.0)
    if not number:
        number = 1.0
    return max(1, math.floor(number))


def round_half_away(value: float) -> float:
    """Round to the nearest whole currency unit, halves away from zero."""
    if not math.isfinite(value) or abs(value) >= _INTEGRAL_FLOAT_LIMIT:
        return value
    rounded = Decimal(str(value)).quantize(_WHOLE_UNIT, rounding=ROUND_HALF_UP)
    return float(rounded)


def compute(inputs: TipInputs) -> TipResult:
    """Compute tax, tip, total and per-person share for one form snapshot.

    Rounding reconciliation rounds exactly one quantity, selected by
    ``inputs.rounding``, and recomputes the others from it so that
    ``total == bill + tax + tip`` keeps holding. In ``perPerson`` mode the total
    is redefined as ``per_person * people`` instead. Unknown modes behave like
    ``none``.
    """
    bill = parse_to_number(inputs.bill)
    tax_percent = safe_number(inputs.tax_percent, 0.0)
    tip_percent = safe_number(inputs.tip_percent, 0.0)
    people = safe_people(inputs.people)

    tax = max(0.0, bill * (tax_percent / 100))
    tip_base = bill + tax if inputs.include_tax_in_tip else bill
    raw_tip = max(0.0, tip_base * (tip_percent / 100))
    raw_total = bill + tax + raw_tip
    raw_per_person = raw_total / people

    tip, total, per_person = raw_tip, raw_total, raw_per_person
    if inputs.rounding == "tip":
        tip = round_half_away(raw_tip)
        total = bill + tax + tip
        per_person = total / people
    elif inputs.rounding == "total":
        total = round_half_away(raw_total)
        tip = max(0.0, total - (bill + tax))
        per_person = total / people
    elif inputs.rounding == "perPerson":
        per_person = round_half_away(raw_per_person)
        total = per_person * people
        tip = max(0.0, total - (bill + tax))

    effective_tip_percent = (tip / tip_base) * 100 if tip_base > 0 else 0.0

    return TipResult(
        bill=bill,
        tax=tax,
        tip_base=tip_base,
        tip=tip,
        total=total,
        per_person=per_person,
        people=people,
        effective_tip_percent=effective_tip_percent,
    )
