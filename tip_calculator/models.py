"""Domain models for tip-calculator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from tip_calculator.config import (
    DEFAULT_BILL,
    DEFAULT_INCLUDE_TAX_IN_TIP,
    DEFAULT_PEOPLE,
    DEFAULT_ROUNDING,
    DEFAULT_TAX_PERCENT,
    DEFAULT_TIP_PERCENT,
)

RoundingMode = Literal["none", "tip", "total", "perPerson"]

ROUNDING_MODES: tuple[RoundingMode, ...] = ("none", "tip", "total", "perPerson")


@dataclass(frozen=True)
class TipInputs:
    """One snapshot of the form.

    ``bill`` stays raw text; the calculator sanitizes it. The no-argument
    instance is the reset state of the form.
    """

    bill: str = DEFAULT_BILL
    tax_percent: float = DEFAULT_TAX_PERCENT
    tip_percent: float = DEFAULT_TIP_PERCENT
    people: float = DEFAULT_PEOPLE
    include_tax_in_tip: bool = DEFAULT_INCLUDE_TAX_IN_TIP
    rounding: str = DEFAULT_ROUNDING


@dataclass(frozen=True)
class TipResult:
    """Derived amounts for one computation pass."""

    bill: float
    tax: float
    tip_base: float
    tip: float
    total: float
    per_person: float
    people: int
    effective_tip_percent: float
