# 📄 File: plantscan/shared/utils/formatters.py

# 🧭 Purpose (Layman Explanation):
# This file provides small formatting tools that make data look nice and consistent,
# like turning a 0.92 confidence score into "92" or a list of months into "March, April".

# 🧪 Purpose (Technical Summary):
# Data formatting utilities for consistent presentation of confidence scores,
# lists and care-guide ranges in the rendered panels.

# 🔗 Dependencies:
# - decimal: Half-up rounding matching the UI's percentage display

# 🔄 Connected Modules / Calls From:
# Used by: scan controller rendering, HTML page rendering

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable, Mapping, Optional, Union


def pretty_prob(probability: Optional[Union[int, float]]) -> int:
    """
    Format a 0..1 confidence score as a whole percentage.

    Missing values count as zero; halves round up.

    Examples:
        >>> pretty_prob(0.8734)
        87
        >>> pretty_prob(None)
        0
        >>> pretty_prob(1)
        100
    """
    value = Decimal(str(probability or 0)) * 100
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_list(items: Iterable[Any], separator: str = ", ") -> str:
    """Join non-empty items into display text."""
    return separator.join(str(item) for item in items if item not in (None, ""))


def format_range(value: Optional[Mapping[str, Any]]) -> Optional[str]:
    """
    Format a ``{"min": .., "max": ..}`` range such as a hardiness zone.

    Returns a single value when both ends are equal and ``None``
    when the range is missing entirely.
    """
    if not value:
        return None

    low, high = value.get("min"), value.get("max")
    if low in (None, "") and high in (None, ""):
        return None
    if low in (None, "") or low == high:
        return str(high)
    if high in (None, ""):
        return str(low)
    return f"{low}-{high}"
