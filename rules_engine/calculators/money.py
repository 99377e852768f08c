"""Integer cent arithmetic and display helpers.

No float ever touches an amount: percentages are whole numbers and every
division floors.
"""

from __future__ import annotations


def percent_of(amount: int, percentage: int) -> int:
    """floor(amount × percentage / 100) for non-negative amounts."""
    return amount * percentage // 100


def half_of(amount: int) -> int:
    """floor(amount / 2); rounds toward negative infinity for negative input."""
    return amount // 2


def format_cents(cents: int) -> str:
    """Render cents as dollars, e.g. 115050 → "$1,150.50", -500 → "-$5.00"."""
    sign = "-" if cents < 0 else ""
    dollars, remainder = divmod(abs(cents), 100)
    return f"{sign}${dollars:,}.{remainder:02d}"
