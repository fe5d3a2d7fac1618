"""
Number formatting for dashboard text.
"""

from typing import Optional


def format_currency(value: Optional[float]) -> str:
    if value is None:
        return "$0.00"
    return f"${value:.2f}"


def format_percentage(value: Optional[float], total: Optional[float]) -> str:
    if not value or not total:
        return "0.0%"
    return f"{value / total * 100:.1f}%"
