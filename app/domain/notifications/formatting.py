"""
Render-with-defaults helpers shared by the email templates and PDF vouchers.

Missing text renders as "N/A", missing money as 0, missing lists as empty.
"""

import html
from datetime import datetime
from typing import Any, Iterable, Optional

from dateutil import parser as date_parser

NOT_AVAILABLE = "N/A"


def text(value: Any, default: str = NOT_AVAILABLE) -> str:
    """Plain text for a possibly-missing field"""
    if value is None:
        return default
    value = str(value).strip()
    return value or default


def safe(value: Any, default: str = NOT_AVAILABLE) -> str:
    """HTML-escaped text for a possibly-missing field"""
    return html.escape(text(value, default))


def amount(value: Any) -> float:
    if value is None or value == "":
        return 0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0


def rupees(value: Any) -> str:
    """Format a money value as Pakistani rupees, e.g. Rs. 1,500"""
    number = amount(value)
    if number == int(number):
        return f"Rs. {int(number):,}"
    return f"Rs. {number:,.2f}"


def items(values: Optional[Iterable[Any]]) -> list:
    return [v for v in (values or []) if v is not None]


def joined(values: Optional[Iterable[Any]], default: str = NOT_AVAILABLE) -> str:
    parts = [str(v) for v in items(values) if str(v).strip()]
    return ", ".join(parts) if parts else default


def discount_percent(original: Any, discounted: Any) -> int:
    """Whole-number discount of one line item; 0 when there is no original price"""
    original = amount(original)
    if original <= 0:
        return 0
    return round((original - amount(discounted)) / original * 100)


def parse_date(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError):
        return None


def display_date(value: datetime) -> str:
    return value.strftime("%d %b %Y")


def lab_totals(request: Any) -> tuple[float, float]:
    """(original, payable) totals of a lab booking.

    The totals sent with the booking win; otherwise the line items are summed.
    """
    tests = items(request.tests)
    total_original = request.totalOriginal
    if total_original is None:
        total_original = sum(amount(t.originalPrice) for t in tests)
    total_discounted = request.totalDiscounted
    if total_discounted is None:
        total_discounted = sum(amount(t.discountedPrice) for t in tests)
    return total_original, total_discounted
