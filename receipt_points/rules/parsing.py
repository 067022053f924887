# receipt_points/rules/parsing.py
"""
Parse-or-default helpers for the receipt fields the rules read.

None of these raise on bad input: a value that cannot be read comes back
as the zero/None default and the rule that asked for it simply does not fire.
"""
from __future__ import annotations
import re
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

# strptime alone takes "2022-1-1" and "14:5"; the shape must match first.
# The hour may be one digit ("9:30"), minutes and date parts may not.
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_TIME_RE = re.compile(r"[0-9]{1,2}:[0-9]{2}")

# Leading numeric prefix, e.g. "12.34", "-3.", ".5", "1e3", "7.25 USD"
_AMOUNT_RE = re.compile(r"\s*([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")

def parse_amount(text: str | None) -> Decimal:
    """
    Read the leading decimal number from a currency string.
    Trailing garbage is ignored; no numeric content gives Decimal("0").
    """
    if not text:
        return Decimal("0")
    m = _AMOUNT_RE.match(text)
    if not m:
        return Decimal("0")
    try:
        return Decimal(m.group(1))
    except InvalidOperation:
        return Decimal("0")

def parse_date(text: str | None) -> date | None:
    if not text or not _DATE_RE.fullmatch(text):
        return None
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except (TypeError, ValueError):
        return None

def parse_time(text: str | None) -> time | None:
    if not text or not _TIME_RE.fullmatch(text):
        return None
    try:
        return datetime.strptime(text, TIME_FORMAT).time()
    except (TypeError, ValueError):
        return None

def is_within_time_range(value: str | None, start: str, end: str) -> bool:
    """True when start < value < end (both bounds excluded). Any unparsable input gives False."""
    t, lo, hi = parse_time(value), parse_time(start), parse_time(end)
    if t is None or lo is None or hi is None:
        return False
    return lo < t < hi
