# utils/date_helper.py
import calendar
from datetime import date, datetime, timedelta

DATE_KEY_FORMAT = "%Y-%m-%d"


def _check_month(month: int) -> None:
    if not 0 <= month <= 11:
        raise ValueError(f"month must be in 0..11, got {month}")


def days_in_month(year: int, month: int) -> int:
    """month is zero-based (0 = January)."""
    _check_month(month)
    return calendar.monthrange(year, month + 1)[1]


def make_date_key(year: int, month: int, day: int) -> str:
    _check_month(month)
    return f"{year:04d}-{month + 1:02d}-{day:02d}"


def date_key(d: date) -> str:
    return d.strftime(DATE_KEY_FORMAT)


def parse_date_key(key: str) -> date:
    return datetime.strptime(key, DATE_KEY_FORMAT).date()


def shift_days(d: date, days: int) -> date:
    return d + timedelta(days=days)


def format_date_long(d: date) -> str:
    # Fri, March 1, 2024
    return f"{d.strftime('%a')}, {d.strftime('%B')} {d.day}, {d.year}"


def format_row_date(year: int, month: int, day: int) -> str:
    # 03/01/24
    _check_month(month)
    return f"{month + 1:02d}/{day:02d}/{year % 100:02d}"


def format_month_label(year: int, month: int) -> str:
    # Mar 2024
    _check_month(month)
    return f"{calendar.month_abbr[month + 1]} {year}"
