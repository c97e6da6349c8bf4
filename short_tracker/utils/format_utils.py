# utils/format_utils.py
from short_tracker.logic.report import ABSENT

CURRENCY_SYMBOL = "₱"
OFF_LABEL = "OFF"


def format_currency(value) -> str:
    """
    PHP currency display with two decimals.
    1234.5 -> '₱1,234.50', -5 -> '-₱5.00'
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        v = 0.0
    sign = "-" if v < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(v):,.2f}"


def format_share_cell(share) -> str:
    if share is ABSENT:
        return OFF_LABEL
    return format_currency(share)
