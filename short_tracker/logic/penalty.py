# logic/penalty.py
from __future__ import annotations
import math
from dataclasses import dataclass

SHORT_SURCHARGE = 50.0

# (upper bound inclusive, flat penalty); amounts above the last bound pay themselves
UNRECORDED_TIERS = (
    (50.0, 0.0),
    (100.0, 50.0),
    (150.0, 75.0),
    (200.0, 100.0),
)


@dataclass(frozen=True)
class DailySplit:
    unrecorded_penalty: float
    short_penalty: float
    total_penalty: float
    per_person_share: float


def normalize_amount(value) -> float:
    """
    Coerce a form/storage value into a finite, non-negative float.
    - numbers and numeric strings are accepted
    - unparsable, NaN, inf, negative → 0.0
    """
    if isinstance(value, bool):
        return 0.0
    try:
        v = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(v) or v <= 0:
        return 0.0
    return v


def compute_unrecorded_penalty(amount) -> float:
    v = normalize_amount(amount)
    if v <= 0:
        return 0.0
    for upper, penalty in UNRECORDED_TIERS:
        if v <= upper:
            return penalty
    return v


def compute_short_penalty(amount) -> float:
    v = normalize_amount(amount)
    if v <= 0:
        return 0.0
    return v + SHORT_SURCHARGE


def split_daily_penalty(unrecorded, short, attendee_count) -> DailySplit:
    unrecorded_penalty = compute_unrecorded_penalty(unrecorded)
    short_penalty = compute_short_penalty(short)
    total = unrecorded_penalty + short_penalty

    try:
        count = int(attendee_count)
    except (TypeError, ValueError):
        count = 0

    share = total / count if count > 0 and total > 0 else 0.0
    return DailySplit(
        unrecorded_penalty=unrecorded_penalty,
        short_penalty=short_penalty,
        total_penalty=total,
        per_person_share=share,
    )
