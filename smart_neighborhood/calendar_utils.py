from __future__ import annotations

from datetime import datetime
from numbers import Integral
from typing import List

import numpy as np

HOURS_PER_DAY: int = 24
"""Number of hourly samples in one generated day."""

HOURS: List[int] = list(range(HOURS_PER_DAY))


def validate_hour(hour: int) -> int:
    """
    Check that ``hour`` is an integer hour index of the day.

    Args:
        hour: Hour index to validate.

    Returns:
        The hour as a plain ``int``.

    Raises:
        ValueError: If the value is not an integer in 0..23.
    """
    if isinstance(hour, bool) or not isinstance(hour, (Integral, np.integer)):
        raise ValueError(f"hour must be an integer in 0..23, got {hour!r}")
    if not (0 <= hour < HOURS_PER_DAY):
        raise ValueError(f"hour must be between 0 and 23, got {hour}")
    return int(hour)


def hour_label(hour: int) -> str:
    """Format an hour index as the ``HH:00`` label used on chart axes."""
    return f"{validate_hour(hour):02d}:00"


def current_hour(reference_time: datetime) -> int:
    """
    Hour index of an explicit reference time.

    The caller passes the clock reading in; nothing here reads the wall clock.
    """
    return reference_time.hour
