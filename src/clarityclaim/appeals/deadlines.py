"""Appeal numbering and filing deadlines."""

from __future__ import annotations

from datetime import date, datetime, timedelta

DEFAULT_APPEAL_DEADLINE_DAYS = 60
_BASE36 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def calculate_deadline(today: date, appeal_deadline_days: int | None = None) -> date:
    """Last day to file an appeal, counted from today."""
    if appeal_deadline_days is None:
        appeal_deadline_days = DEFAULT_APPEAL_DEADLINE_DAYS
    return today + timedelta(days=appeal_deadline_days)


def to_base36(value: int) -> str:
    if value < 0:
        msg = "value must be non-negative"
        raise ValueError(msg)
    digits = ""
    while True:
        value, rem = divmod(value, 36)
        digits = _BASE36[rem] + digits
        if value == 0:
            return digits


def new_appeal_number(now: datetime) -> str:
    """Appeal number from the epoch milliseconds of ``now``, e.g. ``APL-MGU2K3Y0``."""
    return f"APL-{to_base36(int(now.timestamp() * 1000))}"
