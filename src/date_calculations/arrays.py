"""
Vectorised period arithmetic on ``datetime64[D]`` arrays.

Every function takes a 1-D ``datetime64[D]`` array (see :func:`as_day_array`)
and returns a new one.  A boundary that falls outside 0001-01-01 ..
9999-12-31 becomes ``NaT``, and ``NaT`` inputs stay ``NaT``, so results agree
element-wise with the scalar ``datetime.date`` path.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

import numpy as np

from ._exceptions import InvalidDateError

DAY = "datetime64[D]"
MONTH = "datetime64[M]"
YEAR = "datetime64[Y]"

NAT = np.datetime64("NaT", "D")
MIN_DATE = np.datetime64("0001-01-01", "D")
MAX_DATE = np.datetime64("9999-12-31", "D")

_ONE_DAY = np.timedelta64(1, "D")
_ONE_WEEK = np.timedelta64(7, "D")
# 1970-01-04, the first Sunday after the datetime64 epoch.
_EPOCH_SUNDAY = np.datetime64("1970-01-04", "D")


def as_day_array(value: Any) -> np.ndarray:
    """Coerce `value` to a ``datetime64[D]`` array, rejecting non-date input."""
    arr = np.asarray(value)
    if arr.dtype.kind == "M":
        return arr.astype(DAY)
    if arr.size == 0:
        return np.empty(arr.shape, dtype=DAY)
    if arr.dtype == object:
        for item in arr.flat:
            if isinstance(item, np.datetime64):
                continue
            if not isinstance(item, date) or isinstance(item, datetime):
                raise InvalidDateError(
                    f"Expected calendar dates; got {type(item).__name__} value {item!r}."
                )
        return arr.astype(DAY)
    raise InvalidDateError(f"Expected calendar dates; got array of dtype {arr.dtype}.")


# ── helpers ──────────────────────────────────────────────────────────────

def _clip(days: np.ndarray) -> np.ndarray:
    out = np.array(days, dtype=DAY, copy=True)
    out[(out < MIN_DATE) | (out > MAX_DATE)] = NAT
    return out


def _first_day(period: np.ndarray) -> np.ndarray:
    return period.astype(DAY)


def _months(d: np.ndarray) -> np.ndarray:
    return d.astype(MONTH)


def _quarter_start(d: np.ndarray) -> np.ndarray:
    m = _months(d)
    # month 0 (1970-01) starts a quarter; % is non-negative for negative indices
    offset = m.astype(np.int64) % 3
    return m - offset.astype("timedelta64[M]")


# ── weeks ────────────────────────────────────────────────────────────────

def beginning_of_week(d: np.ndarray) -> np.ndarray:
    d = _clip(d)
    since_sunday = ((d - _EPOCH_SUNDAY).astype(np.int64) % 7).astype("timedelta64[D]")
    start = d - since_sunday
    # The scalar path finds the start via the following ISO Sunday, which
    # must itself be representable.
    start[(since_sunday != np.timedelta64(0, "D")) & (start + _ONE_WEEK > MAX_DATE)] = NAT
    return _clip(start)


def end_of_week(d: np.ndarray) -> np.ndarray:
    return _clip(beginning_of_week(d) + 6 * _ONE_DAY)


def next_week(d: np.ndarray) -> np.ndarray:
    return _clip(beginning_of_week(d) + _ONE_WEEK)


def previous_week(d: np.ndarray) -> np.ndarray:
    return _clip(beginning_of_week(d) - _ONE_WEEK)


# ── months ───────────────────────────────────────────────────────────────

# Month, quarter and year results mirror the explicit December/January and
# Q1/Q4 branches of PeriodCalculator: casting to datetime64[M] or [Y] and
# stepping by whole units carries the year rollover for the whole array.

def beginning_of_month(d: np.ndarray) -> np.ndarray:
    return _clip(_first_day(_months(_clip(d))))


def end_of_month(d: np.ndarray) -> np.ndarray:
    return _clip(next_month(d) - _ONE_DAY)


def next_month(d: np.ndarray) -> np.ndarray:
    return _clip(_first_day(_months(_clip(d)) + np.timedelta64(1, "M")))


def previous_month(d: np.ndarray) -> np.ndarray:
    return _clip(_first_day(_months(_clip(d)) - np.timedelta64(1, "M")))


# ── quarters ─────────────────────────────────────────────────────────────

def beginning_of_quarter(d: np.ndarray) -> np.ndarray:
    return _clip(_first_day(_quarter_start(_clip(d))))


def end_of_quarter(d: np.ndarray) -> np.ndarray:
    return _clip(next_quarter(d) - _ONE_DAY)


def next_quarter(d: np.ndarray) -> np.ndarray:
    return _clip(_first_day(_quarter_start(_clip(d)) + np.timedelta64(3, "M")))


def previous_quarter(d: np.ndarray) -> np.ndarray:
    return _clip(_first_day(_quarter_start(_clip(d)) - np.timedelta64(3, "M")))


# ── years ────────────────────────────────────────────────────────────────

def beginning_of_year(d: np.ndarray) -> np.ndarray:
    return _clip(_first_day(_clip(d).astype(YEAR)))


def end_of_year(d: np.ndarray) -> np.ndarray:
    # December 31 of the same year; the intermediate January 1 is not clipped.
    return _clip(_first_day(_clip(d).astype(YEAR) + np.timedelta64(1, "Y")) - _ONE_DAY)


def next_year(d: np.ndarray) -> np.ndarray:
    return _clip(_first_day(_clip(d).astype(YEAR) + np.timedelta64(1, "Y")))


def previous_year(d: np.ndarray) -> np.ndarray:
    return _clip(_first_day(_clip(d).astype(YEAR) - np.timedelta64(1, "Y")))
