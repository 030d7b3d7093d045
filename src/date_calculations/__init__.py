"""
date_calculations
~~~~~~~~~~~~~~~~~

Period-aligned date arithmetic: the beginning, end, next and previous week,
month, quarter or year of a calendar date (proleptic Gregorian).  Weeks run
Sunday through Saturday; quarters start in January, April, July and October.

Basic usage::

    from datetime import date
    from date_calculations import next_year, previous_quarter

    d = date(2021, 1, 31)
    next_year(d)            # → date(2022, 1, 1)
    previous_quarter(d)     # → date(2020, 10, 1)

A boundary that cannot be represented (e.g. ``previous_year`` of year 1) is
``None``, never a substitute date.

NumPy arrays are accepted everywhere a date is; missing results are ``NaT``::

    import numpy as np
    from date_calculations import end_of_month

    days = np.array(["2021-01-06", "2021-12-15"], dtype="datetime64[D]")
    end_of_month(days)      # → ['2021-01-31', '2021-12-31']

Public API
----------
PeriodCalculator     The calculator; accepts an injected DateBackend.
Period               Period kinds (week, month, quarter, year).
DateBackend          Protocol for the underlying date capability.
GregorianBackend     Default backend over ``datetime.date``.
PeriodError          Base exception for all library errors.
"""

from __future__ import annotations

from date_calculations._exceptions import InvalidDateError, PeriodError, PeriodOverflowError
from date_calculations.backend import DateBackend, GregorianBackend, Weekday
from date_calculations.calculator import PeriodCalculator
from date_calculations.period import QUARTER_START_MONTHS, Period, quarter_month

_default = PeriodCalculator()

beginning_of_week = _default.beginning_of_week
end_of_week = _default.end_of_week
next_week = _default.next_week
previous_week = _default.previous_week

beginning_of_month = _default.beginning_of_month
end_of_month = _default.end_of_month
next_month = _default.next_month
previous_month = _default.previous_month

beginning_of_quarter = _default.beginning_of_quarter
end_of_quarter = _default.end_of_quarter
next_quarter = _default.next_quarter
previous_quarter = _default.previous_quarter

beginning_of_year = _default.beginning_of_year
end_of_year = _default.end_of_year
next_year = _default.next_year
previous_year = _default.previous_year

beginning_of = _default.beginning_of
end_of = _default.end_of
next_period = _default.next
previous_period = _default.previous
span = _default.span

__all__ = [
    "PeriodCalculator",
    "Period",
    "QUARTER_START_MONTHS",
    "quarter_month",
    "DateBackend",
    "GregorianBackend",
    "Weekday",
    "PeriodError",
    "InvalidDateError",
    "PeriodOverflowError",
    "beginning_of_week",
    "end_of_week",
    "next_week",
    "previous_week",
    "beginning_of_month",
    "end_of_month",
    "next_month",
    "previous_month",
    "beginning_of_quarter",
    "end_of_quarter",
    "next_quarter",
    "previous_quarter",
    "beginning_of_year",
    "end_of_year",
    "next_year",
    "previous_year",
    "beginning_of",
    "end_of",
    "next_period",
    "previous_period",
    "span",
]
