"""
tests/period/test_period.py

Covers:
  - Period parsing
  - Quarter-start months
  - Dispatch by period kind (beginning_of, end_of, next, previous)
  - Spans for dates and arrays
"""

from __future__ import annotations

from datetime import date

import numpy as np
import pytest

import date_calculations as dc
from date_calculations import Period, PeriodCalculator, quarter_month


def test_parse_accepts_members_and_names() -> None:
    assert Period.parse(Period.MONTH) is Period.MONTH
    assert Period.parse("quarter") is Period.QUARTER
    assert Period.parse(" Year ") is Period.YEAR


def test_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown period"):
        Period.parse("fortnight")


def test_quarter_month() -> None:
    assert [quarter_month(m) for m in range(1, 13)] == [1, 1, 1, 4, 4, 4, 7, 7, 7, 10, 10, 10]
    with pytest.raises(ValueError):
        quarter_month(13)


@pytest.mark.parametrize(
    "period, beginning, end, following, prior",
    [
        (Period.WEEK, date(2021, 2, 7), date(2021, 2, 13), date(2021, 2, 14), date(2021, 1, 31)),
        (Period.MONTH, date(2021, 2, 1), date(2021, 2, 28), date(2021, 3, 1), date(2021, 1, 1)),
        (Period.QUARTER, date(2021, 1, 1), date(2021, 3, 31), date(2021, 4, 1), date(2020, 10, 1)),
        (Period.YEAR, date(2021, 1, 1), date(2021, 12, 31), date(2022, 1, 1), date(2020, 1, 1)),
    ],
)
def test_dispatch_by_period(period, beginning, end, following, prior) -> None:
    d = date(2021, 2, 10)
    calc = PeriodCalculator()
    assert calc.beginning_of(period, d) == beginning
    assert calc.end_of(period, d) == end
    assert calc.next(period, d) == following
    assert calc.previous(period, d) == prior
    assert calc.span(period, d) == (beginning, end)


def test_dispatch_accepts_names() -> None:
    assert dc.next_period("month", date(2021, 12, 15)) == date(2022, 1, 1)
    assert dc.previous_period("QUARTER", date(2021, 1, 5)) == date(2020, 10, 1)
    assert dc.beginning_of("year", date(2021, 6, 1)) == date(2021, 1, 1)
    assert dc.end_of("week", date(2021, 1, 6)) == date(2021, 1, 9)


def test_span_missing_bound_is_none() -> None:
    assert dc.span(Period.MONTH, date(9999, 12, 1)) is None
    assert dc.span(Period.WEEK, date(9999, 12, 26)) is None


def test_span_of_array() -> None:
    days = np.array(["2021-02-10", "2021-11-30"], dtype="datetime64[D]")
    start, end = dc.span(Period.QUARTER, days)
    np.testing.assert_array_equal(start, np.array(["2021-01-01", "2021-10-01"], dtype="datetime64[D]"))
    np.testing.assert_array_equal(end, np.array(["2021-03-31", "2021-12-31"], dtype="datetime64[D]"))
