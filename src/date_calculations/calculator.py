import logging
from datetime import date
from typing import Any, Callable, Optional, Union

import numpy as np

from . import arrays
from ._exceptions import PeriodOverflowError
from .backend import DateBackend, GregorianBackend, Weekday
from .period import Period, quarter_month

logger = logging.getLogger(__name__)

DateLike = Union[date, "np.datetime64", "np.ndarray"]
Result = Union[Optional[date], "np.datetime64", "np.ndarray"]


class PeriodCalculator:
    """
    Beginning, end, next and previous of a week, month, quarter or year.

    Weeks run Sunday through Saturday.  Quarters start in January, April,
    July and October.  Month, quarter and year results always fall on the
    first of a month (end_of_* excepted).

    A single date goes through the injected backend and yields a date or
    ``None`` when the boundary is not representable.  NumPy arrays (or
    sequences of dates) go through the vectorised path (element-wise through
    the backend when a non-default backend is injected) and yield a
    ``datetime64[D]`` array with ``NaT`` in place of ``None``.  With
    ``strict=True`` the missing result raises PeriodOverflowError instead.
    """

    def __init__(
        self,
        backend: Optional[DateBackend] = None,
        *,
        strict: bool = False,
    ) -> None:
        self._backend: DateBackend = backend if backend is not None else GregorianBackend()
        self._strict: bool = strict

    # ── weeks ────────────────────────────────────────────────────────────

    def beginning_of_week(self, value: DateLike) -> Result:
        return self._apply("beginning_of_week", value)

    def end_of_week(self, value: DateLike) -> Result:
        return self._apply("end_of_week", value)

    def next_week(self, value: DateLike) -> Result:
        return self._apply("next_week", value)

    def previous_week(self, value: DateLike) -> Result:
        return self._apply("previous_week", value)

    # ── months ───────────────────────────────────────────────────────────

    def beginning_of_month(self, value: DateLike) -> Result:
        return self._apply("beginning_of_month", value)

    def end_of_month(self, value: DateLike) -> Result:
        return self._apply("end_of_month", value)

    def next_month(self, value: DateLike) -> Result:
        return self._apply("next_month", value)

    def previous_month(self, value: DateLike) -> Result:
        return self._apply("previous_month", value)

    # ── quarters ─────────────────────────────────────────────────────────

    def beginning_of_quarter(self, value: DateLike) -> Result:
        return self._apply("beginning_of_quarter", value)

    def end_of_quarter(self, value: DateLike) -> Result:
        return self._apply("end_of_quarter", value)

    def next_quarter(self, value: DateLike) -> Result:
        return self._apply("next_quarter", value)

    def previous_quarter(self, value: DateLike) -> Result:
        return self._apply("previous_quarter", value)

    # ── years ────────────────────────────────────────────────────────────

    def beginning_of_year(self, value: DateLike) -> Result:
        return self._apply("beginning_of_year", value)

    def end_of_year(self, value: DateLike) -> Result:
        return self._apply("end_of_year", value)

    def next_year(self, value: DateLike) -> Result:
        return self._apply("next_year", value)

    def previous_year(self, value: DateLike) -> Result:
        return self._apply("previous_year", value)

    # ── by period kind ───────────────────────────────────────────────────

    def beginning_of(self, period: Union[Period, str], value: DateLike) -> Result:
        return self._apply(f"beginning_of_{Period.parse(period).value}", value)

    def end_of(self, period: Union[Period, str], value: DateLike) -> Result:
        return self._apply(f"end_of_{Period.parse(period).value}", value)

    def next(self, period: Union[Period, str], value: DateLike) -> Result:
        return self._apply(f"next_{Period.parse(period).value}", value)

    def previous(self, period: Union[Period, str], value: DateLike) -> Result:
        return self._apply(f"previous_{Period.parse(period).value}", value)

    def span(self, period: Union[Period, str], value: DateLike) -> Any:
        """
        (beginning, end) of the period containing `value`.

        For a single date the span is ``None`` when either bound is missing;
        for arrays a pair of arrays is returned.
        """
        start = self.beginning_of(period, value)
        end = self.end_of(period, value)
        if self._backend.accepts(value) and (start is None or end is None):
            return None
        return start, end

    # ── dispatch ─────────────────────────────────────────────────────────

    def _apply(self, name: str, value: DateLike) -> Result:
        if self._backend.accepts(value):
            scalar_fn: Callable[[date], Optional[date]] = getattr(self, f"_{name}")
            result = scalar_fn(value)
            if result is None:
                self._no_result(name, value)
            return result

        d = arrays.as_day_array(value)
        shape = d.shape
        flat = np.ascontiguousarray(d.ravel())
        if type(self._backend) is GregorianBackend:
            out = getattr(arrays, name)(flat)
        else:
            out = self._map_scalar(name, flat)
        lost = np.isnat(out) & ~np.isnat(flat)
        if lost.any():
            self._no_result(name, flat[lost][0], count=int(lost.sum()))
        out = out.reshape(shape)
        return out[()] if out.ndim == 0 else out

    def _map_scalar(self, name: str, flat: np.ndarray) -> np.ndarray:
        # Element-wise through the injected backend; only the Gregorian
        # backend is known to match the vectorised rules.
        scalar_fn: Callable[[date], Optional[date]] = getattr(self, f"_{name}")
        out = np.full(flat.shape, arrays.NAT)
        for i, item in enumerate(flat.astype(object)):
            if not isinstance(item, date):
                continue
            result = scalar_fn(item)
            if result is not None:
                out[i] = np.datetime64(result, "D")
        return out

    def _no_result(self, name: str, value: Any, count: int = 1) -> None:
        logger.debug("%s has no result for %s (%d value(s) out of range)", name, value, count)
        if self._strict:
            raise PeriodOverflowError(
                f"{name}({value}) falls outside the representable date range."
            )

    # ── scalar rules ─────────────────────────────────────────────────────

    def _beginning_of_week(self, d: date) -> Optional[date]:
        b = self._backend
        if b.weekday(d) == Weekday.SUNDAY:
            return d
        # ISO weeks start on Monday, so the ISO week's Sunday closes the week
        # after the Sunday-started one containing d.
        iso_year, iso_week = b.iso_week(d)
        sunday = b.from_iso_week(iso_year, iso_week, Weekday.SUNDAY)
        if sunday is None:
            return None
        return b.add_weeks(sunday, -1)

    def _end_of_week(self, d: date) -> Optional[date]:
        start = self._beginning_of_week(d)
        return None if start is None else self._backend.add_days(start, 6)

    def _next_week(self, d: date) -> Optional[date]:
        start = self._beginning_of_week(d)
        return None if start is None else self._backend.add_weeks(start, 1)

    def _previous_week(self, d: date) -> Optional[date]:
        start = self._beginning_of_week(d)
        return None if start is None else self._backend.add_weeks(start, -1)

    def _beginning_of_month(self, d: date) -> Optional[date]:
        return self._backend.replace(d, day=1)

    def _end_of_month(self, d: date) -> Optional[date]:
        following = self._next_month(d)
        return None if following is None else self._backend.add_days(following, -1)

    def _next_month(self, d: date) -> Optional[date]:
        _, month, _ = self._backend.ymd(d)
        if month == 12:
            return self._next_year(d)
        first = self._beginning_of_month(d)
        return None if first is None else self._backend.replace(first, month=month + 1)

    def _previous_month(self, d: date) -> Optional[date]:
        year, month, _ = self._backend.ymd(d)
        first = self._beginning_of_month(d)
        if first is None:
            return None
        if month == 1:
            december = self._backend.replace(first, month=12)
            return None if december is None else self._backend.replace(december, year=year - 1)
        return self._backend.replace(first, month=month - 1)

    def _beginning_of_quarter(self, d: date) -> Optional[date]:
        _, month, _ = self._backend.ymd(d)
        first = self._beginning_of_month(d)
        return None if first is None else self._backend.replace(first, month=quarter_month(month))

    def _end_of_quarter(self, d: date) -> Optional[date]:
        following = self._next_quarter(d)
        return None if following is None else self._backend.add_days(following, -1)

    def _next_quarter(self, d: date) -> Optional[date]:
        year, month, _ = self._backend.ymd(d)
        if month >= 10:
            january = self._beginning_of_year(d)
            return None if january is None else self._backend.replace(january, year=year + 1)
        first = self._beginning_of_month(d)
        if first is None:
            return None
        return self._backend.replace(first, month=quarter_month(month) + 3)

    def _previous_quarter(self, d: date) -> Optional[date]:
        year, month, _ = self._backend.ymd(d)
        first = self._beginning_of_month(d)
        if first is None:
            return None
        if month <= 3:
            last_year = self._backend.replace(first, year=year - 1)
            return None if last_year is None else self._backend.replace(last_year, month=10)
        return self._backend.replace(first, month=quarter_month(month) - 3)

    def _beginning_of_year(self, d: date) -> Optional[date]:
        first = self._beginning_of_month(d)
        return None if first is None else self._backend.replace(first, month=1)

    def _end_of_year(self, d: date) -> Optional[date]:
        december = self._backend.replace(d, month=12)
        return None if december is None else self._backend.replace(december, day=31)

    def _next_year(self, d: date) -> Optional[date]:
        year, _, _ = self._backend.ymd(d)
        january = self._beginning_of_year(d)
        return None if january is None else self._backend.replace(january, year=year + 1)

    def _previous_year(self, d: date) -> Optional[date]:
        year, _, _ = self._backend.ymd(d)
        january = self._beginning_of_year(d)
        return None if january is None else self._backend.replace(january, year=year - 1)

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def backend(self) -> DateBackend:
        return self._backend

    @property
    def strict(self) -> bool:
        return self._strict

    def __repr__(self) -> str:
        return f"PeriodCalculator(backend={self._backend!r}, strict={self._strict})"
