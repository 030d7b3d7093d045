"""
Date capability used by :class:`~date_calculations.PeriodCalculator`.

The calculator never does calendar math of its own; it composes the
primitives below.  Any object satisfying :class:`DateBackend` can be
injected, as long as it honours proleptic Gregorian semantics.  Every
constructing primitive returns ``None`` when the result would not be a
valid, representable date.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from enum import IntEnum
from typing import Any, Optional, Protocol, runtime_checkable


class Weekday(IntEnum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


@runtime_checkable
class DateBackend(Protocol):

    def accepts(self, value: Any) -> bool: ...

    def from_ymd(self, year: int, month: int, day: int) -> Optional[date]: ...

    def ymd(self, d: date) -> tuple[int, int, int]: ...

    def weekday(self, d: date) -> Weekday: ...

    def iso_week(self, d: date) -> tuple[int, int]: ...

    def from_iso_week(self, year: int, week: int, weekday: Weekday) -> Optional[date]: ...

    def add_days(self, d: date, days: int) -> Optional[date]: ...

    def add_weeks(self, d: date, weeks: int) -> Optional[date]: ...

    def replace(
        self,
        d: date,
        *,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> Optional[date]: ...


class GregorianBackend:
    """`datetime.date` backend, years 1 through 9999."""

    min_date: date = date.min
    max_date: date = date.max

    def accepts(self, value: Any) -> bool:
        # datetime subclasses date but carries a time of day.
        return isinstance(value, date) and not isinstance(value, datetime)

    def from_ymd(self, year: int, month: int, day: int) -> Optional[date]:
        try:
            return date(year, month, day)
        except (ValueError, OverflowError):
            return None

    def ymd(self, d: date) -> tuple[int, int, int]:
        return d.year, d.month, d.day

    def weekday(self, d: date) -> Weekday:
        return Weekday(d.isoweekday())

    def iso_week(self, d: date) -> tuple[int, int]:
        iso = d.isocalendar()
        return iso[0], iso[1]

    def from_iso_week(self, year: int, week: int, weekday: Weekday) -> Optional[date]:
        try:
            return date.fromisocalendar(year, week, int(weekday))
        except (ValueError, OverflowError):
            return None

    def add_days(self, d: date, days: int) -> Optional[date]:
        try:
            return d + timedelta(days=days)
        except OverflowError:
            return None

    def add_weeks(self, d: date, weeks: int) -> Optional[date]:
        try:
            return d + timedelta(weeks=weeks)
        except OverflowError:
            return None

    def replace(
        self,
        d: date,
        *,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> Optional[date]:
        try:
            return d.replace(
                year=d.year if year is None else year,
                month=d.month if month is None else month,
                day=d.day if day is None else day,
            )
        except (ValueError, OverflowError):
            return None

    def __repr__(self) -> str:
        return f"GregorianBackend(min_date={self.min_date}, max_date={self.max_date})"
