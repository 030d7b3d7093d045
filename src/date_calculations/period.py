from __future__ import annotations

from enum import Enum

QUARTER_START_MONTHS: tuple[int, ...] = (1, 4, 7, 10)


class Period(str, Enum):
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"

    @classmethod
    def parse(cls, value: "Period | str") -> "Period":
        if isinstance(value, Period):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown period {value!r}; expected one of "
                f"{', '.join(p.value for p in cls)}."
            ) from None


def quarter_month(month: int) -> int:
    """First month of the quarter containing `month` (one of 1, 4, 7, 10)."""
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be in 1..12; got {month}.")
    return 1 + 3 * ((month - 1) // 3)
