"""Value model of a spin box holding an int, float, time or date."""

from __future__ import annotations

import datetime as dt
import math
from collections.abc import Callable
from enum import Enum
from typing import Optional

__all__ = ["SpinType", "SpinBox"]

_MIN_DATE = dt.date(1752, 9, 14)
_MAX_DATE = dt.date(9999, 12, 31)
_DAY_SECONDS = 24 * 3600


class SpinType(Enum):
    """Kind of value a spin box holds."""

    INT = "int"
    TIME = "time"
    FLOAT = "float"
    DATE = "date"


class SpinBox:
    """Spin box value with range, stepping and display text.

    Operations that do not apply to the box's kind are ignored, and getters
    for another kind return a neutral value. Handlers in ``change_handlers``
    receive the display text whenever the value changes.
    """

    def __init__(self, kind: SpinType) -> None:
        self.kind = SpinType(kind)
        self.change_handlers: list[Callable[[str], None]] = []
        self._decimals = 3
        self._time: Optional[dt.time] = None
        self._date: Optional[dt.date] = None
        if self.kind is SpinType.INT:
            self._minimum: float = 0
            self._maximum: float = 99
            self._value: float = 0
        elif self.kind is SpinType.FLOAT:
            self._minimum = 0.0
            self._maximum = 99.99
            self._value = 0.0
        else:
            self._minimum = self._maximum = self._value = 0
        if self.kind is SpinType.TIME:
            self._time = dt.time(0, 0, 0)
        elif self.kind is SpinType.DATE:
            self._date = dt.date.today()

    @property
    def _numeric(self) -> bool:
        return self.kind in (SpinType.INT, SpinType.FLOAT)

    def _notify(self, before: str) -> None:
        after = self.text()
        if after != before:
            for handler in list(self.change_handlers):
                handler(after)

    def _normalize(self, value: float) -> float:
        if self.kind is SpinType.FLOAT:
            return round(float(value), self._decimals)
        return int(value)

    def _store(self, value: float) -> None:
        before = self.text()
        self._value = min(max(self._normalize(value), self._minimum), self._maximum)
        self._notify(before)

    def set_minimum(self, minimum: int) -> None:
        """Set the lower bound, raising the upper bound and value if needed."""
        if not self._numeric:
            return
        self._minimum = self._normalize(minimum)
        self._maximum = max(self._maximum, self._minimum)
        self._store(self._value)

    def set_maximum(self, maximum: int) -> None:
        """Set the upper bound, lowering the lower bound and value if needed."""
        if not self._numeric:
            return
        self._maximum = self._normalize(maximum)
        self._minimum = min(self._minimum, self._maximum)
        self._store(self._value)

    def set_value(self, value: int) -> None:
        """Set an integer value, clamped to the range."""
        if self._numeric:
            self._store(int(value))

    def set_dvalue(self, value: float) -> None:
        """Set a fractional value; an integer box takes its ceiling."""
        if self.kind is SpinType.FLOAT:
            self._store(value)
        elif self.kind is SpinType.INT:
            self._store(math.ceil(value))

    def value(self) -> int:
        """Return the value as an integer, truncated; 0 for time and date."""
        return int(self._value) if self._numeric else 0

    def dvalue(self) -> float:
        """Return the value as a float; 0.0 for time and date."""
        return float(self._value) if self._numeric else 0.0

    def set_precision(self, precision: int) -> None:
        """Set the number of decimals of a float box."""
        if self.kind is not SpinType.FLOAT:
            return
        self._decimals = precision
        self._minimum = round(self._minimum, precision)
        self._maximum = round(self._maximum, precision)
        self._store(self._value)

    def set_time(self, value: dt.time) -> None:
        """Set the time of a time box."""
        if self.kind is SpinType.TIME:
            before = self.text()
            self._time = value
            self._notify(before)

    def time(self) -> Optional[dt.time]:
        """Return the time of a time box, otherwise None."""
        return self._time if self.kind is SpinType.TIME else None

    def set_date(self, value: Optional[dt.date] = None) -> None:
        """Set the date of a date box; today when no date is given."""
        if self.kind is SpinType.DATE:
            before = self.text()
            self._date = value if value is not None else dt.date.today()
            self._notify(before)

    def date(self) -> Optional[dt.date]:
        """Return the date of a date box, otherwise None."""
        return self._date if self.kind is SpinType.DATE else None

    def _step(self, direction: int) -> None:
        if self._numeric:
            self._store(self._value + direction)
        elif self.kind is SpinType.TIME and self._time is not None:
            t = self._time
            seconds = t.hour * 3600 + t.minute * 60 + t.second + direction * 3600
            if 0 <= seconds < _DAY_SECONDS:
                self.set_time(
                    dt.time(seconds // 3600, seconds // 60 % 60, seconds % 60, t.microsecond)
                )
        elif self.kind is SpinType.DATE and self._date is not None:
            moved = self._date + dt.timedelta(days=direction) if (
                _MIN_DATE < self._date if direction < 0 else self._date < _MAX_DATE
            ) else self._date
            self.set_date(moved)

    def step_up(self) -> None:
        """Increase by one step: one unit, one hour or one day."""
        self._step(1)

    def step_down(self) -> None:
        """Decrease by one step: one unit, one hour or one day."""
        self._step(-1)

    def clear(self) -> None:
        """Reset to zero, the current time or today's date."""
        if self._numeric:
            self.set_value(0)
        elif self.kind is SpinType.DATE:
            self.set_date(dt.date.today())
        else:
            now = dt.datetime.now().time()
            self.set_time(now.replace(microsecond=now.microsecond // 1000 * 1000))

    def text(self) -> str:
        """Return the displayed text."""
        if self.kind is SpinType.INT:
            return str(int(self._value))
        if self.kind is SpinType.FLOAT:
            return f"{self._value:.{self._decimals}f}"
        if self.kind is SpinType.TIME:
            return self._time.strftime("%H:%M:%S") if self._time else ""
        return self._date.strftime("%d:%m:%Y") if self._date else ""