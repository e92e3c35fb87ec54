"""Countdown geometry for the "awaiting network response" overlay."""

from __future__ import annotations

import math

__all__ = [
    "Point",
    "ProcessingCountdown",
    "find_point_on",
    "make_triangle",
    "point_on_line",
    "make_parallelogram",
]

Point = tuple[int, int]

_STEP_MS = 500


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def find_point_on(center: Point, distance: float, degrees: float) -> Point:
    """Return the point ``distance`` away from ``center`` at angle ``degrees``."""
    rad = math.radians(degrees)
    return (
        int(center[0] + distance * math.cos(rad)),
        int(center[1] + distance * math.sin(rad)),
    )


def make_triangle(center: Point, size: int, is_up: bool) -> list[Point]:
    """Return a triangle with its apex at ``center`` opening up or down."""
    return [
        center,
        find_point_on(center, size, 215 if is_up else 145),
        find_point_on(center, size, 325 if is_up else 35),
    ]


def point_on_line(first: Point, second: Point, distance: int, total_distance: int) -> Point:
    """Return the point ``distance`` of ``total_distance`` along from ``first`` to ``second``.

    Integer arithmetic truncating toward zero is used, as for pixel positions.
    """
    return (
        first[0] - _trunc_div(distance * (first[0] - second[0]), total_distance),
        first[1] - _trunc_div(distance * (first[1] - second[1]), total_distance),
    )


def make_parallelogram(
    center: Point, lower_right: Point, lower_left: Point, dist: int, size: int
) -> list[Point]:
    """Return the filled part of the lower triangle, rising ``dist`` of ``size``."""
    return [
        lower_right,
        lower_left,
        point_on_line(lower_left, center, dist, size),
        point_on_line(lower_right, center, dist, size),
    ]


class ProcessingCountdown:
    """State of a countdown overlay placed in the middle of a screen.

    ``interval`` is the countdown length in milliseconds, counted down in
    steps of half a second; ``width`` and ``height`` are the screen size.
    """

    def __init__(self, interval: int, width: int, height: int) -> None:
        end = interval // _STEP_MS
        if end <= 0:
            raise ValueError(f"interval must be at least {_STEP_MS} ms, got {interval}")
        self.interval = interval
        self.end_point = float(end)
        self.current_state = 1.0
        self.running = False
        self.visible = False
        self._layout(width, height)
        self.lower_inner: list[Point] = make_triangle(
            self.center, int(self.height * 0.7), False
        )
        self.inner_top_size = self._scaled(0.7)
        self.inner_lower_size = self._scaled(0.7)
        self.total_rib_size = self.inner_top_size
        self.timer_interval = int(interval / self.end_point)

    def _layout(self, screen_width: int, screen_height: int) -> None:
        self.width = int(screen_width * 0.4)
        self.height = int(screen_height * 0.4)
        self.position: Point = (int(screen_width * 0.3), int(screen_height * 0.3))
        self.center: Point = (self.width // 2, self.height // 2)
        self.text_point: Point = (self.width // 5, self.height - 5)
        self.top_triangle = make_triangle(self.center, int(self.height * 0.7), True)
        self.lower_triangle = make_triangle(self.center, int(self.height * 0.7), False)
        self.lower_left = self.lower_triangle[1]
        self.lower_right = self.lower_triangle[2]

    def _scaled(self, factor: float) -> int:
        return int(self.height * (factor * (self.current_state / self.end_point)))

    def _fill(self, dist: int) -> list[Point]:
        return make_parallelogram(
            self.center, self.lower_right, self.lower_left, dist, self.total_rib_size
        )

    @property
    def countdown(self) -> int:
        """Seconds left, as shown in the corner of the overlay."""
        return int(self.current_state) // 2

    def restart(self) -> None:
        """Fill the countdown and start it."""
        self.current_state = self.end_point
        self.inner_top_size = self._scaled(0.7)
        self.inner_lower_size = self._scaled(0.7)
        self.lower_inner = self._fill(self._scaled(1.38))
        self.running = True

    def show(self) -> None:
        """Restart the countdown and make the overlay visible."""
        self.restart()
        self.visible = True

    def hide(self) -> None:
        """Stop the countdown and hide the overlay."""
        self.running = False
        self.current_state = self.end_point
        self.visible = False

    def step(self) -> bool:
        """Advance by one tick; return False once the countdown has run out."""
        self.current_state -= 1
        self.inner_lower_size = self._scaled(1.38)
        self.lower_inner = self._fill(self.inner_lower_size)
        if self.current_state == 0:
            self.running = False
            self.hide()
            return False
        return True

    def set_temporary_delay(self, additional_delay: int) -> None:
        """Restart with ``additional_delay`` milliseconds added, and show."""
        self.current_state = self.end_point + _trunc_div(additional_delay, _STEP_MS)
        self.running = True
        self.visible = True

    def resize(self, width: int, height: int) -> None:
        """Recompute the geometry for a new screen size."""
        self._layout(width, height)
        self.lower_inner = self._fill(self._scaled(1.38))
        self.inner_top_size = self._scaled(0.7)
        self.inner_lower_size = self._scaled(0.7)
        self.total_rib_size = self.inner_top_size