"""Countdown to the celebration date (New Year's midnight by default)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

SECOND = 1
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR


@dataclass(frozen=True)
class CountdownParts:
    days: int
    hours: int
    minutes: int
    seconds: int


def next_new_year(now: datetime) -> datetime:
    return datetime(now.year + 1, 1, 1, 0, 0, 0)


def split_seconds(total: float) -> CountdownParts:
    """Break a remaining duration into whole days/hours/minutes/seconds."""
    if total <= 0:
        return CountdownParts(0, 0, 0, 0)
    gap = int(total)
    return CountdownParts(
        days=gap // DAY,
        hours=(gap % DAY) // HOUR,
        minutes=(gap % HOUR) // MINUTE,
        seconds=(gap % MINUTE) // SECOND,
    )


def format_parts(parts: CountdownParts) -> str:
    return f"{parts.days:02}:{parts.hours:02}:{parts.minutes:02}:{parts.seconds:02}"


class Countdown:
    def __init__(self, target: datetime | None = None, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock
        self.target = target or next_new_year(clock())

    def seconds_left(self) -> float:
        return (self.target - self.clock()).total_seconds()

    def remaining(self) -> CountdownParts:
        return split_seconds(self.seconds_left())

    def is_due(self) -> bool:
        return self.seconds_left() <= 0

    @property
    def text(self) -> str:
        return format_parts(self.remaining())


__all__ = ["Countdown", "CountdownParts", "next_new_year", "split_seconds", "format_parts"]
