"""
Clock Module

Injectable time sources. Accounts read "now" through a Clock so that
transaction timestamps and calendar-day rollover can be driven
deterministically in tests.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta, timezone
from threading import Lock
from typing import Optional


class Clock(ABC):
    """Abstract time source with at least day granularity"""

    @abstractmethod
    def now(self) -> datetime:
        """Current timestamp"""
        pass

    def today(self) -> date:
        """Current calendar date"""
        return self.now().date()


class SystemClock(Clock):
    """Wall clock in UTC"""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FrozenClock(Clock):
    """
    Clock that only moves when told to

    Useful for tests that need several operations on the same day, or a
    withdrawal on the following day.
    """

    def __init__(self, start: Optional[datetime] = None):
        self._now = start or datetime.now(timezone.utc)
        self._lock = Lock()

    def now(self) -> datetime:
        with self._lock:
            return self._now

    def set(self, moment: datetime) -> None:
        """Jump to a specific moment"""
        with self._lock:
            self._now = moment

    def advance(self, delta: timedelta) -> datetime:
        """Move forward by delta and return the new time"""
        if delta < timedelta(0):
            raise ValueError("Clock cannot move backwards")
        with self._lock:
            self._now = self._now + delta
            return self._now
