"""Exchange-wide status and trading schedule."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


@dataclass(frozen=True)
class ExchangeStatus:
    exchange_active: bool
    trading_active: bool

    @property
    def is_open(self) -> bool:
        return self.exchange_active and self.trading_active


@dataclass(frozen=True)
class DaySchedule:
    """Opening window for one weekday, as ``HH:MM`` strings in exchange time."""

    open_time: str
    close_time: str


@dataclass(frozen=True)
class StandardHours:
    monday: DaySchedule
    tuesday: DaySchedule
    wednesday: DaySchedule
    thursday: DaySchedule
    friday: DaySchedule
    saturday: DaySchedule
    sunday: DaySchedule

    def for_day(self, weekday: str) -> DaySchedule:
        normalized = weekday.lower()
        if normalized not in WEEKDAYS:
            raise ValueError(f"Unknown weekday: {weekday}")
        return getattr(self, normalized)


@dataclass(frozen=True)
class ExchangeSchedule:
    standard_hours: StandardHours
    maintenance_windows: List[str] = field(default_factory=list)


__all__ = ["DaySchedule", "ExchangeSchedule", "ExchangeStatus", "StandardHours", "WEEKDAYS"]
