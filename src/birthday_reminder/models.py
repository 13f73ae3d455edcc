from __future__ import annotations

from dataclasses import dataclass
from datetime import date


DEFAULT_DAYS_IN_ADVANCE = 30
DEFAULT_DAYS_IN_PAST = 5
DEFAULT_DELIMITER = ";"
DEFAULT_LEAP_DAY_RULE = "feb28"
DEFAULT_ANCHOR_MODE = "forward"


@dataclass(frozen=True)
class BirthdayEntry:
    name: str
    birth_date: date


@dataclass(frozen=True)
class EvaluatedBirthday:
    entry: BirthdayEntry
    days_offset: int
    occurrence_date: date


@dataclass(frozen=True)
class ReminderConfig:
    days_in_advance: int = DEFAULT_DAYS_IN_ADVANCE
    days_in_past: int = DEFAULT_DAYS_IN_PAST
    leap_day_rule: str = DEFAULT_LEAP_DAY_RULE
    anchor_mode: str = DEFAULT_ANCHOR_MODE
    delimiter: str = DEFAULT_DELIMITER
