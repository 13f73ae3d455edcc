from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta

from birthday_reminder.models import (
    DEFAULT_ANCHOR_MODE,
    DEFAULT_LEAP_DAY_RULE,
    BirthdayEntry,
    EvaluatedBirthday,
)

ALLOWED_LEAP_DAY_RULES = {"feb28", "mar1"}
ALLOWED_ANCHOR_MODES = {"forward", "lookback"}


class InvalidBirthdayError(ValueError):
    pass


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def birthday_date_for_year(entry: BirthdayEntry, year: int, leap_day_rule: str) -> date:
    month, day = entry.birth_date.month, entry.birth_date.day
    if month == 2 and day == 29 and not is_leap_year(year):
        if leap_day_rule == "feb28":
            return date(year, 2, 28)
        if leap_day_rule == "mar1":
            return date(year, 3, 1)
        raise InvalidBirthdayError(f"Unsupported leap day rule: {leap_day_rule}")
    return date(year, month, day)


def next_birthday(entry: BirthdayEntry, today: date, leap_day_rule: str) -> date:
    this_year = birthday_date_for_year(entry, today.year, leap_day_rule)
    if this_year >= today:
        return this_year
    return birthday_date_for_year(entry, today.year + 1, leap_day_rule)


def nearest_birthday(entry: BirthdayEntry, today: date, leap_day_rule: str, days_in_past: int) -> date:
    """Earliest occurrence that is not before ``today - days_in_past``.

    Unlike :func:`next_birthday` this can return a date before today, so a
    birthday a few days ago (even one in late December seen from early
    January) still gets a negative offset.
    """
    earliest = today - timedelta(days=days_in_past)
    for year in (today.year - 1, today.year):
        occurrence = birthday_date_for_year(entry, year, leap_day_rule)
        if occurrence >= earliest:
            return occurrence
    return birthday_date_for_year(entry, today.year + 1, leap_day_rule)


def occurrence_for(
    entry: BirthdayEntry,
    today: date,
    *,
    leap_day_rule: str,
    anchor_mode: str,
    days_in_past: int,
) -> date:
    if anchor_mode == "forward":
        return next_birthday(entry, today, leap_day_rule)
    if anchor_mode == "lookback":
        return nearest_birthday(entry, today, leap_day_rule, days_in_past)
    raise InvalidBirthdayError(f"Unsupported anchor mode: {anchor_mode}")


def sort_key(result: EvaluatedBirthday) -> tuple[int, int]:
    # today and past birthdays first, then upcoming ones
    bucket = 0 if result.days_offset <= 0 else 1
    return bucket, result.days_offset


def evaluate(
    entries: Iterable[BirthdayEntry],
    today: date,
    days_in_advance: int,
    days_in_past: int,
    *,
    leap_day_rule: str = DEFAULT_LEAP_DAY_RULE,
    anchor_mode: str = DEFAULT_ANCHOR_MODE,
) -> list[EvaluatedBirthday]:
    if leap_day_rule not in ALLOWED_LEAP_DAY_RULES:
        raise InvalidBirthdayError(f"Unsupported leap day rule: {leap_day_rule}")
    if anchor_mode not in ALLOWED_ANCHOR_MODES:
        raise InvalidBirthdayError(f"Unsupported anchor mode: {anchor_mode}")

    relevant: list[EvaluatedBirthday] = []
    for entry in entries:
        occurrence = occurrence_for(
            entry,
            today,
            leap_day_rule=leap_day_rule,
            anchor_mode=anchor_mode,
            days_in_past=days_in_past,
        )
        days_offset = (occurrence - today).days
        if -days_in_past <= days_offset <= days_in_advance:
            relevant.append(
                EvaluatedBirthday(entry=entry, days_offset=days_offset, occurrence_date=occurrence)
            )

    relevant.sort(key=sort_key)
    return relevant
