from __future__ import annotations

import csv
import logging
import re
from datetime import date
from pathlib import Path

from birthday_reminder.models import DEFAULT_DELIMITER, BirthdayEntry

LOGGER = logging.getLogger(__name__)

DATE_PATTERN = re.compile(r"(\d{2})\.(\d{2})\.(\d{4})")


class ResourceUnavailableError(OSError):
    pass


def parse_birth_date(raw_text: str) -> date:
    match = DATE_PATTERN.fullmatch(raw_text)
    if not match:
        raise ValueError("Birth date must use DD.MM.YYYY")

    day = int(match.group(1))
    month = int(match.group(2))
    year = int(match.group(3))
    return date(year, month, day)


def load_birthdays(path: Path, delimiter: str = DEFAULT_DELIMITER) -> list[BirthdayEntry]:
    birthdays: list[BirthdayEntry] = []

    try:
        with Path(path).open("r", encoding="utf-8-sig", newline="") as file_obj:
            for row in csv.reader(file_obj, delimiter=delimiter):
                if len(row) < 2:
                    continue

                name = row[0]
                try:
                    birth_date = parse_birth_date(row[1])
                except ValueError:
                    LOGGER.warning("Unable to parse date for %s: %s", name, row[1])
                    continue

                birthdays.append(BirthdayEntry(name=name, birth_date=birth_date))
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise ResourceUnavailableError(f"Birthday file could not be read: {path}") from exc

    return birthdays
