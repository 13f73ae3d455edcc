from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date
from pathlib import Path

from birthday_reminder.date_logic import evaluate
from birthday_reminder.loader import load_birthdays
from birthday_reminder.models import EvaluatedBirthday, ReminderConfig
from birthday_reminder.notifiers import Notifier

LOGGER = logging.getLogger(__name__)

DIALOG_TITLE = "Birthday Reminders"
MESSAGE_HEADER = "Birthdays:"
DATE_FORMAT = "%d.%m.%Y"


def format_status(days_offset: int) -> str:
    if days_offset > 0:
        return f"in {days_offset} days"
    if days_offset == 0:
        return "TODAY - HAPPY BIRTHDAY!!!!"
    return f"{-days_offset} days ago - Birthday is in the past"


def format_reminder_line(result: EvaluatedBirthday) -> str:
    occurrence = result.occurrence_date.strftime(DATE_FORMAT)
    return f"{result.entry.name}: {occurrence} ({format_status(result.days_offset)})"


def render_message(results: Sequence[EvaluatedBirthday]) -> str:
    paragraphs = [MESSAGE_HEADER, *(format_reminder_line(result) for result in results)]
    return "\n\n".join(paragraphs)


def present(results: Sequence[EvaluatedBirthday], notifier: Notifier) -> int:
    if not results:
        return 0
    notifier.notify(DIALOG_TITLE, render_message(results))
    return len(results)


class ReminderService:
    def __init__(
        self,
        *,
        notifier: Notifier,
        birthday_file_path: Path,
        config: ReminderConfig,
    ) -> None:
        self._notifier = notifier
        self._birthday_file_path = birthday_file_path
        self._config = config

    def dispatch_for_date(self, today: date) -> int:
        entries = load_birthdays(self._birthday_file_path, self._config.delimiter)
        results = evaluate(
            entries,
            today,
            self._config.days_in_advance,
            self._config.days_in_past,
            leap_day_rule=self._config.leap_day_rule,
            anchor_mode=self._config.anchor_mode,
        )

        if not results:
            LOGGER.info("No birthdays near %s among %s entries", today.isoformat(), len(entries))
            return 0

        shown = present(results, self._notifier)
        LOGGER.info("Showed %s reminders for %s", shown, today.isoformat())
        return shown
