from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ALLOWED_NOTIFIERS = {"dialog", "console"}


@dataclass(frozen=True)
class Settings:
    birthday_file_path: Path
    reminder_config_path: Path
    notifier: str


def load_settings() -> Settings:
    root = Path.cwd()

    birthday_file_path = Path(os.getenv("BIRTHDAY_FILE_PATH", root / "birthdays.csv"))
    reminder_config_path = Path(
        os.getenv("BIRTHDAY_REMINDER_CONFIG_PATH", root / "config" / "reminder.toml")
    )

    notifier = os.getenv("BIRTHDAY_NOTIFIER", "dialog").strip().lower()
    if notifier not in ALLOWED_NOTIFIERS:
        raise ValueError(f"BIRTHDAY_NOTIFIER must be one of {sorted(ALLOWED_NOTIFIERS)}")

    return Settings(
        birthday_file_path=birthday_file_path,
        reminder_config_path=reminder_config_path,
        notifier=notifier,
    )
