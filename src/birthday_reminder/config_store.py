from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from birthday_reminder.date_logic import ALLOWED_ANCHOR_MODES, ALLOWED_LEAP_DAY_RULES
from birthday_reminder.models import ReminderConfig

LOGGER = logging.getLogger(__name__)


def _validate_window(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer")
    return value


def _validate_text(name: str, value: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string")
    return value


def validate_config(config: ReminderConfig) -> ReminderConfig:
    days_in_advance = _validate_window("days_in_advance", config.days_in_advance)
    days_in_past = _validate_window("days_in_past", config.days_in_past)

    leap_day_rule = _validate_text("leap_day_rule", config.leap_day_rule).strip().lower()
    if leap_day_rule not in ALLOWED_LEAP_DAY_RULES:
        raise ValueError(f"leap_day_rule must be one of {sorted(ALLOWED_LEAP_DAY_RULES)}")

    anchor_mode = _validate_text("anchor_mode", config.anchor_mode).strip().lower()
    if anchor_mode not in ALLOWED_ANCHOR_MODES:
        raise ValueError(f"anchor_mode must be one of {sorted(ALLOWED_ANCHOR_MODES)}")

    delimiter = _validate_text("delimiter", config.delimiter)
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")

    return ReminderConfig(
        days_in_advance=days_in_advance,
        days_in_past=days_in_past,
        leap_day_rule=leap_day_rule,
        anchor_mode=anchor_mode,
        delimiter=delimiter,
    )


def load_config(path: Path) -> ReminderConfig:
    if not path.exists():
        LOGGER.info("No reminder config at %s, using defaults", path)
        return ReminderConfig()

    with path.open("rb") as file_obj:
        data = tomllib.load(file_obj)

    defaults = ReminderConfig()
    config = ReminderConfig(
        days_in_advance=data.get("days_in_advance", defaults.days_in_advance),
        days_in_past=data.get("days_in_past", defaults.days_in_past),
        leap_day_rule=data.get("leap_day_rule", defaults.leap_day_rule),
        anchor_mode=data.get("anchor_mode", defaults.anchor_mode),
        delimiter=data.get("delimiter", defaults.delimiter),
    )
    return validate_config(config)
