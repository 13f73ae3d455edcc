from pathlib import Path

import pytest

from birthday_reminder.config_store import load_config, validate_config
from birthday_reminder.models import ReminderConfig


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "reminder.toml")

    assert config == ReminderConfig(days_in_advance=30, days_in_past=5, leap_day_rule="feb28")


def test_load_config_reads_all_keys(tmp_path: Path) -> None:
    path = tmp_path / "reminder.toml"
    path.write_text(
        """
days_in_advance = 14
days_in_past = 2
leap_day_rule = "MAR1"
anchor_mode = "lookback"
delimiter = ","
""".strip()
        + "\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.days_in_advance == 14
    assert config.days_in_past == 2
    assert config.leap_day_rule == "mar1"
    assert config.anchor_mode == "lookback"
    assert config.delimiter == ","


def test_negative_window_rejected(tmp_path: Path) -> None:
    path = tmp_path / "reminder.toml"
    path.write_text("days_in_past = -1\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize(
    "config",
    [
        ReminderConfig(leap_day_rule="feb30"),
        ReminderConfig(anchor_mode="backward"),
        ReminderConfig(delimiter=";;"),
        ReminderConfig(days_in_advance=True),
    ],
)
def test_validate_config_rejects_invalid_values(config: ReminderConfig) -> None:
    with pytest.raises(ValueError):
        validate_config(config)


@pytest.mark.parametrize("line", ["delimiter = 5", "leap_day_rule = 1", "anchor_mode = true"])
def test_non_string_values_rejected(tmp_path: Path, line: str) -> None:
    path = tmp_path / "reminder.toml"
    path.write_text(line + "\n", encoding="utf-8")

    with pytest.raises(ValueError, match="must be a string"):
        load_config(path)
