from __future__ import annotations

import logging
from datetime import date

from birthday_reminder.config_store import load_config
from birthday_reminder.loader import ResourceUnavailableError
from birthday_reminder.notifiers import NotificationError, build_notifier
from birthday_reminder.reminder_service import ReminderService
from birthday_reminder.settings import load_settings

LOGGER = logging.getLogger(__name__)

EXIT_RESOURCE_UNAVAILABLE = 1
EXIT_NOTIFICATION_FAILED = 2


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    configure_logging()

    settings = load_settings()
    config = load_config(settings.reminder_config_path)

    service = ReminderService(
        notifier=build_notifier(settings),
        birthday_file_path=settings.birthday_file_path,
        config=config,
    )

    try:
        service.dispatch_for_date(date.today())
    except ResourceUnavailableError as exc:
        LOGGER.error("%s (%s)", exc, exc.__cause__)
        return EXIT_RESOURCE_UNAVAILABLE
    except NotificationError as exc:
        LOGGER.error("%s", exc)
        return EXIT_NOTIFICATION_FAILED
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
