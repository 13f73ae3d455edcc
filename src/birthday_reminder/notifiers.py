from __future__ import annotations

import logging
import os
import sys
from typing import Protocol, TextIO

from birthday_reminder.settings import Settings

LOGGER = logging.getLogger(__name__)

DISPLAY_ENV_VARS = ("DISPLAY", "WAYLAND_DISPLAY", "QT_QPA_PLATFORM")


class NotificationError(RuntimeError):
    pass


class Notifier(Protocol):
    def notify(self, title: str, body: str) -> None: ...


def has_display() -> bool:
    if not sys.platform.startswith("linux"):
        return True
    return any(os.getenv(name) for name in DISPLAY_ENV_VARS)


class DialogNotifier:
    """Modal information box on the local desktop.

    Qt aborts the whole process when it cannot reach a display, so the
    platform is checked before a ``QApplication`` is created.
    """

    def notify(self, title: str, body: str) -> None:
        if not has_display():
            raise NotificationError(
                "Unable to show dialog: no display available (set DISPLAY, WAYLAND_DISPLAY or QT_QPA_PLATFORM)"
            )

        # Qt is only loaded when a dialog is actually shown.
        from PyQt6.QtWidgets import QApplication, QMessageBox

        # keep a reference so the application outlives the dialog call
        app = QApplication.instance() or QApplication(sys.argv)
        QMessageBox.information(None, title, body)
        LOGGER.debug("Dialog dismissed")


class ConsoleNotifier:
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def notify(self, title: str, body: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(f"{title}\n\n{body}\n")
        stream.flush()


def build_notifier(settings: Settings) -> Notifier:
    if settings.notifier == "dialog":
        return DialogNotifier()
    if settings.notifier == "console":
        return ConsoleNotifier()
    raise ValueError(f"Unsupported notifier: {settings.notifier}")
