"""Diagnostic notifications emitted during resolution.

The resolver never talks to a logging backend directly. It reports through a
`NotificationSink` handed to it by the caller:

- `DEFAULT_USED(name, value)` (warning) when a default replaces a missing variable.
- `UNSUPPORTED_VALUE(name, value)` (error) right before an allowed-set failure.

Only the kind and fields are stable; message wording is not.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from envresolve.observability.logging import KVLogger, get_logger
from envresolve.redaction import REDACTED, is_secret_name


class NotificationKind(str, Enum):
    DEFAULT_USED = "DEFAULT_USED"
    UNSUPPORTED_VALUE = "UNSUPPORTED_VALUE"

    @property
    def level(self) -> int:
        return logging.WARNING if self is NotificationKind.DEFAULT_USED else logging.ERROR


@dataclass(frozen=True, slots=True)
class Notification:
    kind: NotificationKind
    name: str
    value: Any


@runtime_checkable
class NotificationSink(Protocol):
    def notify(self, notification: Notification) -> None: ...


_MESSAGES = {
    NotificationKind.DEFAULT_USED: "env_default_used",
    NotificationKind.UNSUPPORTED_VALUE: "env_unsupported_value",
}


class LoggingSink:
    """Writes notifications as structured log records labelled `ENV`."""

    def __init__(self, logger: KVLogger | None = None):
        self._log = logger or get_logger("envresolve.env")

    def notify(self, notification: Notification) -> None:
        value = notification.value
        if value is not None and is_secret_name(notification.name):
            value = REDACTED

        self._log.log(
            notification.kind.level,
            _MESSAGES[notification.kind],
            label="ENV",
            kind=notification.kind.value,
            env_name=notification.name,
            env_value=value,
        )


class CapturingSink:
    """Append-only in-memory sink; safe to share between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        with self._lock:
            self._items.append(notification)

    @property
    def notifications(self) -> list[Notification]:
        with self._lock:
            return list(self._items)

    def of_kind(self, kind: NotificationKind) -> list[Notification]:
        return [n for n in self.notifications if n.kind is kind]

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
