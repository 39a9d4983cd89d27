"""User-facing notification sink for the editor.

Messages are fixed strings; callers never parse them.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from findingdesk.models.enums import NotificationKind

logger = logging.getLogger(__name__)

LOAD_FAILED = "Er is helaas iets mis gegaan bij het ophalen van de gegevens."
SAVE_FAILED = "Er is helaas iets mis gegaan bij het opslaan van de bevinding."
FINDING_UPDATED = "De bevinding is aangepast."
FINDING_CREATED = "De nieuwe bevinding is aangemaakt."


@dataclass(frozen=True)
class Notification:
    kind: NotificationKind
    message: str


class Notifier(ABC):
    @abstractmethod
    def notify(self, kind: NotificationKind, message: str) -> None:
        ...


class LoggingNotifier(Notifier):
    """Writes notifications to the log instead of showing them."""

    def notify(self, kind: NotificationKind, message: str) -> None:
        if kind == NotificationKind.ERROR:
            logger.warning("notification", extra={"kind": str(kind), "notification": message})
        else:
            logger.info("notification", extra={"kind": str(kind), "notification": message})


class CollectingNotifier(Notifier):
    """Keeps every notification in order, for responses and tests."""

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, kind: NotificationKind, message: str) -> None:
        self.notifications.append(Notification(kind=kind, message=message))

    def as_dicts(self) -> list[dict]:
        return [{"kind": str(n.kind), "message": n.message} for n in self.notifications]
