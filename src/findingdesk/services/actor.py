"""Actor identity used to stamp history entries."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from findingdesk.config import settings
from findingdesk.models.finding import HistoryActor


@dataclass(frozen=True)
class Actor:
    id: str
    email: str | None = None

    def as_history_actor(self, unknown_email: str | None = None) -> HistoryActor:
        """The ``createdBy`` stamp; email falls back to the literal unknown label."""
        return HistoryActor(id=self.id, email=self.email or unknown_email or settings.unknown_actor_email)


class ActorProvider(ABC):
    @abstractmethod
    def current_actor(self) -> Actor:
        ...


class StaticActorProvider(ActorProvider):
    """Always reports the same actor."""

    def __init__(self, actor_id: str, email: str | None = None):
        self._actor = Actor(id=actor_id, email=email)

    def current_actor(self) -> Actor:
        return self._actor
