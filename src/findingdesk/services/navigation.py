"""Navigation out of the editing context."""

from abc import ABC, abstractmethod


class Navigator(ABC):
    @abstractmethod
    def go_back(self) -> None:
        """Return to wherever the editor was opened from."""
        ...

    @abstractmethod
    def go_to(self, path: str) -> None:
        ...


class RecordingNavigator(Navigator):
    """Records where the session asked to go; nothing is rendered."""

    def __init__(self) -> None:
        self.went_back = False
        self.path: str | None = None

    @property
    def left(self) -> bool:
        return self.went_back or self.path is not None

    def go_back(self) -> None:
        self.went_back = True

    def go_to(self, path: str) -> None:
        self.path = path
