"""Data-fetch outcome events and their publisher.

The presentation layer subscribes to these events to show feedback such as
toasts, so fetch code never depends on a particular UI.
"""

from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class NotificationVariant(enum.Enum):
    """Visual treatment of a notification."""

    DEFAULT = "default"
    SUCCESS = "success"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True, slots=True)
class ClusterEvent(ABC):
    """Base class for events emitted after a user-triggered read."""

    entity_id: str | None

    @property
    @abstractmethod
    def title(self) -> str: ...

    @property
    @abstractmethod
    def description(self) -> str: ...

    @property
    def variant(self) -> NotificationVariant:
        return NotificationVariant.DEFAULT


@dataclass(frozen=True, slots=True)
class DataLoaded(ClusterEvent):
    """A read succeeded and returned data."""

    count: int
    subject: str = "related entities"

    @property
    def title(self) -> str:
        return "Data Loaded"

    @property
    def description(self) -> str:
        return f"Loaded {self.count} {self.subject}"

    @property
    def variant(self) -> NotificationVariant:
        return NotificationVariant.SUCCESS


@dataclass(frozen=True, slots=True)
class DataEmpty(ClusterEvent):
    """A read succeeded but found nothing."""

    name: str | None = None

    @property
    def title(self) -> str:
        return "No Data"

    @property
    def description(self) -> str:
        return f"No additional data found for {self.name or self.entity_id}"


@dataclass(frozen=True, slots=True)
class FetchFailed(ClusterEvent):
    """A read failed against the store."""

    operation: str
    error: str

    @property
    def title(self) -> str:
        return "Error"

    @property
    def description(self) -> str:
        return f"Failed to {self.operation}: {self.error}"

    @property
    def variant(self) -> NotificationVariant:
        return NotificationVariant.DESTRUCTIVE


@dataclass(frozen=True, slots=True)
class StrategyAcknowledged(ClusterEvent):
    """An entity was added to the SEO strategy (not persisted)."""

    name: str

    @property
    def title(self) -> str:
        return "Added to Strategy"

    @property
    def description(self) -> str:
        return f'Added "{self.name}" to SEO strategy'

    @property
    def variant(self) -> NotificationVariant:
        return NotificationVariant.SUCCESS


EventSubscriber = Callable[[ClusterEvent], None]


class EventPublisher:
    """Fans events out to registered subscribers, in registration order."""

    def __init__(self) -> None:
        self._subscribers: list[EventSubscriber] = []

    def subscribe(self, subscriber: EventSubscriber) -> Callable[[], None]:
        """Register a subscriber and return a callable that unregisters it."""
        self._subscribers.append(subscriber)

        def unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe

    def publish(self, event: ClusterEvent) -> None:
        for subscriber in list(self._subscribers):
            try:
                subscriber(event)
            except Exception:
                logger.exception(
                    "Subscriber %r failed handling %s", subscriber, type(event).__name__
                )


def log_event(event: ClusterEvent) -> None:
    """Subscriber that writes every event to the application log."""
    level = (
        logging.WARNING
        if event.variant is NotificationVariant.DESTRUCTIVE
        else logging.INFO
    )
    logger.log(level, "%s: %s", event.title, event.description)
