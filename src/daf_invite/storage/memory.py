"""In-memory storage implementation for daf-invite."""

from __future__ import annotations

import asyncio
from dataclasses import replace
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from daf_invite.exceptions import EventNotFoundError

if TYPE_CHECKING:
    from uuid import UUID

    from daf_invite.core.models import DesignDocument, Event


class InMemoryStorage:
    """In-memory event storage guarded by an asyncio lock.

    Events are copied on the way in and out so callers never share state with
    the store. Design documents are immutable and are shared as-is.

    Note:
        All data is lost when the application stops.
    """

    def __init__(self) -> None:
        """Initialize the storage with no events."""
        self._events: dict[UUID, Event] = {}
        self._lock = asyncio.Lock()

    async def create_event(self, event: Event) -> Event:
        """Store a new event."""
        async with self._lock:
            self._events[event.id] = replace(event)
            return replace(event)

    async def get_event(self, event_id: UUID) -> Event | None:
        """Retrieve an event by its ID."""
        async with self._lock:
            event = self._events.get(event_id)
            return replace(event) if event else None

    async def list_events(self) -> list[Event]:
        """List all events, newest first."""
        async with self._lock:
            events = [replace(event) for event in self._events.values()]
            return sorted(events, key=lambda e: e.created_at, reverse=True)

    async def update_event(self, event: Event) -> Event:
        """Replace a stored event.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        async with self._lock:
            if event.id not in self._events:
                raise EventNotFoundError(event.id)
            updated = replace(event, updated_at=datetime.now(UTC))
            self._events[event.id] = updated
            return replace(updated)

    async def delete_event(self, event_id: UUID) -> bool:
        """Delete an event."""
        async with self._lock:
            return self._events.pop(event_id, None) is not None

    async def save_design(self, event_id: UUID, design: DesignDocument) -> Event:
        """Store the design document of an event.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        async with self._lock:
            event = self._events.get(event_id)
            if event is None:
                raise EventNotFoundError(event_id)
            updated = replace(event, design=design, updated_at=datetime.now(UTC))
            self._events[event_id] = updated
            return replace(updated)
