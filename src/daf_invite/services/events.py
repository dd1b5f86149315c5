"""Event service providing business logic for event records."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any

import structlog

from daf_invite.core.models import Event, EventData
from daf_invite.exceptions import EventNotFoundError

if TYPE_CHECKING:
    from uuid import UUID

    from daf_invite.storage.base import StorageProtocol

logger = structlog.get_logger(__name__)


class EventService:
    """Service for creating and maintaining events.

    Attributes:
        rsvp_base_url: Public origin used to build RSVP links.
    """

    def __init__(self, storage: StorageProtocol, rsvp_base_url: str = "https://daf-invite.app") -> None:
        """Initialize the event service.

        Args:
            storage: Storage backend implementing StorageProtocol.
            rsvp_base_url: Public origin used to build RSVP links.
        """
        self._storage = storage
        self.rsvp_base_url = rsvp_base_url.rstrip("/")

    async def create_event(self, details: EventData, *, created_by_email: str = "") -> Event:
        """Create a new event with an empty design.

        Args:
            details: Event details.
            created_by_email: Email of the organizer.

        Returns:
            The newly created event.
        """
        event = await self._storage.create_event(Event(details=details, created_by_email=created_by_email))
        logger.info("Event created", event_id=str(event.id), title=details.title)
        return event

    async def get_event(self, event_id: UUID) -> Event:
        """Get an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        event = await self._storage.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    async def list_events(self) -> list[Event]:
        """List all events, newest first."""
        return await self._storage.list_events()

    async def update_details(self, event_id: UUID, **changes: Any) -> Event:
        """Update event details.

        Fields with None values are ignored.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        event = await self.get_event(event_id)
        updates = {key: value for key, value in changes.items() if value is not None}
        if not updates:
            return event
        event = replace(event, details=replace(event.details, **updates))
        updated = await self._storage.update_event(event)
        logger.info("Event details updated", event_id=str(event_id), fields=sorted(updates))
        return updated

    async def delete_event(self, event_id: UUID) -> bool:
        """Delete an event.

        Returns:
            True if the event was deleted, False if it did not exist.
        """
        deleted = await self._storage.delete_event(event_id)
        if deleted:
            logger.info("Event deleted", event_id=str(event_id))
        return deleted

    def rsvp_link(self, event_id: UUID) -> str:
        """Public RSVP link for an event."""
        return f"{self.rsvp_base_url}/rsvp/{event_id}"
