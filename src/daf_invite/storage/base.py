"""Storage protocol definition for daf-invite."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from uuid import UUID

    from daf_invite.core.models import DesignDocument, Event


@runtime_checkable
class StorageProtocol(Protocol):
    """Contract for event and design persistence.

    A design document is stored verbatim with its event. Saving a design
    replaces whatever was stored before; there is no merging.
    """

    async def create_event(self, event: Event) -> Event:
        """Store a new event.

        Args:
            event: The event to create.

        Returns:
            The stored event.

        Raises:
            StorageError: If the event cannot be created.
        """
        ...

    async def get_event(self, event_id: UUID) -> Event | None:
        """Retrieve an event by its ID.

        Args:
            event_id: The unique identifier of the event.

        Returns:
            The event if found, None otherwise.
        """
        ...

    async def list_events(self) -> list[Event]:
        """List all events, newest first."""
        ...

    async def update_event(self, event: Event) -> Event:
        """Replace a stored event.

        Args:
            event: The event with updated data.

        Returns:
            The updated event.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        ...

    async def delete_event(self, event_id: UUID) -> bool:
        """Delete an event.

        Returns:
            True if the event was deleted, False if it did not exist.
        """
        ...

    async def save_design(self, event_id: UUID, design: DesignDocument) -> Event:
        """Store the design document of an event.

        Args:
            event_id: The unique identifier of the event.
            design: The design to store.

        Returns:
            The updated event.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        ...
