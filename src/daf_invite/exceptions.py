"""Custom exceptions for daf-invite."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from uuid import UUID


class InviteError(Exception):
    """Base exception class for all daf-invite errors."""


class EventNotFoundError(InviteError):
    """Raised when an event with the specified ID cannot be found.

    Attributes:
        event_id: The UUID of the event that was not found.
    """

    def __init__(self, event_id: UUID) -> None:
        """Initialize the exception with the event ID.

        Args:
            event_id: The UUID of the event that was not found.
        """
        self.event_id = event_id
        super().__init__(f"Event with ID {event_id} not found")


class InvalidDesignError(InviteError):
    """Raised when a stored or submitted design document cannot be read."""


class InvalidUploadError(InviteError):
    """Raised when an uploaded file is not an accepted image.

    Attributes:
        filename: Name of the rejected file.
    """

    def __init__(self, filename: str, reason: str) -> None:
        """Initialize the exception.

        Args:
            filename: Name of the rejected file.
            reason: Why the file was rejected.
        """
        self.filename = filename
        super().__init__(f"Cannot use {filename!r} as an image: {reason}")


class StorageError(InviteError):
    """Raised when a storage operation fails."""
