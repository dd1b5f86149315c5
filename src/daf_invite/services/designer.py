"""Designer service managing editor sessions per event."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from daf_invite.core.session import EditorSession
from daf_invite.exceptions import EventNotFoundError

if TYPE_CHECKING:
    from uuid import UUID

    from daf_invite.core.models import Event
    from daf_invite.storage.base import StorageProtocol

logger = structlog.get_logger(__name__)


class DesignerService:
    """Service holding one editor session per event.

    Sessions are opened lazily from the stored design, seeded with the default
    layout once, and reconciled with the event details. Edits stay in the
    session until :meth:`save` hands the document to storage. Concurrent
    sessions for the same event are not merged; the last save wins.
    """

    def __init__(self, storage: StorageProtocol, max_history: int = 100) -> None:
        """Initialize the designer service.

        Args:
            storage: Storage backend implementing StorageProtocol.
            max_history: Maximum undo history size per session.
        """
        self._storage = storage
        self._max_history = max_history
        self._sessions: dict[UUID, EditorSession] = {}

    async def open(self, event_id: UUID) -> EditorSession:
        """Get the editor session for an event, opening it if needed.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        session = self._sessions.get(event_id)
        if session is not None:
            return session

        event = await self._storage.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)

        session = EditorSession(event.design, max_history=self._max_history)
        seeded = session.initialize(event.details)
        session.sync_event_data(event.details)
        self._sessions[event_id] = session
        logger.info("Editor session opened", event_id=str(event_id), seeded=seeded)
        return session

    def sync_event(self, event: Event) -> None:
        """Push changed event details into an open session's bound elements."""
        session = self._sessions.get(event.id)
        if session is not None:
            session.sync_event_data(event.details)

    async def save(self, event_id: UUID) -> Event:
        """Persist the session's current document.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        session = await self.open(event_id)
        event = await self._storage.save_design(event_id, session.document)
        logger.info("Design saved", event_id=str(event_id), element_count=len(session.document.elements))
        return event

    def discard(self, event_id: UUID) -> bool:
        """Drop an open session without saving.

        Returns:
            True if a session was open.
        """
        return self._sessions.pop(event_id, None) is not None

    def is_open(self, event_id: UUID) -> bool:
        """Whether an editor session is open for the event."""
        return event_id in self._sessions
