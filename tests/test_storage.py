"""Tests for the storage layer."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from daf_invite.core.layout import seed_document
from daf_invite.core.models import DesignDocument, Event, EventData
from daf_invite.exceptions import EventNotFoundError
from daf_invite.storage.base import StorageProtocol
from daf_invite.storage.memory import InMemoryStorage


@pytest.fixture
def sample_event() -> Event:
    """Create a sample event for testing."""
    return Event(details=EventData(title="Test Event"), created_by_email="organizer@mail.mil")


class TestInMemoryStorage:
    """Tests for InMemoryStorage."""

    def test_implements_protocol(self, storage: InMemoryStorage) -> None:
        """Test that the in-memory backend satisfies StorageProtocol."""
        assert isinstance(storage, StorageProtocol)

    @pytest.mark.asyncio
    async def test_create_and_get_event(self, storage: InMemoryStorage, sample_event: Event) -> None:
        """Test creating and retrieving an event."""
        created = await storage.create_event(sample_event)
        retrieved = await storage.get_event(created.id)
        assert retrieved is not None
        assert retrieved.details.title == "Test Event"
        assert retrieved.created_by_email == "organizer@mail.mil"

    @pytest.mark.asyncio
    async def test_get_missing_event(self, storage: InMemoryStorage) -> None:
        """Test retrieving an event that doesn't exist."""
        assert await storage.get_event(uuid4()) is None

    @pytest.mark.asyncio
    async def test_returns_copies(self, storage: InMemoryStorage, sample_event: Event) -> None:
        """Test that callers cannot mutate stored events."""
        created = await storage.create_event(sample_event)
        created.created_by_email = "someone-else@mail.mil"
        retrieved = await storage.get_event(sample_event.id)
        assert retrieved.created_by_email == "organizer@mail.mil"

    @pytest.mark.asyncio
    async def test_list_newest_first(self, storage: InMemoryStorage) -> None:
        """Test that events are listed newest first."""
        now = datetime.now(UTC)
        old = Event(details=EventData(title="Old"), created_at=now - timedelta(days=1))
        new = Event(details=EventData(title="New"), created_at=now)
        await storage.create_event(old)
        await storage.create_event(new)
        assert [e.details.title for e in await storage.list_events()] == ["New", "Old"]

    @pytest.mark.asyncio
    async def test_update_event(self, storage: InMemoryStorage, sample_event: Event) -> None:
        """Test replacing an event bumps updated_at."""
        created = await storage.create_event(sample_event)
        created.details = EventData(title="Renamed")
        updated = await storage.update_event(created)
        assert updated.details.title == "Renamed"
        assert updated.updated_at >= sample_event.updated_at

    @pytest.mark.asyncio
    async def test_update_missing_event(self, storage: InMemoryStorage, sample_event: Event) -> None:
        """Test updating an event that was never stored."""
        with pytest.raises(EventNotFoundError):
            await storage.update_event(sample_event)

    @pytest.mark.asyncio
    async def test_delete_event(self, storage: InMemoryStorage, sample_event: Event) -> None:
        """Test deleting an event."""
        await storage.create_event(sample_event)
        assert await storage.delete_event(sample_event.id) is True
        assert await storage.delete_event(sample_event.id) is False
        assert await storage.get_event(sample_event.id) is None

    @pytest.mark.asyncio
    async def test_save_design(self, storage: InMemoryStorage, sample_event: Event) -> None:
        """Test storing a design document."""
        await storage.create_event(sample_event)
        design = seed_document(DesignDocument(), sample_event.details)
        saved = await storage.save_design(sample_event.id, design)
        assert saved.design == design
        assert (await storage.get_event(sample_event.id)).design == design

    @pytest.mark.asyncio
    async def test_save_design_last_write_wins(self, storage: InMemoryStorage, sample_event: Event) -> None:
        """Test that a later save replaces an earlier one without merging."""
        await storage.create_event(sample_event)
        await storage.save_design(sample_event.id, DesignDocument(theme="formal"))
        await storage.save_design(sample_event.id, DesignDocument(theme="space-force"))
        assert (await storage.get_event(sample_event.id)).design == DesignDocument(theme="space-force")

    @pytest.mark.asyncio
    async def test_save_design_missing_event(self, storage: InMemoryStorage) -> None:
        """Test saving a design for an unknown event."""
        with pytest.raises(EventNotFoundError):
            await storage.save_design(uuid4(), DesignDocument())
