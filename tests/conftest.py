"""Pytest configuration and fixtures for daf-invite tests."""

from __future__ import annotations

import pytest
from litestar import Litestar
from litestar.testing import TestClient

from daf_invite.core.error_handling import get_exception_handlers
from daf_invite.core.layout import CanvasRect
from daf_invite.core.models import DesignDocument, EventData
from daf_invite.core.session import EditorSession
from daf_invite.plugin import InviteConfig, InvitePlugin
from daf_invite.services.export import ExportService
from daf_invite.storage.memory import InMemoryStorage


# Storage fixtures


@pytest.fixture
def storage() -> InMemoryStorage:
    """Create a fresh InMemoryStorage instance for each test."""
    return InMemoryStorage()


# Model fixtures


@pytest.fixture
def event_data() -> EventData:
    """Create fully populated event details."""
    return EventData(
        title="Dining Out",
        description="Annual formal dinner",
        event_date="2025-07-04",
        event_time="14:30",
        location="Officers Club",
        contact_name="Capt Smith",
        contact_email="smith@mail.mil",
        contact_phone="(555) 000-1111",
        dresscode="Mess Dress",
        notes="Arrive early",
    )


@pytest.fixture
def seeded_session(event_data: EventData) -> EditorSession:
    """Create an editor session seeded with the default layout."""
    session = EditorSession(DesignDocument())
    session.initialize(event_data)
    return session


@pytest.fixture
def canvas() -> CanvasRect:
    """Create a 400x600 canvas rect offset from the viewport origin."""
    return CanvasRect(left=100, top=50, width=400, height=600)


@pytest.fixture
def export_service() -> ExportService:
    """Create an ExportService instance."""
    return ExportService()


# App and client fixtures


@pytest.fixture
def app() -> Litestar:
    """Create a Litestar app with InvitePlugin for testing."""
    return Litestar(
        plugins=[InvitePlugin(InviteConfig(rsvp_base_url="https://invites.test"))],
        exception_handlers=get_exception_handlers(),
    )


@pytest.fixture
def client(app: Litestar) -> TestClient[Litestar]:
    """Create a test client for the app."""
    return TestClient(app=app)
