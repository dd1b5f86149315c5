"""daf-invite: a Litestar service for designing event invitations.

The package models an invitation as a design document of positioned text and
image elements over a background and border. It includes the layout engine
that seeds and maintains the default invitation, an editor session with
selection, dragging and undo, storage backends, services, REST API controllers
and a Litestar plugin.

Quick Start:
    >>> from litestar import Litestar
    >>> from daf_invite import InviteConfig, InvitePlugin
    >>>
    >>> app = Litestar(plugins=[InvitePlugin(InviteConfig())])
"""

from __future__ import annotations

from daf_invite.core import (
    Background,
    Border,
    CustomColors,
    DesignDocument,
    DesignElement,
    EditorSession,
    ElementKind,
    ElementStyle,
    Event,
    EventData,
    Position,
    Size,
)
from daf_invite.exceptions import (
    EventNotFoundError,
    InvalidDesignError,
    InvalidUploadError,
    InviteError,
    StorageError,
)
from daf_invite.plugin import InviteConfig, InvitePlugin
from daf_invite.services import DesignerService, EventService, ExportService
from daf_invite.storage import InMemoryStorage, StorageProtocol
from daf_invite.web import create_router

__all__ = [
    "Background",
    "Border",
    "CustomColors",
    "DesignDocument",
    "DesignElement",
    "DesignerService",
    "EditorSession",
    "ElementKind",
    "ElementStyle",
    "Event",
    "EventData",
    "EventNotFoundError",
    "EventService",
    "ExportService",
    "InMemoryStorage",
    "InvalidDesignError",
    "InvalidUploadError",
    "InviteConfig",
    "InviteError",
    "InvitePlugin",
    "Position",
    "Size",
    "StorageError",
    "StorageProtocol",
    "create_router",
]

__version__ = "0.1.0"
