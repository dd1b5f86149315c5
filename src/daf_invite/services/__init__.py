"""Business logic services for daf-invite."""

from daf_invite.services.designer import DesignerService
from daf_invite.services.events import EventService
from daf_invite.services.export import ExportService

__all__ = ["DesignerService", "EventService", "ExportService"]
