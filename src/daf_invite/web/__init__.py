"""Web layer for the daf-invite API."""

from daf_invite.web.controllers import DesignController, DesignOptionsController, EventController
from daf_invite.web.health import HealthController
from daf_invite.web.router import create_router

__all__ = ["DesignController", "DesignOptionsController", "EventController", "HealthController", "create_router"]
