"""Router configuration for the daf-invite API."""

from __future__ import annotations

from litestar import Router

from daf_invite.web.controllers import DesignController, DesignOptionsController, EventController


def create_router(path: str = "/api") -> Router:
    """Create the daf-invite API router.

    Args:
        path: The base path for all API routes. Defaults to "/api".

    Returns:
        A configured Litestar Router instance.

    Example:
        >>> router = create_router("/api/v1")
    """
    return Router(
        path=path,
        route_handlers=[EventController, DesignController, DesignOptionsController],
    )
