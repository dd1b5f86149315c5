"""Main Litestar application for daf-invite.

This module provides the main application factory and configured app instance
for running daf-invite as a standalone application.
"""

from __future__ import annotations

import os

from litestar import Litestar
from litestar.openapi import OpenAPIConfig

from daf_invite.cli import InviteCLIPlugin
from daf_invite.core.error_handling import get_exception_handlers
from daf_invite.core.logging import CorrelationIdMiddleware, RequestLoggingMiddleware, configure_logging
from daf_invite.core.openapi import get_openapi_plugins
from daf_invite.plugin import InviteConfig, InvitePlugin
from daf_invite.web.health import HealthController

DEFAULT_RSVP_BASE_URL = "https://daf-invite.app"


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("true", "1", "yes")


def create_app(
    *,
    enable_api: bool = True,
    debug: bool = False,
    json_logs: bool = False,
    rsvp_base_url: str = DEFAULT_RSVP_BASE_URL,
) -> Litestar:
    """Create and configure the Litestar application.

    Args:
        enable_api: Whether to enable the REST API routes.
        debug: Whether to enable debug mode.
        json_logs: Whether to output logs as JSON (for production).
        rsvp_base_url: Public origin used to build RSVP links.

    Returns:
        Configured Litestar application instance.
    """
    configure_logging(debug=debug, json_logs=json_logs)

    return Litestar(
        route_handlers=[HealthController],
        plugins=[
            InviteCLIPlugin(),
            InvitePlugin(InviteConfig(enable_api=enable_api, api_path="/api", rsvp_base_url=rsvp_base_url)),
        ],
        debug=debug,
        middleware=[CorrelationIdMiddleware, RequestLoggingMiddleware],
        exception_handlers=get_exception_handlers(),
        openapi_config=OpenAPIConfig(
            title="daf-invite API",
            version="0.1.0",
            description="Event invitation designer API",
            path="/schema",
            render_plugins=get_openapi_plugins(),
            use_handler_docstrings=True,
        ),
    )


# Default application instance for uvicorn
# Use DAF_INVITE_DEBUG=true for dev mode, DAF_INVITE_JSON_LOGS=true for JSON logs
app = create_app(
    debug=_env_flag("DAF_INVITE_DEBUG"),
    json_logs=_env_flag("DAF_INVITE_JSON_LOGS"),
    rsvp_base_url=os.environ.get("DAF_INVITE_RSVP_BASE_URL", DEFAULT_RSVP_BASE_URL),
)
