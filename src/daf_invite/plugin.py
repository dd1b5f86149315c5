"""Litestar plugin for daf-invite integration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from litestar.di import Provide
from litestar.plugins import InitPluginProtocol

from daf_invite.core.error_handling import event_not_found_handler, invalid_design_handler, invalid_upload_handler
from daf_invite.exceptions import EventNotFoundError, InvalidDesignError, InvalidUploadError
from daf_invite.services.designer import DesignerService
from daf_invite.services.events import EventService
from daf_invite.services.export import ExportService
from daf_invite.storage.memory import InMemoryStorage
from daf_invite.web.router import create_router

if TYPE_CHECKING:
    from litestar.config.app import AppConfig

    from daf_invite.storage.base import StorageProtocol


@dataclass
class InviteConfig:
    """Configuration for the invite plugin.

    Attributes:
        storage: Storage backend for events. If None, InMemoryStorage is used.
        enable_api: Whether to mount the REST API routes. Defaults to True.
        api_path: Base path for mounting API routes. Defaults to "/api".
        rsvp_base_url: Public origin used to build RSVP links.
        max_history: Maximum undo history per editor session.
        event_dependency_key: Dependency injection key for EventService.
        designer_dependency_key: Dependency injection key for DesignerService.

    Example:
        >>> config = InviteConfig(api_path="/api/v1", rsvp_base_url="https://invites.example.mil")
    """

    storage: StorageProtocol | None = None
    enable_api: bool = True
    api_path: str = "/api"
    rsvp_base_url: str = "https://daf-invite.app"
    max_history: int = 100
    event_dependency_key: str = "event_service"
    designer_dependency_key: str = "designer_service"


class InvitePlugin(InitPluginProtocol):
    """Litestar plugin wiring the invitation services into an application.

    The plugin creates the storage backend and services, registers them for
    dependency injection, maps the domain exceptions onto JSON error responses
    (unless the application already handles them), and mounts the API router.

    Example:
        >>> from litestar import Litestar
        >>> from daf_invite import InviteConfig, InvitePlugin
        >>>
        >>> app = Litestar(plugins=[InvitePlugin(InviteConfig())])

        Accessing a service in route handlers:

        >>> from litestar import get
        >>> from daf_invite.services.events import EventService
        >>>
        >>> @get("/count")
        ... async def count_events(event_service: EventService) -> dict:
        ...     return {"count": len(await event_service.list_events())}
    """

    def __init__(self, config: InviteConfig | None = None) -> None:
        """Initialize the plugin with optional configuration.

        Args:
            config: Plugin configuration. If None, InviteConfig defaults are used.
        """
        self._config = config or InviteConfig()
        self._storage: StorageProtocol | None = None
        self._event_service: EventService | None = None
        self._designer_service: DesignerService | None = None
        self._export_service: ExportService | None = None

    def on_app_init(self, app_config: AppConfig) -> AppConfig:
        """Set up storage, services, exception handlers and routes.

        Args:
            app_config: The Litestar application configuration object.

        Returns:
            The modified application configuration.
        """
        self._storage = self._config.storage or InMemoryStorage()
        self._event_service = EventService(self._storage, rsvp_base_url=self._config.rsvp_base_url)
        self._designer_service = DesignerService(self._storage, max_history=self._config.max_history)
        self._export_service = ExportService()

        def provide_event_service() -> EventService:
            """Dependency provider for EventService."""
            if self._event_service is None:
                msg = "Event service not initialized"
                raise RuntimeError(msg)
            return self._event_service

        def provide_designer_service() -> DesignerService:
            """Dependency provider for DesignerService."""
            if self._designer_service is None:
                msg = "Designer service not initialized"
                raise RuntimeError(msg)
            return self._designer_service

        def provide_export_service() -> ExportService:
            """Dependency provider for ExportService."""
            if self._export_service is None:
                msg = "Export service not initialized"
                raise RuntimeError(msg)
            return self._export_service

        app_config.dependencies[self._config.event_dependency_key] = Provide(
            provide_event_service,
            sync_to_thread=False,
        )
        app_config.dependencies[self._config.designer_dependency_key] = Provide(
            provide_designer_service,
            sync_to_thread=False,
        )
        app_config.dependencies["export_service"] = Provide(
            provide_export_service,
            sync_to_thread=False,
        )

        app_config.exception_handlers.setdefault(EventNotFoundError, event_not_found_handler)
        app_config.exception_handlers.setdefault(InvalidDesignError, invalid_design_handler)
        app_config.exception_handlers.setdefault(InvalidUploadError, invalid_upload_handler)

        if self._config.enable_api:
            app_config.route_handlers.append(create_router(path=self._config.api_path))

        return app_config

    @property
    def storage(self) -> StorageProtocol:
        """Get the initialized storage backend.

        Raises:
            RuntimeError: If on_app_init has not run yet.
        """
        if self._storage is None:
            msg = "Plugin not initialized. Call on_app_init first."
            raise RuntimeError(msg)
        return self._storage

    @property
    def event_service(self) -> EventService:
        """Get the initialized event service.

        Raises:
            RuntimeError: If on_app_init has not run yet.
        """
        if self._event_service is None:
            msg = "Plugin not initialized. Call on_app_init first."
            raise RuntimeError(msg)
        return self._event_service

    @property
    def designer_service(self) -> DesignerService:
        """Get the initialized designer service.

        Raises:
            RuntimeError: If on_app_init has not run yet.
        """
        if self._designer_service is None:
            msg = "Plugin not initialized. Call on_app_init first."
            raise RuntimeError(msg)
        return self._designer_service
