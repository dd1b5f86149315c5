"""Litestar controllers for daf-invite API endpoints."""

from __future__ import annotations

from typing import Annotated, Any, ClassVar
from uuid import UUID

from litestar import Controller, delete, get, patch, post, put
from litestar.datastructures import UploadFile
from litestar.enums import RequestEncodingType
from litestar.exceptions import ValidationException
from litestar.params import Body
from litestar.status_codes import HTTP_200_OK, HTTP_204_NO_CONTENT

from daf_invite.core.document import find_element
from daf_invite.core.types import FONT_WEIGHTS, FONTS, THEMES, BackgroundKind, BorderStyle
from daf_invite.exceptions import EventNotFoundError
from daf_invite.services.designer import DesignerService
from daf_invite.services.events import EventService
from daf_invite.services.export import ExportService
from daf_invite.services.uploads import read_upload_as_data_uri
from daf_invite.web.dto import (
    AddTextDTO,
    BackgroundDTO,
    BorderDTO,
    CreateEventDTO,
    DesignOptionsDTO,
    DesignResponseDTO,
    EventResponseDTO,
    GradientStopDTO,
    PaletteDTO,
    SetColorDTO,
    ThemeDTO,
    UpdateElementDTO,
    UpdateEventDTO,
    color_target_from_dto,
    details_from_dto,
    element_changes_from_dto,
    event_to_response,
    provided,
    session_to_response,
)

MultipartUpload = Annotated[UploadFile, Body(media_type=RequestEncodingType.MULTI_PART)]


class EventController(Controller):
    """Controller for event records.

    Events hold the invitation details and the last saved design.
    """

    path = "/events"
    tags: ClassVar[list[str]] = ["Events"]

    @post("/")
    async def create_event(self, data: CreateEventDTO, event_service: EventService) -> EventResponseDTO:
        """Create a new event.

        Args:
            data: The event details.
            event_service: The event service instance (injected).

        Returns:
            The created event.
        """
        event = await event_service.create_event(details_from_dto(data), created_by_email=data.created_by_email)
        return event_to_response(event, event_service.rsvp_link(event.id))

    @get("/")
    async def list_events(self, event_service: EventService) -> list[EventResponseDTO]:
        """List all events, newest first."""
        events = await event_service.list_events()
        return [event_to_response(e, event_service.rsvp_link(e.id)) for e in events]

    @get("/{event_id:uuid}")
    async def get_event(self, event_id: UUID, event_service: EventService) -> EventResponseDTO:
        """Get an event.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        event = await event_service.get_event(event_id)
        return event_to_response(event, event_service.rsvp_link(event.id))

    @patch("/{event_id:uuid}")
    async def update_event(
        self,
        event_id: UUID,
        data: UpdateEventDTO,
        event_service: EventService,
        designer_service: DesignerService,
    ) -> EventResponseDTO:
        """Update event details.

        Only provided fields are updated. An open design session picks up the
        new details in its bound elements.

        Args:
            event_id: The unique identifier of the event.
            data: The fields to update.
            event_service: The event service instance (injected).
            designer_service: The designer service instance (injected).

        Returns:
            The updated event.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        event = await event_service.update_details(event_id, **provided(data))
        designer_service.sync_event(event)
        return event_to_response(event, event_service.rsvp_link(event.id))

    @delete("/{event_id:uuid}", status_code=HTTP_204_NO_CONTENT)
    async def delete_event(
        self,
        event_id: UUID,
        event_service: EventService,
        designer_service: DesignerService,
    ) -> None:
        """Delete an event and drop any open design session.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        deleted = await event_service.delete_event(event_id)
        if not deleted:
            raise EventNotFoundError(event_id)
        designer_service.discard(event_id)


class DesignController(Controller):
    """Controller for the invitation designer.

    Every endpoint works on the event's editor session and returns the working
    design. Nothing is persisted until ``POST /save``. Element endpoints given
    an unknown element id leave the design unchanged.
    """

    path = "/events/{event_id:uuid}/design"
    tags: ClassVar[list[str]] = ["Design"]

    @get("/")
    async def get_design(
        self,
        event_id: UUID,
        designer_service: DesignerService,
        export_service: ExportService,
    ) -> DesignResponseDTO:
        """Open the designer for an event.

        The first time an event with an empty design is opened, the default
        invitation layout is generated from the event details.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        session = await designer_service.open(event_id)
        return session_to_response(event_id, session, export_service)

    @put("/")
    async def replace_design(
        self,
        event_id: UUID,
        data: dict[str, Any],
        designer_service: DesignerService,
        export_service: ExportService,
    ) -> DesignResponseDTO:
        """Replace the working design with a full document.

        Raises:
            EventNotFoundError: If the event does not exist.
            InvalidDesignError: If the document is malformed.
        """
        session = await designer_service.open(event_id)
        session.replace_document(export_service.from_dict(data))
        return session_to_response(event_id, session, export_service)

    @post("/save", status_code=HTTP_200_OK)
    async def save_design(
        self,
        event_id: UUID,
        designer_service: DesignerService,
        event_service: EventService,
    ) -> EventResponseDTO:
        """Persist the working design onto the event."""
        event = await designer_service.save(event_id)
        return event_to_response(event, event_service.rsvp_link(event.id))

    @delete("/", status_code=HTTP_204_NO_CONTENT)
    async def discard_design(self, event_id: UUID, designer_service: DesignerService) -> None:
        """Drop unsaved changes by closing the editor session."""
        designer_service.discard(event_id)

    # Elements

    @post("/elements/text")
    async def add_text(
        self,
        event_id: UUID,
        data: AddTextDTO,
        designer_service: DesignerService,
        export_service: ExportService,
    ) -> DesignResponseDTO:
        """Add a text element at the canvas center, above everything else."""
        session = await designer_service.open(event_id)
        element = session.add_text(data.content)
        session.select(element.id)
        return session_to_response(event_id, session, export_service)

    @post("/elements/image")
    async def add_image(
        self,
        event_id: UUID,
        data: MultipartUpload,
        designer_service: DesignerService,
        export_service: ExportService,
    ) -> DesignResponseDTO:
        """Upload an image and add it as an element.

        Raises:
            InvalidUploadError: If the file is not an accepted image.
        """
        session = await designer_service.open(event_id)
        data_uri = await read_upload_as_data_uri(data)
        element = session.add_image(data_uri)
        session.select(element.id)
        return session_to_response(event_id, session, export_service)

    @patch("/elements/{element_id:str}")
    async def update_element(
        self,
        event_id: UUID,
        element_id: str,
        data: UpdateElementDTO,
        designer_service: DesignerService,
        export_service: ExportService,
    ) -> DesignResponseDTO:
        """Apply a partial update to an element.

        Positions are clamped to the canvas and sizes to at least one pixel.
        """
        session = await designer_service.open(event_id)
        element = find_element(session.document, element_id)
        if element is not None:
            changes = element_changes_from_dto(element, data)
            if changes:
                session.update_element(element_id, **changes)
        return session_to_response(event_id, session, export_service)

    @delete("/elements/{element_id:str}", status_code=HTTP_200_OK)
    async def delete_element(
        self,
        event_id: UUID,
        element_id: str,
        designer_service: DesignerService,
        export_service: ExportService,
    ) -> DesignResponseDTO:
        """Delete an element."""
        session = await designer_service.open(event_id)
        session.delete_element(element_id)
        return session_to_response(event_id, session, export_service)

    # Layout

    @post("/layout/center-all", status_code=HTTP_200_OK)
    async def center_all(
        self,
        event_id: UUID,
        designer_service: DesignerService,
        export_service: ExportService,
    ) -> DesignResponseDTO:
        """Center every element horizontally."""
        session = await designer_service.open(event_id)
        session.center_all()
        return session_to_response(event_id, session, export_service)

    @post("/layout/snap-to-fit", status_code=HTTP_200_OK)
    async def snap_to_fit(
        self,
        event_id: UUID,
        designer_service: DesignerService,
        export_service: ExportService,
    ) -> DesignResponseDTO:
        """Pull every element back inside the canvas margins."""
        session = await designer_service.open(event_id)
        session.snap_to_fit()
        return session_to_response(event_id, session, export_service)

    # Background, border and colors

    @patch("/background")
    async def update_background(
        self,
        event_id: UUID,
        data: BackgroundDTO,
        designer_service: DesignerService,
        export_service: ExportService,
    ) -> DesignResponseDTO:
        """Update the background."""
        session = await designer_service.open(event_id)
        changes = provided(data)
        if changes:
            session.set_background(**changes)
        return session_to_response(event_id, session, export_service)

    @post("/background/gradient-stops", status_code=HTTP_200_OK)
    async def add_gradient_stop(
        self,
        event_id: UUID,
        data: GradientStopDTO,
        designer_service: DesignerService,
        export_service: ExportService,
    ) -> DesignResponseDTO:
        """Append a color stop to the background gradient."""
        session = await designer_service.open(event_id)
        session.add_gradient_color(data.color)
        return session_to_response(event_id, session, export_service)

    @post("/background/image", status_code=HTTP_200_OK)
    async def upload_background_image(
        self,
        event_id: UUID,
        data: MultipartUpload,
        designer_service: DesignerService,
        export_service: ExportService,
    ) -> DesignResponseDTO:
        """Upload an image and use it as the background.

        Raises:
            InvalidUploadError: If the file is not an accepted image.
        """
        session = await designer_service.open(event_id)
        session.set_background_image(await read_upload_as_data_uri(data))
        return session_to_response(event_id, session, export_service)

    @delete("/background/image", status_code=HTTP_200_OK)
    async def remove_background_image(
        self,
        event_id: UUID,
        designer_service: DesignerService,
        export_service: ExportService,
    ) -> DesignResponseDTO:
        """Remove the background image and fall back to solid white."""
        session = await designer_service.open(event_id)
        session.remove_background_image()
        return session_to_response(event_id, session, export_service)

    @patch("/border")
    async def update_border(
        self,
        event_id: UUID,
        data: BorderDTO,
        designer_service: DesignerService,
        export_service: ExportService,
    ) -> DesignResponseDTO:
        """Update the border."""
        session = await designer_service.open(event_id)
        changes = provided(data)
        if changes:
            session.set_border(**changes)
        return session_to_response(event_id, session, export_service)

    @patch("/palette")
    async def update_palette(
        self,
        event_id: UUID,
        data: PaletteDTO,
        designer_service: DesignerService,
        export_service: ExportService,
    ) -> DesignResponseDTO:
        """Update the custom color palette."""
        session = await designer_service.open(event_id)
        changes = provided(data)
        if changes:
            session.set_custom_colors(**changes)
        return session_to_response(event_id, session, export_service)

    @put("/theme")
    async def set_theme(
        self,
        event_id: UUID,
        data: ThemeDTO,
        designer_service: DesignerService,
        export_service: ExportService,
    ) -> DesignResponseDTO:
        """Select the invitation theme."""
        session = await designer_service.open(event_id)
        session.set_theme(data.theme)
        return session_to_response(event_id, session, export_service)

    @post("/colors", status_code=HTTP_200_OK)
    async def set_color(
        self,
        event_id: UUID,
        data: SetColorDTO,
        designer_service: DesignerService,
        export_service: ExportService,
    ) -> DesignResponseDTO:
        """Apply a color picker change to one color slot.

        Raises:
            ValidationException: If the target is missing a required qualifier.
        """
        try:
            target = color_target_from_dto(data)
        except ValueError as exc:
            raise ValidationException(detail=str(exc)) from exc
        session = await designer_service.open(event_id)
        session.set_color(target, data.color)
        return session_to_response(event_id, session, export_service)

    # History

    @post("/undo", status_code=HTTP_200_OK)
    async def undo(
        self,
        event_id: UUID,
        designer_service: DesignerService,
        export_service: ExportService,
    ) -> DesignResponseDTO:
        """Revert the last edit."""
        session = await designer_service.open(event_id)
        session.undo()
        return session_to_response(event_id, session, export_service)

    @post("/redo", status_code=HTTP_200_OK)
    async def redo(
        self,
        event_id: UUID,
        designer_service: DesignerService,
        export_service: ExportService,
    ) -> DesignResponseDTO:
        """Re-apply the last undone edit."""
        session = await designer_service.open(event_id)
        session.redo()
        return session_to_response(event_id, session, export_service)

    # Rendering

    @get("/preview")
    async def preview(
        self,
        event_id: UUID,
        designer_service: DesignerService,
        export_service: ExportService,
    ) -> dict[str, Any]:
        """Canvas CSS and the elements in paint order."""
        session = await designer_service.open(event_id)
        return export_service.preview(session.document)


class DesignOptionsController(Controller):
    """Controller exposing the editor's font, weight and theme catalogues."""

    path = "/design-options"
    tags: ClassVar[list[str]] = ["Design"]

    @get("/")
    async def get_options(self) -> DesignOptionsDTO:
        """List the choices offered by the designer controls."""
        return DesignOptionsDTO(
            fonts=list(FONTS),
            font_weights=list(FONT_WEIGHTS),
            themes=list(THEMES),
            background_kinds=[kind.value for kind in BackgroundKind],
            border_styles=[style.value for style in BorderStyle],
        )
