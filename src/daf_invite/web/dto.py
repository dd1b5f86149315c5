"""Data Transfer Objects (DTOs) for the daf-invite API."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import TYPE_CHECKING, Any, Literal
from uuid import UUID

from daf_invite.core.colors import (
    BackgroundColorTarget,
    BorderColorField,
    BorderColorTarget,
    ElementColorField,
    ElementColorTarget,
    GradientStopTarget,
    PaletteColorTarget,
    PaletteKey,
)
from daf_invite.core.layout import format_event_datetime
from daf_invite.core.models import EventData, Position, Size
from daf_invite.core.types import BackgroundKind, BorderStyle, TextAlign

if TYPE_CHECKING:
    from daf_invite.core.colors import ColorTarget
    from daf_invite.core.models import DesignElement, Event
    from daf_invite.core.session import EditorSession
    from daf_invite.services.export import ExportService


# Event DTOs


@dataclass
class CreateEventDTO:
    """DTO for creating an event.

    Dates use ``YYYY-MM-DD`` and times ``HH:MM``.
    """

    title: str = ""
    description: str = ""
    event_date: str = ""
    event_time: str = ""
    location: str = ""
    contact_name: str = ""
    contact_email: str = ""
    contact_phone: str = ""
    dresscode: str = ""
    notes: str = ""
    created_by_email: str = ""


@dataclass
class UpdateEventDTO:
    """DTO for updating event details. Only provided fields are updated."""

    title: str | None = None
    description: str | None = None
    event_date: str | None = None
    event_time: str | None = None
    location: str | None = None
    contact_name: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    dresscode: str | None = None
    notes: str | None = None


@dataclass
class EventResponseDTO:
    """DTO for event responses.

    Attributes:
        id: Unique identifier for the event.
        details: Event details.
        created_by_email: Organizer email.
        rsvp_link: Public RSVP link.
        formatted_datetime: Display form of the event date and time.
        element_count: Number of elements in the saved design.
        created_at: Timestamp when the event was created.
        updated_at: Timestamp when the event was last updated.
    """

    id: UUID
    details: dict[str, str]
    created_by_email: str
    rsvp_link: str
    formatted_datetime: str
    element_count: int
    created_at: datetime
    updated_at: datetime


# Design DTOs


@dataclass
class DesignResponseDTO:
    """DTO for the working design of an editor session.

    Attributes:
        event_id: Event the design belongs to.
        design: The design document in its persisted JSON layout.
        can_undo: Whether an undo step is available.
        can_redo: Whether a redo step is available.
    """

    event_id: UUID
    design: dict[str, Any]
    can_undo: bool
    can_redo: bool


@dataclass
class AddTextDTO:
    """DTO for adding a text element."""

    content: str = "New Text"


@dataclass
class StyleDTO:
    """DTO for partial element style updates. Unset fields are left alone."""

    font_size: int | None = None
    font_family: str | None = None
    color: str | None = None
    font_weight: str | None = None
    text_align: TextAlign | None = None
    background_color: str | None = None
    border_radius: int | None = None
    padding: int | None = None


@dataclass
class UpdateElementDTO:
    """DTO for partial element updates.

    Attributes:
        content: New text content.
        x: New horizontal position in percent.
        y: New vertical position in percent.
        width: New width in pixels.
        height: New height in pixels.
        z_index: New stacking order.
        style: Style fields to merge.
    """

    content: str | None = None
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    z_index: int | None = None
    style: StyleDTO | None = None


@dataclass
class BackgroundDTO:
    """DTO for background updates."""

    kind: BackgroundKind | None = None
    value: str | None = None
    gradient_direction: int | None = None
    gradient_colors: list[str] | None = None


@dataclass
class GradientStopDTO:
    """DTO for appending a gradient stop."""

    color: str = "#ffffff"


@dataclass
class BorderDTO:
    """DTO for border updates."""

    enabled: bool | None = None
    width: int | None = None
    color: str | None = None
    secondary_color: str | None = None
    style: BorderStyle | None = None


@dataclass
class PaletteDTO:
    """DTO for palette updates."""

    primary: str | None = None
    secondary: str | None = None
    accent: str | None = None


@dataclass
class ThemeDTO:
    """DTO for theme selection."""

    theme: str


@dataclass
class SetColorDTO:
    """DTO for a color picker change.

    ``target`` selects the slot; the other fields qualify it:
    ``element`` uses ``element_id`` and ``field`` (text/background),
    ``border`` uses ``field`` (primary/secondary), ``gradient`` uses ``index``,
    ``palette`` uses ``key``.
    """

    target: Literal["element", "border", "background", "gradient", "palette"]
    color: str
    element_id: str | None = None
    field: str | None = None
    index: int | None = None
    key: PaletteKey | None = None


@dataclass
class DesignOptionsDTO:
    """DTO listing the editor catalogues."""

    fonts: list[str] = field(default_factory=list)
    font_weights: list[str] = field(default_factory=list)
    themes: list[str] = field(default_factory=list)
    background_kinds: list[str] = field(default_factory=list)
    border_styles: list[str] = field(default_factory=list)


# Conversion helpers


def details_from_dto(data: CreateEventDTO) -> EventData:
    """Convert a create DTO to event details."""
    return EventData(
        title=data.title,
        description=data.description,
        event_date=data.event_date,
        event_time=data.event_time,
        location=data.location,
        contact_name=data.contact_name,
        contact_email=data.contact_email,
        contact_phone=data.contact_phone,
        dresscode=data.dresscode,
        notes=data.notes,
    )


def event_to_response(event: Event, rsvp_link: str) -> EventResponseDTO:
    """Convert an event to a response DTO."""
    details = event.details
    return EventResponseDTO(
        id=event.id,
        details={name: getattr(details, name) for name in details.__dataclass_fields__},
        created_by_email=event.created_by_email,
        rsvp_link=rsvp_link,
        formatted_datetime=format_event_datetime(details.event_date, details.event_time),
        element_count=len(event.design.elements),
        created_at=event.created_at,
        updated_at=event.updated_at,
    )


def session_to_response(event_id: UUID, session: EditorSession, export: ExportService) -> DesignResponseDTO:
    """Convert an editor session to a design response DTO."""
    return DesignResponseDTO(
        event_id=event_id,
        design=export.to_dict(session.document),
        can_undo=session.history.can_undo(),
        can_redo=session.history.can_redo(),
    )


def provided(data: Any) -> dict[str, Any]:
    """Return the fields of a partial-update DTO that are not None."""
    return {name: value for name, value in data.__dict__.items() if value is not None}


def element_changes_from_dto(element: DesignElement, data: UpdateElementDTO) -> dict[str, Any]:
    """Translate a partial element update into element field changes."""
    changes: dict[str, Any] = {}
    if data.content is not None:
        changes["content"] = data.content
    if data.x is not None or data.y is not None:
        changes["position"] = Position(
            element.position.x if data.x is None else data.x,
            element.position.y if data.y is None else data.y,
        )
    if data.width is not None or data.height is not None:
        changes["size"] = Size(
            element.size.width if data.width is None else data.width,
            element.size.height if data.height is None else data.height,
        )
    if data.z_index is not None:
        changes["z_index"] = data.z_index
    if data.style is not None:
        style_changes = provided(data.style)
        if style_changes:
            changes["style"] = replace(element.style, **style_changes)
    return changes


def color_target_from_dto(data: SetColorDTO) -> ColorTarget:
    """Build a color picker target from its wire form.

    Raises:
        ValueError: If a qualifier required by the target is missing or invalid.
    """
    if data.target == "element":
        if not data.element_id:
            msg = "element_id is required for element colors"
            raise ValueError(msg)
        return ElementColorTarget(data.element_id, ElementColorField(data.field or ElementColorField.TEXT))
    if data.target == "border":
        return BorderColorTarget(BorderColorField(data.field or BorderColorField.PRIMARY))
    if data.target == "gradient":
        if data.index is None:
            msg = "index is required for gradient colors"
            raise ValueError(msg)
        return GradientStopTarget(data.index)
    if data.target == "palette":
        if data.key is None:
            msg = "key is required for palette colors"
            raise ValueError(msg)
        return PaletteColorTarget(data.key)
    return BackgroundColorTarget()
