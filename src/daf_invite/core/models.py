"""Core domain models for the daf-invite invitation designer.

All models are frozen dataclasses. Editing operations never mutate a
document in place; they build a new value with :func:`dataclasses.replace`.
"""

from __future__ import annotations

import secrets
import time
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4

from daf_invite.core.types import BackgroundKind, BorderStyle, ElementKind, TextAlign


@dataclass(frozen=True)
class Position:
    """Percentage coordinates of an element relative to the canvas.

    Attributes:
        x: Horizontal offset from the left edge, 0-100.
        y: Vertical offset from the top edge, 0-100.
    """

    x: float = 50.0
    y: float = 50.0


@dataclass(frozen=True)
class Size:
    """Absolute element dimensions in pixels.

    Attributes:
        width: Width in pixels.
        height: Height in pixels.
    """

    width: float = 200.0
    height: float = 50.0


@dataclass(frozen=True)
class ElementStyle:
    """Visual styling for a design element.

    Every field is optional. Text elements use the typography fields, image
    elements only ``border_radius`` and ``padding``.

    Attributes:
        font_size: Font size in pixels.
        font_family: Font family name.
        color: Text color in hex format.
        font_weight: CSS font weight (``normal``, ``bold``, ``600``...).
        text_align: Horizontal alignment.
        background_color: Element background color or ``transparent``.
        border_radius: Corner radius in pixels.
        padding: Inner padding in pixels.
    """

    font_size: int | None = None
    font_family: str | None = None
    color: str | None = None
    font_weight: str | None = None
    text_align: TextAlign | None = None
    background_color: str | None = None
    border_radius: int | None = None
    padding: int | None = None


@dataclass(frozen=True)
class DesignElement:
    """A positionable text or image block on the invitation canvas.

    Attributes:
        id: Stable identifier, unique within a document.
        kind: Element variant (text or image).
        position: Percentage position on the canvas.
        size: Pixel dimensions.
        style: Styling configuration.
        z_index: Stacking order (higher values paint on top).
        content: Text content, only meaningful for text elements.
        image_data: Data-URI payload, only meaningful for image elements.
    """

    id: str
    kind: ElementKind
    position: Position = field(default_factory=Position)
    size: Size = field(default_factory=Size)
    style: ElementStyle = field(default_factory=ElementStyle)
    z_index: int = 0
    content: str = ""
    image_data: str | None = None


@dataclass(frozen=True)
class Background:
    """Invitation background fill.

    Attributes:
        kind: Fill variant.
        value: Hex color for solid fills or data-URI for image fills.
        gradient_direction: Gradient angle in degrees (0-360).
        gradient_colors: Ordered gradient stops in hex format.
    """

    kind: BackgroundKind = BackgroundKind.SOLID
    value: str = "#ffffff"
    gradient_direction: int = 135
    gradient_colors: tuple[str, ...] = ("#ffffff", "#ffffff")


@dataclass(frozen=True)
class Border:
    """Invitation border.

    Attributes:
        enabled: Whether the border is drawn.
        width: Line width in pixels (1-20).
        color: Primary line color.
        secondary_color: Alternate color for dashed and dotted styles.
        style: Line style.
    """

    enabled: bool = False
    width: int = 4
    color: str = "#002596"
    secondary_color: str | None = None
    style: BorderStyle = BorderStyle.SOLID


@dataclass(frozen=True)
class CustomColors:
    """Named palette used for new elements and decorative accents."""

    primary: str = "#1e293b"
    secondary: str = "#475569"
    accent: str = "#64748b"


@dataclass(frozen=True)
class DesignDocument:
    """The serializable layout of one invitation.

    Attributes:
        elements: Ordered element collection.
        background: Background fill.
        border: Border configuration.
        custom_colors: Palette.
        theme: Name of the selected theme.
    """

    elements: tuple[DesignElement, ...] = ()
    background: Background = field(default_factory=Background)
    border: Border = field(default_factory=Border)
    custom_colors: CustomColors = field(default_factory=CustomColors)
    theme: str = "military"


@dataclass(frozen=True)
class EventData:
    """Event details collected before the design step.

    Dates and times are kept as entered (``YYYY-MM-DD`` and ``HH:MM``).
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


@dataclass
class Event:
    """A stored event with its invitation design.

    Attributes:
        id: Unique identifier for the event.
        details: Event details.
        created_by_email: Email of the organizer that created the event.
        design: Current saved invitation design.
        created_at: Timestamp when the event was created.
        updated_at: Timestamp when the event was last updated.
    """

    details: EventData = field(default_factory=EventData)
    created_by_email: str = ""
    design: DesignDocument = field(default_factory=DesignDocument)
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))


def new_element_id(kind: ElementKind) -> str:
    """Generate an element id from the creation time and a random suffix."""
    return f"{kind.value}-{int(time.time() * 1000)}-{secrets.token_hex(3)}"


def create_text_element(
    content: str = "New Text",
    position: Position | None = None,
    size: Size | None = None,
    style: ElementStyle | None = None,
    z_index: int = 1,
    *,
    palette: CustomColors | None = None,
) -> DesignElement:
    """Create a text element.

    Args:
        content: Text to display.
        position: Percentage position, defaults to the canvas center.
        size: Pixel dimensions, defaults to 200x50.
        style: Styling, defaults to centered 16px Arial.
        z_index: Stacking order.
        palette: Palette whose primary color the default style uses.

    Returns:
        A new text element with a fresh id.
    """
    if style is None:
        style = ElementStyle(
            font_size=16,
            font_family="Arial",
            color=(palette or CustomColors()).primary,
            font_weight="normal",
            text_align=TextAlign.CENTER,
            background_color="transparent",
            border_radius=0,
            padding=8,
        )
    return DesignElement(
        id=new_element_id(ElementKind.TEXT),
        kind=ElementKind.TEXT,
        content=content,
        position=position or Position(50, 50),
        size=size or Size(200, 50),
        style=style,
        z_index=z_index,
    )


def create_image_element(
    image_data: str,
    position: Position | None = None,
    size: Size | None = None,
    z_index: int = 1,
) -> DesignElement:
    """Create an image element from a data-URI payload."""
    return DesignElement(
        id=new_element_id(ElementKind.IMAGE),
        kind=ElementKind.IMAGE,
        image_data=image_data,
        position=position or Position(50, 50),
        size=size or Size(100, 100),
        style=ElementStyle(border_radius=0, padding=0),
        z_index=z_index,
    )
