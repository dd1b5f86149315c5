"""Layout engine for invitation designs.

Pure functions that synthesize the default element arrangement from event
details, push changed event details into bound elements, and apply bounded
transforms (move, resize, restyle, center, snap, drag). None of them raise
for unknown element ids; such calls return the document unchanged.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime
from typing import TYPE_CHECKING, Any

from daf_invite.core.document import find_element, with_element
from daf_invite.core.models import (
    Background,
    CustomColors,
    DesignElement,
    ElementStyle,
    Position,
    Size,
)
from daf_invite.core.types import BackgroundKind, ElementKind, TextAlign

if TYPE_CHECKING:
    from daf_invite.core.models import DesignDocument, EventData

DRAG_MIN = 0.0
DRAG_MAX = 85.0
SNAP_MIN = 5.0
SNAP_MAX = 85.0
MIN_ELEMENT_SIZE = 1.0


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``."""
    return max(low, min(high, value))


def format_event_datetime(date: str, time: str) -> str:
    """Format an event date and time for display.

    ``("2025-07-04", "14:30")`` becomes ``"Friday, July 4, 2025 at 2:30 PM"``.
    An empty date yields an empty string. A missing or unreadable time yields
    the date part only, and an unreadable date is returned as entered.
    """
    if not date:
        return ""
    try:
        day = datetime.strptime(date.strip(), "%Y-%m-%d")
    except ValueError:
        return date

    date_part = f"{day:%A}, {day:%B} {day.day}, {day.year}"
    clock = _parse_time(time)
    if clock is None:
        return date_part
    hour, minute = clock
    meridiem = "AM" if hour < 12 else "PM"
    return f"{date_part} at {hour % 12 or 12}:{minute:02d} {meridiem}"


def _parse_time(time: str) -> tuple[int, int] | None:
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            parsed = datetime.strptime(time.strip(), fmt)
        except (AttributeError, ValueError):
            continue
        return parsed.hour, parsed.minute
    return None


def _contact_block(event: EventData) -> str:
    return "\n".join(
        (
            f"POC: {event.contact_name or 'Contact Name'}",
            event.contact_email or "email@mail.mil",
            event.contact_phone or "(555) 123-4567",
        )
    )


@dataclass(frozen=True)
class BoundSlot:
    """Template for one element bound to an event field.

    Attributes:
        element_id: Reserved element id.
        render: Computes the element content from event details.
        y: Vertical position in percent.
        width: Width in pixels.
        height: Height in pixels.
        font_size: Font size in pixels.
        font_family: Font family name.
        font_weight: CSS font weight.
        tone: Palette key providing the text color.
        z_index: Stacking order.
    """

    element_id: str
    render: Callable[[EventData], str]
    y: float
    width: float
    height: float
    font_size: int
    font_family: str
    font_weight: str
    tone: str
    z_index: int

    def build(self, event: EventData, colors: CustomColors) -> DesignElement:
        """Build the default element for this slot."""
        return DesignElement(
            id=self.element_id,
            kind=ElementKind.TEXT,
            content=self.render(event),
            position=Position(50, self.y),
            size=Size(self.width, self.height),
            style=ElementStyle(
                font_size=self.font_size,
                font_family=self.font_family,
                color=getattr(colors, self.tone),
                font_weight=self.font_weight,
                text_align=TextAlign.CENTER,
                background_color="transparent",
                border_radius=0,
                padding=8,
            ),
            z_index=self.z_index,
        )


BOUND_SLOTS: tuple[BoundSlot, ...] = (
    BoundSlot("title", lambda e: e.title or "EVENT TITLE", 5, 350, 50, 28, "Georgia", "bold", "primary", 10),
    BoundSlot(
        "description",
        lambda e: e.description or "Event Description",
        15,
        320,
        40,
        14,
        "Arial",
        "normal",
        "secondary",
        9,
    ),
    BoundSlot(
        "datetime",
        lambda e: format_event_datetime(e.event_date, e.event_time),
        25,
        300,
        30,
        16,
        "Arial",
        "600",
        "primary",
        8,
    ),
    BoundSlot("location", lambda e: e.location or "Event Location", 35, 280, 25, 14, "Arial", "normal", "primary", 7),
    BoundSlot(
        "dresscode",
        lambda e: f"Dress Code: {e.dresscode}" if e.dresscode else "",
        45,
        250,
        25,
        13,
        "Arial",
        "normal",
        "accent",
        6,
    ),
    BoundSlot("notes", lambda e: e.notes or "", 55, 320, 40, 12, "Arial", "normal", "accent", 5),
    BoundSlot("contact", _contact_block, 75, 280, 60, 12, "Arial", "normal", "secondary", 4),
)

BOUND_IDS: frozenset[str] = frozenset(slot.element_id for slot in BOUND_SLOTS)

_SLOTS_BY_ID = {slot.element_id: slot for slot in BOUND_SLOTS}


def bound_content(element_id: str, event: EventData) -> str | None:
    """Return the content a bound element would have, or None if unbound."""
    slot = _SLOTS_BY_ID.get(element_id)
    return slot.render(event) if slot else None


def synthesize_default_elements(
    event: EventData,
    custom_colors: CustomColors | None = None,
) -> tuple[DesignElement, ...]:
    """Produce the canonical default arrangement for an event.

    Args:
        event: Event details supplying the element contents.
        custom_colors: Palette for text colors. The default palette reproduces
            the stock slate tones.

    Returns:
        Title, description, date/time, location, dress code, notes and contact
        elements, in that order.
    """
    colors = custom_colors or CustomColors()
    return tuple(slot.build(event, colors) for slot in BOUND_SLOTS)


def seed_document(doc: DesignDocument, event: EventData) -> DesignDocument:
    """Fill an empty document with the default elements and a white background."""
    return replace(
        doc,
        elements=synthesize_default_elements(event, doc.custom_colors),
        background=Background(
            kind=BackgroundKind.SOLID,
            value="#ffffff",
            gradient_direction=135,
            gradient_colors=("#ffffff", "#ffffff"),
        ),
    )


def reconcile_bound_elements(doc: DesignDocument, event: EventData) -> DesignDocument:
    """Push current event details into the content of bound elements.

    Only ``content`` is replaced; position, size and style are preserved.
    Content typed by hand into a bound element is overwritten as soon as it
    differs from what the event details produce.
    """
    changed = False
    elements = []
    for element in doc.elements:
        content = bound_content(element.id, event)
        if content is not None and content != element.content:
            elements.append(replace(element, content=content))
            changed = True
        else:
            elements.append(element)
    if not changed:
        return doc
    return replace(doc, elements=tuple(elements))


def move_element(doc: DesignDocument, element_id: str, x: float, y: float) -> DesignDocument:
    """Move an element, clamping both axes into ``[0, 100]``."""
    return with_element(doc, element_id, position=Position(clamp(x, 0, 100), clamp(y, 0, 100)))


def resize_element(doc: DesignDocument, element_id: str, width: float, height: float) -> DesignDocument:
    """Resize an element; dimensions never drop below one pixel."""
    return with_element(
        doc,
        element_id,
        size=Size(max(MIN_ELEMENT_SIZE, width), max(MIN_ELEMENT_SIZE, height)),
    )


def restyle_element(doc: DesignDocument, element_id: str, **style: Any) -> DesignDocument:
    """Merge style changes into an element's style."""
    element = find_element(doc, element_id)
    if element is None:
        return doc
    return with_element(doc, element_id, style=replace(element.style, **style))


def center_all(doc: DesignDocument) -> DesignDocument:
    """Center every element horizontally and set its text alignment to center."""
    elements = tuple(
        replace(
            element,
            position=Position(50, element.position.y),
            style=replace(element.style, text_align=TextAlign.CENTER),
        )
        for element in doc.elements
    )
    return replace(doc, elements=elements)


def snap_to_fit(doc: DesignDocument) -> DesignDocument:
    """Clamp every element position into ``[5, 85]`` on both axes."""
    elements = tuple(
        replace(
            element,
            position=Position(
                clamp(element.position.x, SNAP_MIN, SNAP_MAX),
                clamp(element.position.y, SNAP_MIN, SNAP_MAX),
            ),
        )
        for element in doc.elements
    )
    return replace(doc, elements=elements)


def clamp_geometry(doc: DesignDocument) -> DesignDocument:
    """Bring every element back into the canvas: positions in ``[0, 100]``, sizes of at least one pixel."""
    elements = tuple(
        replace(
            element,
            position=Position(clamp(element.position.x, 0, 100), clamp(element.position.y, 0, 100)),
            size=Size(max(MIN_ELEMENT_SIZE, element.size.width), max(MIN_ELEMENT_SIZE, element.size.height)),
        )
        for element in doc.elements
    )
    if elements == doc.elements:
        return doc
    return replace(doc, elements=elements)


@dataclass(frozen=True)
class CanvasRect:
    """Rendered bounding box of the canvas in pointer coordinates."""

    left: float
    top: float
    width: float
    height: float


@dataclass(frozen=True)
class DragOffset:
    """Distance between the pointer and the element origin at drag start."""

    x: float = 0.0
    y: float = 0.0


def drag_offset(element: DesignElement, pointer_x: float, pointer_y: float, canvas: CanvasRect) -> DragOffset:
    """Compute the pointer offset from an element's absolute position."""
    element_x = element.position.x / 100 * canvas.width
    element_y = element.position.y / 100 * canvas.height
    return DragOffset(
        x=pointer_x - canvas.left - element_x,
        y=pointer_y - canvas.top - element_y,
    )


def drag_position(pointer_x: float, pointer_y: float, offset: DragOffset, canvas: CanvasRect) -> Position | None:
    """Compute the dragged element position, clamped into ``[0, 85]``.

    Returns:
        The new position, or None when the canvas has no area.
    """
    if canvas.width <= 0 or canvas.height <= 0:
        return None
    x = (pointer_x - canvas.left - offset.x) / canvas.width * 100
    y = (pointer_y - canvas.top - offset.y) / canvas.height * 100
    return Position(clamp(x, DRAG_MIN, DRAG_MAX), clamp(y, DRAG_MIN, DRAG_MAX))
