"""Color picker targets for invitation designs.

A color picker edits exactly one color slot of a document. Each slot kind is
a small frozen dataclass; together they form the :data:`ColorTarget` union.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from daf_invite.core.document import find_element, with_background, with_border, with_custom_colors
from daf_invite.core.layout import restyle_element

if TYPE_CHECKING:
    from daf_invite.core.models import DesignDocument

DEFAULT_PICKER_COLOR = "#ffffff"


class ElementColorField(StrEnum):
    """Element style slot edited by a picker."""

    TEXT = "text"
    BACKGROUND = "background"


class BorderColorField(StrEnum):
    """Border color slot edited by a picker."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


class PaletteKey(StrEnum):
    """Palette entry edited by a picker."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"


@dataclass(frozen=True)
class ElementColorTarget:
    """Text or background color of one element."""

    element_id: str
    field: ElementColorField = ElementColorField.TEXT


@dataclass(frozen=True)
class BorderColorTarget:
    """Primary or secondary border color."""

    field: BorderColorField = BorderColorField.PRIMARY


@dataclass(frozen=True)
class BackgroundColorTarget:
    """Solid background fill."""


@dataclass(frozen=True)
class GradientStopTarget:
    """One stop of the background gradient."""

    index: int


@dataclass(frozen=True)
class PaletteColorTarget:
    """One entry of the custom palette."""

    key: PaletteKey


ColorTarget = (
    ElementColorTarget | BorderColorTarget | BackgroundColorTarget | GradientStopTarget | PaletteColorTarget
)


def read_color(doc: DesignDocument, target: ColorTarget) -> str:
    """Return the current color of a target, or white when it has none."""
    match target:
        case ElementColorTarget(element_id=element_id, field=field):
            element = find_element(doc, element_id)
            if element is None:
                return DEFAULT_PICKER_COLOR
            if field is ElementColorField.BACKGROUND:
                return element.style.background_color or DEFAULT_PICKER_COLOR
            return element.style.color or DEFAULT_PICKER_COLOR
        case BorderColorTarget(field=BorderColorField.SECONDARY):
            return doc.border.secondary_color or DEFAULT_PICKER_COLOR
        case BorderColorTarget():
            return doc.border.color
        case BackgroundColorTarget():
            return doc.background.value
        case GradientStopTarget(index=index):
            stops = doc.background.gradient_colors
            return stops[index] if 0 <= index < len(stops) else DEFAULT_PICKER_COLOR
        case PaletteColorTarget(key=key):
            return getattr(doc.custom_colors, key.value)
    return DEFAULT_PICKER_COLOR


def apply_color(doc: DesignDocument, target: ColorTarget, color: str) -> DesignDocument:
    """Set the color of a target.

    Missing elements and gradient indexes past the end leave the document
    unchanged; the index one past the last stop appends a new stop.
    """
    match target:
        case ElementColorTarget(element_id=element_id, field=ElementColorField.BACKGROUND):
            return restyle_element(doc, element_id, background_color=color)
        case ElementColorTarget(element_id=element_id):
            return restyle_element(doc, element_id, color=color)
        case BorderColorTarget(field=BorderColorField.SECONDARY):
            return with_border(doc, secondary_color=color)
        case BorderColorTarget():
            return with_border(doc, color=color)
        case BackgroundColorTarget():
            return with_background(doc, value=color)
        case GradientStopTarget(index=index):
            stops = list(doc.background.gradient_colors)
            if index == len(stops):
                stops.append(color)
            elif 0 <= index < len(stops):
                stops[index] = color
            else:
                return doc
            return with_background(doc, gradient_colors=stops)
        case PaletteColorTarget(key=key):
            return with_custom_colors(doc, **{key.value: color})
    return doc
