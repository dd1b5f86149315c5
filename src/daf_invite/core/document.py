"""Structural operations on design documents.

Every function returns a new :class:`DesignDocument`. Operations that target
an element id which is not present return the input document unchanged.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any

from daf_invite.core.types import BackgroundKind

if TYPE_CHECKING:
    from daf_invite.core.models import DesignDocument, DesignElement


def find_element(doc: DesignDocument, element_id: str) -> DesignElement | None:
    """Return the element with the given id, or None."""
    for element in doc.elements:
        if element.id == element_id:
            return element
    return None


def next_z_index(doc: DesignDocument) -> int:
    """Return the z-index a newly added element should receive."""
    if not doc.elements:
        return 1
    return max(element.z_index for element in doc.elements) + 1


def with_element(doc: DesignDocument, element_id: str, **changes: Any) -> DesignDocument:
    """Replace the matching element with a shallow-merged copy.

    Args:
        doc: Source document.
        element_id: Id of the element to update.
        **changes: Element fields to overwrite.

    Returns:
        The updated document, or ``doc`` itself when the id is unknown.
    """
    if find_element(doc, element_id) is None:
        return doc
    elements = tuple(replace(e, **changes) if e.id == element_id else e for e in doc.elements)
    return replace(doc, elements=elements)


def without_element(doc: DesignDocument, element_id: str) -> DesignDocument:
    """Remove the element with the given id."""
    remaining = tuple(e for e in doc.elements if e.id != element_id)
    if len(remaining) == len(doc.elements):
        return doc
    return replace(doc, elements=remaining)


def append_element(doc: DesignDocument, element: DesignElement) -> DesignDocument:
    """Add an element at the end of the collection."""
    return replace(doc, elements=(*doc.elements, element))


def with_background(doc: DesignDocument, **changes: Any) -> DesignDocument:
    """Shallow-merge changes into the background."""
    if "gradient_colors" in changes:
        changes["gradient_colors"] = tuple(changes["gradient_colors"])
    return replace(doc, background=replace(doc.background, **changes))


def with_border(doc: DesignDocument, **changes: Any) -> DesignDocument:
    """Shallow-merge changes into the border."""
    return replace(doc, border=replace(doc.border, **changes))


def with_custom_colors(doc: DesignDocument, **changes: Any) -> DesignDocument:
    """Shallow-merge changes into the palette."""
    return replace(doc, custom_colors=replace(doc.custom_colors, **changes))


def add_gradient_color(doc: DesignDocument, color: str = "#ffffff") -> DesignDocument:
    """Append a stop to the background gradient."""
    return with_background(doc, gradient_colors=(*doc.background.gradient_colors, color))


def set_background_image(doc: DesignDocument, data_uri: str) -> DesignDocument:
    """Use an uploaded image as the background."""
    return with_background(doc, kind=BackgroundKind.IMAGE, value=data_uri)


def remove_background_image(doc: DesignDocument) -> DesignDocument:
    """Drop the background image, leaving a white fill value."""
    return with_background(doc, value="#ffffff")
