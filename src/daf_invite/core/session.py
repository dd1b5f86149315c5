"""Editor session mediating user gestures into layout operations."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any

from daf_invite.core import document as docops
from daf_invite.core import layout
from daf_invite.core.colors import apply_color, read_color
from daf_invite.core.history import DesignHistory
from daf_invite.core.models import (
    DesignDocument,
    DesignElement,
    Position,
    Size,
    create_image_element,
    create_text_element,
)

if TYPE_CHECKING:
    from daf_invite.core.colors import ColorTarget
    from daf_invite.core.layout import CanvasRect, DragOffset
    from daf_invite.core.models import EventData

DRAG_STYLE = {"user_select": "none", "cursor": "move"}


class EditorSession:
    """Transient editing state around one design document.

    The session owns the current :class:`DesignDocument` until it is saved.
    Each edit replaces the document with a new value; the previous value goes
    onto the undo history. Selection and drag state live here and are never
    persisted.

    Attributes:
        document: The current design document.
        selected_id: Id of the selected element, if any.
        dragged_id: Id of the element being dragged, if any.
        drag_offset: Pointer offset recorded at drag start.
        initialized: Whether default seeding has already run.
        history: Undo/redo history.
    """

    def __init__(self, document: DesignDocument | None = None, *, max_history: int = 100) -> None:
        """Initialize the session.

        Args:
            document: Document to edit. Defaults to an empty document.
            max_history: Maximum undo history size.
        """
        self.document = document or DesignDocument()
        self.selected_id: str | None = None
        self.dragged_id: str | None = None
        self.drag_offset: DragOffset | None = None
        self.initialized = False
        self.history = DesignHistory(max_history)
        self._drag_origin: DesignDocument | None = None

    def _commit(self, updated: DesignDocument) -> DesignDocument:
        if updated is not self.document:
            self.end_drag()
            self.history.push(self.document)
            self.document = updated
        return self.document

    # Lifecycle

    def initialize(self, event: EventData) -> bool:
        """Seed the default elements the first time the editor opens.

        Seeding happens at most once per session and only if the document has
        no elements. Emptying the document later never re-seeds it.

        Returns:
            True if the default elements were created.
        """
        if self.initialized:
            return False
        self.initialized = True
        if self.document.elements:
            return False
        self.document = layout.seed_document(self.document, event)
        return True

    def sync_event_data(self, event: EventData) -> DesignDocument:
        """Reconcile bound elements with changed event details.

        Reconciliation does not add an undo entry. The stored undo and redo
        snapshots and the origin of an active drag are reconciled as well.
        """

        def reconcile(document: DesignDocument) -> DesignDocument:
            return layout.reconcile_bound_elements(document, event)

        self.document = reconcile(self.document)
        self.history.rewrite(reconcile)
        if self._drag_origin is not None:
            self._drag_origin = reconcile(self._drag_origin)
        return self.document

    def replace_document(self, document: DesignDocument) -> DesignDocument:
        """Swap in a whole new document, keeping the old one for undo.

        Element positions are clamped into the canvas and sizes to at least one
        pixel, the same bounds single-element updates apply.
        """
        self.end_drag()
        self._commit(layout.clamp_geometry(document))
        self._drop_stale_selection()
        return self.document

    # Selection

    @property
    def selected_element(self) -> DesignElement | None:
        """The currently selected element."""
        if self.selected_id is None:
            return None
        return docops.find_element(self.document, self.selected_id)

    def select(self, element_id: str) -> None:
        """Select an element; unknown ids are ignored."""
        if docops.find_element(self.document, element_id) is not None:
            self.selected_id = element_id

    def clear_selection(self) -> None:
        """Clear the selection."""
        self.selected_id = None

    def click_canvas(self) -> None:
        """Handle a click on the canvas background."""
        self.clear_selection()

    def _drop_stale_selection(self) -> None:
        if self.selected_id is not None and self.selected_element is None:
            self.selected_id = None

    # Dragging

    @property
    def is_dragging(self) -> bool:
        """Whether a drag is in progress."""
        return self.dragged_id is not None

    @property
    def interaction_style(self) -> dict[str, str]:
        """UI styling to apply while a drag is in progress."""
        return dict(DRAG_STYLE) if self.is_dragging else {}

    def pointer_down(self, element_id: str, pointer_x: float, pointer_y: float, canvas: CanvasRect) -> None:
        """Start dragging an element.

        Any drag still in progress ends first. The element becomes selected.
        """
        element = docops.find_element(self.document, element_id)
        if element is None:
            return
        self.end_drag()
        self.dragged_id = element_id
        self.drag_offset = layout.drag_offset(element, pointer_x, pointer_y, canvas)
        self.selected_id = element_id
        self._drag_origin = self.document

    def pointer_move(self, pointer_x: float, pointer_y: float, canvas: CanvasRect) -> None:
        """Move the dragged element under the pointer."""
        if self.dragged_id is None or self.drag_offset is None:
            return
        position = layout.drag_position(pointer_x, pointer_y, self.drag_offset, canvas)
        if position is None:
            return
        self.document = docops.with_element(self.document, self.dragged_id, position=position)

    def pointer_up(self) -> None:
        """Finish the current drag."""
        self.end_drag()

    def end_drag(self) -> None:
        """End any drag in progress, recording one undo entry if it moved."""
        if self._drag_origin is not None and self._drag_origin is not self.document:
            self.history.push(self._drag_origin)
        self.dragged_id = None
        self.drag_offset = None
        self._drag_origin = None

    # Element edits

    def add_text(self, content: str = "New Text") -> DesignElement:
        """Add a text element styled with the palette's primary color."""
        element = create_text_element(
            content,
            z_index=docops.next_z_index(self.document),
            palette=self.document.custom_colors,
        )
        self._commit(docops.append_element(self.document, element))
        return element

    def add_image(self, image_data: str) -> DesignElement:
        """Add an image element from an uploaded data-URI."""
        element = create_image_element(image_data, z_index=docops.next_z_index(self.document))
        self._commit(docops.append_element(self.document, element))
        return element

    def update_element(self, element_id: str, **changes: Any) -> DesignDocument:
        """Apply a partial update, clamping position and size into range."""
        position = changes.get("position")
        if isinstance(position, Position):
            changes["position"] = Position(layout.clamp(position.x, 0, 100), layout.clamp(position.y, 0, 100))
        size = changes.get("size")
        if isinstance(size, Size):
            changes["size"] = Size(
                max(layout.MIN_ELEMENT_SIZE, size.width),
                max(layout.MIN_ELEMENT_SIZE, size.height),
            )
        return self._commit(docops.with_element(self.document, element_id, **changes))

    def restyle_element(self, element_id: str, **style: Any) -> DesignDocument:
        """Merge style changes into an element."""
        return self._commit(layout.restyle_element(self.document, element_id, **style))

    def delete_element(self, element_id: str) -> DesignDocument:
        """Delete an element, clearing the selection if it was selected."""
        if self.dragged_id == element_id:
            self.end_drag()
        self._commit(docops.without_element(self.document, element_id))
        if self.selected_id == element_id:
            self.selected_id = None
        return self.document

    # Bulk layout

    def center_all(self) -> DesignDocument:
        """Center every element horizontally."""
        return self._commit(layout.center_all(self.document))

    def snap_to_fit(self) -> DesignDocument:
        """Pull every element back inside the canvas margins."""
        return self._commit(layout.snap_to_fit(self.document))

    # Document-level styling

    def set_background(self, **changes: Any) -> DesignDocument:
        """Update the background; the gradient direction is clamped to 0-360."""
        if changes.get("gradient_direction") is not None:
            changes["gradient_direction"] = int(layout.clamp(changes["gradient_direction"], 0, 360))
        return self._commit(docops.with_background(self.document, **changes))

    def add_gradient_color(self, color: str = "#ffffff") -> DesignDocument:
        """Append a gradient stop."""
        return self._commit(docops.add_gradient_color(self.document, color))

    def set_background_image(self, data_uri: str) -> DesignDocument:
        """Use an uploaded image as the background."""
        return self._commit(docops.set_background_image(self.document, data_uri))

    def remove_background_image(self) -> DesignDocument:
        """Drop the background image."""
        return self._commit(docops.remove_background_image(self.document))

    def set_border(self, **changes: Any) -> DesignDocument:
        """Update the border; the width is clamped to 1-20 pixels."""
        if changes.get("width") is not None:
            changes["width"] = int(layout.clamp(changes["width"], 1, 20))
        return self._commit(docops.with_border(self.document, **changes))

    def set_custom_colors(self, **changes: Any) -> DesignDocument:
        """Update the palette."""
        return self._commit(docops.with_custom_colors(self.document, **changes))

    def set_theme(self, theme: str) -> DesignDocument:
        """Select a theme."""
        if theme == self.document.theme:
            return self.document
        return self._commit(replace(self.document, theme=theme))

    def color_of(self, target: ColorTarget) -> str:
        """Current color of a picker target."""
        return read_color(self.document, target)

    def set_color(self, target: ColorTarget, color: str) -> DesignDocument:
        """Set the color of a picker target."""
        return self._commit(apply_color(self.document, target, color))

    # History

    def undo(self) -> bool:
        """Revert the last edit. Returns False when there is nothing to undo."""
        self.end_drag()
        previous = self.history.undo(self.document)
        if previous is None:
            return False
        self.document = previous
        self._drop_stale_selection()
        return True

    def redo(self) -> bool:
        """Re-apply the last undone edit."""
        self.end_drag()
        following = self.history.redo(self.document)
        if following is None:
            return False
        self.document = following
        self._drop_stale_selection()
        return True
