"""Tests for the editor session."""

from __future__ import annotations

from dataclasses import replace

import pytest

from daf_invite.core.colors import BorderColorTarget, ElementColorTarget
from daf_invite.core.document import find_element
from daf_invite.core.layout import CanvasRect
from daf_invite.core.models import DesignDocument, DesignElement, EventData, Position, Size
from daf_invite.core.session import EditorSession
from daf_invite.core.types import BackgroundKind, ElementKind


class TestInitialization:
    """Tests for one-shot seeding."""

    def test_seeds_empty_document(self, event_data: EventData) -> None:
        """Test that the first initialization creates the default layout."""
        session = EditorSession()
        assert session.initialize(event_data) is True
        assert len(session.document.elements) == 7
        assert session.initialized
        assert not session.history.can_undo()

    def test_seeds_only_once(self, seeded_session: EditorSession, event_data: EventData) -> None:
        """Test that emptying the document never re-seeds it."""
        for element in seeded_session.document.elements:
            seeded_session.delete_element(element.id)
        assert seeded_session.document.elements == ()
        assert seeded_session.initialize(event_data) is False
        assert seeded_session.document.elements == ()

    def test_existing_design_is_kept(self, event_data: EventData) -> None:
        """Test that a stored design with elements is not seeded."""
        session = EditorSession()
        session.add_text("Existing")
        assert session.initialize(event_data) is False
        assert [e.content for e in session.document.elements] == ["Existing"]

    def test_sync_event_data(self, seeded_session: EditorSession, event_data: EventData) -> None:
        """Test that changed details reach bound elements."""
        seeded_session.sync_event_data(EventData(title="Promotion"))
        assert find_element(seeded_session.document, "title").content == "Promotion"
        assert find_element(seeded_session.document, "location").content == "Event Location"


class TestSelection:
    """Tests for transient selection state."""

    def test_select_and_click_canvas(self, seeded_session: EditorSession) -> None:
        """Test that clicking the canvas clears the selection."""
        seeded_session.select("title")
        assert seeded_session.selected_element.id == "title"
        seeded_session.click_canvas()
        assert seeded_session.selected_id is None

    def test_select_unknown_id_is_ignored(self, seeded_session: EditorSession) -> None:
        """Test that selecting a missing element keeps the previous selection."""
        seeded_session.select("title")
        seeded_session.select("missing")
        assert seeded_session.selected_id == "title"

    def test_delete_selected_clears_selection(self, seeded_session: EditorSession) -> None:
        """Test that deleting the selected element clears the selection."""
        seeded_session.select("notes")
        seeded_session.delete_element("notes")
        assert seeded_session.selected_id is None
        assert find_element(seeded_session.document, "notes") is None

    def test_selection_is_not_persisted(self, seeded_session: EditorSession) -> None:
        """Test that selecting an element does not change the document."""
        before = seeded_session.document
        seeded_session.select("title")
        assert seeded_session.document is before


class TestDragging:
    """Tests for pointer-driven dragging."""

    def test_drag_moves_element(self, seeded_session: EditorSession, canvas: CanvasRect) -> None:
        """Test a full pointer-down, move and up sequence."""
        seeded_session.pointer_down("title", 300, 80, canvas)
        assert seeded_session.is_dragging
        assert seeded_session.selected_id == "title"
        assert seeded_session.interaction_style == {"user_select": "none", "cursor": "move"}

        seeded_session.pointer_move(300 - 100, 80 + 150, canvas)
        seeded_session.pointer_up()

        title = find_element(seeded_session.document, "title")
        assert (title.position.x, title.position.y) == pytest.approx((25, 30))
        assert not seeded_session.is_dragging
        assert seeded_session.interaction_style == {}

    def test_drag_is_clamped(self, seeded_session: EditorSession, canvas: CanvasRect) -> None:
        """Test that positions stay within [0, 85] while dragging."""
        seeded_session.pointer_down("contact", 300, 500, canvas)
        seeded_session.pointer_move(5000, 5000, canvas)
        contact = find_element(seeded_session.document, "contact")
        assert contact.position == Position(85, 85)
        seeded_session.pointer_move(-5000, -5000, canvas)
        contact = find_element(seeded_session.document, "contact")
        assert contact.position == Position(0, 0)

    def test_drag_records_one_undo_entry(self, seeded_session: EditorSession, canvas: CanvasRect) -> None:
        """Test that a whole drag is undone in one step."""
        original = find_element(seeded_session.document, "title").position
        seeded_session.pointer_down("title", 300, 80, canvas)
        for step in range(5):
            seeded_session.pointer_move(300 + step * 10, 80 + step * 10, canvas)
        seeded_session.pointer_up()

        assert seeded_session.history.undo_count == 1
        assert seeded_session.undo()
        assert find_element(seeded_session.document, "title").position == original

    def test_click_without_move_records_nothing(self, seeded_session: EditorSession, canvas: CanvasRect) -> None:
        """Test that a drag that never moved leaves no history."""
        seeded_session.pointer_down("title", 300, 80, canvas)
        seeded_session.pointer_up()
        assert not seeded_session.history.can_undo()

    def test_new_drag_ends_previous(self, seeded_session: EditorSession, canvas: CanvasRect) -> None:
        """Test that only one element is dragged at a time."""
        seeded_session.pointer_down("title", 300, 80, canvas)
        seeded_session.pointer_move(320, 100, canvas)
        seeded_session.pointer_down("location", 300, 260, canvas)
        assert seeded_session.dragged_id == "location"
        assert seeded_session.history.undo_count == 1

    def test_move_without_drag_is_ignored(self, seeded_session: EditorSession, canvas: CanvasRect) -> None:
        """Test that stray pointer moves do nothing."""
        before = seeded_session.document
        seeded_session.pointer_move(10, 10, canvas)
        assert seeded_session.document is before

    def test_pointer_down_on_missing_element(self, seeded_session: EditorSession, canvas: CanvasRect) -> None:
        """Test that an unknown element cannot be dragged."""
        seeded_session.pointer_down("missing", 10, 10, canvas)
        assert not seeded_session.is_dragging

    def test_zero_area_canvas_is_noop(self, seeded_session: EditorSession, canvas: CanvasRect) -> None:
        """Test that a collapsed canvas leaves the element in place."""
        seeded_session.pointer_down("title", 300, 80, canvas)
        before = seeded_session.document
        seeded_session.pointer_move(10, 10, CanvasRect(0, 0, 400, 0))
        assert seeded_session.document is before


class TestEdits:
    """Tests for element and document edits."""

    def test_add_text_stacks_on_top(self, seeded_session: EditorSession) -> None:
        """Test that new text gets the highest z-index."""
        element = seeded_session.add_text()
        assert element.z_index == 11
        assert element.content == "New Text"
        assert element.style.color == seeded_session.document.custom_colors.primary
        assert seeded_session.document.elements[-1] == element

    def test_add_image(self) -> None:
        """Test adding an image to an empty document."""
        session = EditorSession()
        element = session.add_image("data:image/png;base64,AAAA")
        assert element.kind is ElementKind.IMAGE
        assert element.z_index == 1

    def test_update_element_clamps(self, seeded_session: EditorSession) -> None:
        """Test that updates keep position and size in range."""
        seeded_session.update_element("title", position=Position(120, -3), size=Size(0, 500))
        title = find_element(seeded_session.document, "title")
        assert title.position == Position(100, 0)
        assert title.size == Size(1, 500)

    def test_missing_id_edits_are_noops(self, seeded_session: EditorSession) -> None:
        """Test that edits of unknown elements leave no history."""
        seeded_session.update_element("missing", content="x")
        seeded_session.restyle_element("missing", color="#000000")
        seeded_session.delete_element("missing")
        assert not seeded_session.history.can_undo()

    def test_background_and_border_clamps(self) -> None:
        """Test the gradient direction and border width bounds."""
        session = EditorSession()
        session.set_background(kind=BackgroundKind.GRADIENT, gradient_direction=400)
        session.set_border(enabled=True, width=50)
        assert session.document.background.gradient_direction == 360
        assert session.document.border.width == 20
        session.set_border(width=0)
        assert session.document.border.width == 1

    def test_colors_and_theme(self, seeded_session: EditorSession) -> None:
        """Test picker colors and theme selection."""
        seeded_session.set_color(ElementColorTarget("title"), "#abcdef")
        seeded_session.set_color(BorderColorTarget(), "#fedcba")
        assert seeded_session.color_of(ElementColorTarget("title")) == "#abcdef"
        assert seeded_session.document.border.color == "#fedcba"
        seeded_session.set_theme("formal")
        assert seeded_session.document.theme == "formal"

    def test_bulk_layout(self, seeded_session: EditorSession) -> None:
        """Test center-all and snap-to-fit through the session."""
        seeded_session.update_element("title", position=Position(95, 2))
        seeded_session.snap_to_fit()
        assert find_element(seeded_session.document, "title").position == Position(85, 5)
        seeded_session.center_all()
        assert all(e.position.x == 50 for e in seeded_session.document.elements)

    def test_replace_document_clamps_geometry(self, seeded_session: EditorSession) -> None:
        """Test that a replaced document is pulled into position and size bounds."""
        element = DesignElement(id="a", kind=ElementKind.TEXT, position=Position(250, -40), size=Size(0, -10))
        seeded_session.replace_document(DesignDocument(elements=(element,)))
        stored = find_element(seeded_session.document, "a")
        assert stored.position == Position(100, 0)
        assert stored.size == Size(1, 1)

    def test_replace_document_drops_stale_selection(self, seeded_session: EditorSession) -> None:
        """Test that replacing the document forgets selections that vanished."""
        seeded_session.select("title")
        seeded_session.replace_document(DesignDocument())
        assert seeded_session.selected_id is None
        assert seeded_session.history.can_undo()


class TestUndoRedo:
    """Tests for session undo and redo."""

    def test_undo_redo_edit(self, seeded_session: EditorSession) -> None:
        """Test undoing and redoing an element update."""
        seeded_session.update_element("title", content="Changed")
        assert seeded_session.undo()
        assert find_element(seeded_session.document, "title").content == "Dining Out"
        assert seeded_session.redo()
        assert find_element(seeded_session.document, "title").content == "Changed"

    def test_undo_add_clears_selection(self, seeded_session: EditorSession) -> None:
        """Test that undoing an add drops the selection of the added element."""
        element = seeded_session.add_text()
        seeded_session.select(element.id)
        seeded_session.undo()
        assert seeded_session.selected_id is None

    def test_nothing_to_undo(self) -> None:
        """Test undo and redo on a fresh session."""
        session = EditorSession()
        assert session.undo() is False
        assert session.redo() is False

    def test_undo_after_sync_keeps_event_text(self, seeded_session: EditorSession, event_data: EventData) -> None:
        """Test that stepping through history never restores outdated event details."""
        seeded_session.add_text()
        seeded_session.sync_event_data(replace(event_data, title="Promotion"))

        assert seeded_session.undo()
        assert len(seeded_session.document.elements) == 7
        assert find_element(seeded_session.document, "title").content == "Promotion"
        assert seeded_session.redo()
        assert find_element(seeded_session.document, "title").content == "Promotion"

    def test_redo_keeps_manual_bound_edit(self, seeded_session: EditorSession) -> None:
        """Test that redo restores hand-edited bound content when details did not change."""
        seeded_session.update_element("title", content="Custom Headline")
        seeded_session.undo()
        seeded_session.redo()
        assert find_element(seeded_session.document, "title").content == "Custom Headline"

    def test_edit_during_drag_keeps_undo_order(self, seeded_session: EditorSession, canvas: CanvasRect) -> None:
        """Test that an edit made mid-drag is undone on its own, before the drag."""
        original = find_element(seeded_session.document, "title").position
        seeded_session.pointer_down("title", 300, 80, canvas)
        seeded_session.pointer_move(340, 110, canvas)
        dragged = find_element(seeded_session.document, "title").position
        seeded_session.restyle_element("notes", color="#ff0000")
        assert not seeded_session.is_dragging
        seeded_session.pointer_up()

        assert seeded_session.history.undo_count == 2
        assert seeded_session.undo()
        assert find_element(seeded_session.document, "notes").style.color == "#64748b"
        assert find_element(seeded_session.document, "title").position == dragged
        assert seeded_session.undo()
        assert find_element(seeded_session.document, "title").position == original
        assert seeded_session.redo()
        assert seeded_session.redo()
        assert find_element(seeded_session.document, "notes").style.color == "#ff0000"
