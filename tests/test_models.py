"""Tests for core domain models."""

from __future__ import annotations

import re
from dataclasses import FrozenInstanceError

import pytest

from daf_invite.core.models import (
    Background,
    Border,
    CustomColors,
    DesignDocument,
    DesignElement,
    Event,
    Position,
    create_image_element,
    create_text_element,
    new_element_id,
)
from daf_invite.core.types import BackgroundKind, BorderStyle, ElementKind, TextAlign


class TestElementFactories:
    """Tests for element creation helpers."""

    def test_text_element_defaults(self) -> None:
        """Test that a new text element has the stock style and geometry."""
        element = create_text_element()
        assert element.kind is ElementKind.TEXT
        assert element.content == "New Text"
        assert element.position == Position(50, 50)
        assert (element.size.width, element.size.height) == (200, 50)
        assert element.style.font_family == "Arial"
        assert element.style.font_size == 16
        assert element.style.text_align is TextAlign.CENTER
        assert element.style.background_color == "transparent"
        assert element.style.padding == 8

    def test_text_element_uses_palette_primary(self) -> None:
        """Test that the palette's primary color styles new text."""
        element = create_text_element(palette=CustomColors(primary="#ff0000"))
        assert element.style.color == "#ff0000"

    def test_image_element_defaults(self) -> None:
        """Test that a new image element is 100x100 with flat style."""
        element = create_image_element("data:image/png;base64,AAAA")
        assert element.kind is ElementKind.IMAGE
        assert element.image_data == "data:image/png;base64,AAAA"
        assert (element.size.width, element.size.height) == (100, 100)
        assert element.style.border_radius == 0
        assert element.style.padding == 0
        assert element.style.font_size is None

    def test_element_ids_are_unique_and_prefixed(self) -> None:
        """Test the id format and uniqueness."""
        ids = {new_element_id(ElementKind.TEXT) for _ in range(50)}
        assert len(ids) == 50
        assert all(re.fullmatch(r"text-\d+-[0-9a-f]{6}", i) for i in ids)


class TestDocumentDefaults:
    """Tests for document-level defaults."""

    def test_empty_document(self) -> None:
        """Test the defaults of a new document."""
        doc = DesignDocument()
        assert doc.elements == ()
        assert doc.background == Background(BackgroundKind.SOLID, "#ffffff", 135, ("#ffffff", "#ffffff"))
        assert doc.border == Border(False, 4, "#002596", None, BorderStyle.SOLID)
        assert doc.theme == "military"

    def test_models_are_frozen(self) -> None:
        """Test that documents cannot be mutated in place."""
        element = DesignElement(id="a", kind=ElementKind.TEXT)
        with pytest.raises(FrozenInstanceError):
            element.content = "changed"  # type: ignore[misc]

    def test_event_gets_id_and_timestamps(self) -> None:
        """Test that events receive an id and UTC timestamps."""
        first, second = Event(), Event()
        assert first.id != second.id
        assert first.created_at.tzinfo is not None
        assert first.design == DesignDocument()
