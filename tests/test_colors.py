"""Tests for color picker targets."""

from __future__ import annotations

import pytest

from daf_invite.core.colors import (
    BackgroundColorTarget,
    BorderColorField,
    BorderColorTarget,
    ElementColorField,
    ElementColorTarget,
    GradientStopTarget,
    PaletteColorTarget,
    PaletteKey,
    apply_color,
    read_color,
)
from daf_invite.core.models import DesignDocument, DesignElement, ElementStyle
from daf_invite.core.types import ElementKind


@pytest.fixture
def doc() -> DesignDocument:
    """Create a document with one styled text element."""
    element = DesignElement(id="t", kind=ElementKind.TEXT, style=ElementStyle(color="#111111"))
    return DesignDocument(elements=(element,))


class TestReadColor:
    """Tests for reading the current color of a target."""

    def test_element_fields(self, doc: DesignDocument) -> None:
        """Test reading element text and background colors."""
        assert read_color(doc, ElementColorTarget("t")) == "#111111"
        assert read_color(doc, ElementColorTarget("t", ElementColorField.BACKGROUND)) == "#ffffff"

    def test_missing_element_falls_back_to_white(self, doc: DesignDocument) -> None:
        """Test the fallback for an unknown element."""
        assert read_color(doc, ElementColorTarget("missing")) == "#ffffff"

    def test_document_slots(self, doc: DesignDocument) -> None:
        """Test reading border, background, gradient and palette colors."""
        assert read_color(doc, BorderColorTarget()) == "#002596"
        assert read_color(doc, BorderColorTarget(BorderColorField.SECONDARY)) == "#ffffff"
        assert read_color(doc, BackgroundColorTarget()) == "#ffffff"
        assert read_color(doc, GradientStopTarget(1)) == "#ffffff"
        assert read_color(doc, GradientStopTarget(9)) == "#ffffff"
        assert read_color(doc, PaletteColorTarget(PaletteKey.ACCENT)) == "#64748b"


class TestApplyColor:
    """Tests for setting the color of a target."""

    def test_element_text_and_background(self, doc: DesignDocument) -> None:
        """Test recoloring element text and background."""
        doc = apply_color(doc, ElementColorTarget("t"), "#ff0000")
        doc = apply_color(doc, ElementColorTarget("t", ElementColorField.BACKGROUND), "#00ff00")
        style = doc.elements[0].style
        assert style.color == "#ff0000"
        assert style.background_color == "#00ff00"

    def test_missing_element_is_noop(self, doc: DesignDocument) -> None:
        """Test that recoloring an unknown element changes nothing."""
        assert apply_color(doc, ElementColorTarget("missing"), "#ff0000") is doc

    def test_border_colors(self, doc: DesignDocument) -> None:
        """Test recoloring the primary and secondary border colors."""
        doc = apply_color(doc, BorderColorTarget(), "#aaaaaa")
        doc = apply_color(doc, BorderColorTarget(BorderColorField.SECONDARY), "#bbbbbb")
        assert doc.border.color == "#aaaaaa"
        assert doc.border.secondary_color == "#bbbbbb"

    def test_background_and_palette(self, doc: DesignDocument) -> None:
        """Test recoloring the background and a palette entry."""
        doc = apply_color(doc, BackgroundColorTarget(), "#000000")
        doc = apply_color(doc, PaletteColorTarget(PaletteKey.SECONDARY), "#cccccc")
        assert doc.background.value == "#000000"
        assert doc.custom_colors.secondary == "#cccccc"
        assert doc.custom_colors.primary == "#1e293b"

    def test_gradient_stops(self, doc: DesignDocument) -> None:
        """Test replacing, appending and ignoring gradient stops."""
        replaced = apply_color(doc, GradientStopTarget(0), "#010101")
        assert replaced.background.gradient_colors == ("#010101", "#ffffff")
        appended = apply_color(doc, GradientStopTarget(2), "#020202")
        assert appended.background.gradient_colors == ("#ffffff", "#ffffff", "#020202")
        assert apply_color(doc, GradientStopTarget(5), "#030303") is doc
        assert apply_color(doc, GradientStopTarget(-1), "#030303") is doc
