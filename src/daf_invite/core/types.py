"""Core type definitions for daf-invite."""

from __future__ import annotations

from enum import StrEnum


class ElementKind(StrEnum):
    """Enumeration of element kinds placed on the invitation canvas."""

    TEXT = "text"
    IMAGE = "image"


class BackgroundKind(StrEnum):
    """Enumeration of invitation background fills."""

    SOLID = "solid"
    GRADIENT = "gradient"
    IMAGE = "image"


class BorderStyle(StrEnum):
    """Enumeration of border line styles."""

    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"


class TextAlign(StrEnum):
    """Enumeration of horizontal text alignments."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


FONTS: tuple[str, ...] = (
    "Arial",
    "Georgia",
    "Times New Roman",
    "Courier New",
    "Helvetica",
    "Playfair Display",
    "Merriweather",
    "Open Sans",
    "Roboto",
    "Lato",
)

FONT_WEIGHTS: tuple[str, ...] = ("normal", "bold", "600", "300")

THEMES: tuple[str, ...] = ("military", "air-force", "space-force", "formal")
