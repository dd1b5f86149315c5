"""Serialization and preview styling for design documents.

Documents are persisted as JSON using the camelCase record layout shared with
the browser client: ``elements``, ``background``, ``border``, ``theme`` and
``customColors``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import asdict
from typing import Any

from daf_invite.core.models import (
    Background,
    Border,
    CustomColors,
    DesignDocument,
    DesignElement,
    ElementStyle,
    Position,
    Size,
)
from daf_invite.core.types import BackgroundKind, BorderStyle, ElementKind, TextAlign
from daf_invite.exceptions import InvalidDesignError

STYLE_KEYS = {
    "font_size": "fontSize",
    "font_family": "fontFamily",
    "color": "color",
    "font_weight": "fontWeight",
    "text_align": "textAlign",
    "background_color": "backgroundColor",
    "border_radius": "borderRadius",
    "padding": "padding",
}

# Preset background ids stored by the first designer iteration.
LEGACY_BACKGROUNDS = {
    "gradient-dark": Background(BackgroundKind.GRADIENT, "#111827", 135, ("#111827", "#1e3a8a")),
    "gradient-blue": Background(BackgroundKind.GRADIENT, "#1e40af", 135, ("#1e40af", "#2563eb")),
    "solid-navy": Background(BackgroundKind.SOLID, "#1e3a8a"),
    "solid-black": Background(BackgroundKind.SOLID, "#000000"),
}

# The "logo" element type of older records renders exactly like an image.
ELEMENT_KIND_ALIASES = {"text": ElementKind.TEXT, "image": ElementKind.IMAGE, "logo": ElementKind.IMAGE}


class ExportService:
    """Convert design documents to and from their persisted JSON form."""

    def to_dict(self, doc: DesignDocument) -> dict[str, Any]:
        """Export a document to a JSON-compatible dictionary."""
        background = doc.background
        border = doc.border
        colors = doc.custom_colors
        return {
            "elements": [self.element_to_dict(element) for element in doc.elements],
            "background": {
                "type": background.kind.value,
                "value": background.value,
                "gradientDirection": background.gradient_direction,
                "gradientColors": list(background.gradient_colors),
            },
            "border": {
                "enabled": border.enabled,
                "width": border.width,
                "color": border.color,
                "secondaryColor": border.secondary_color,
                "style": border.style.value,
            },
            "theme": doc.theme,
            "customColors": {"primary": colors.primary, "secondary": colors.secondary, "accent": colors.accent},
        }

    def to_json(self, doc: DesignDocument, *, indent: int | None = 2) -> str:
        """Export a document to a JSON string."""
        return json.dumps(self.to_dict(doc), indent=indent)

    def element_to_dict(self, element: DesignElement) -> dict[str, Any]:
        """Export a single element; unset style keys are omitted."""
        style = {
            key: (value.value if isinstance(value, TextAlign) else value)
            for attr, key in STYLE_KEYS.items()
            if (value := getattr(element.style, attr)) is not None
        }
        data: dict[str, Any] = {
            "id": element.id,
            "type": element.kind.value,
            "position": {"x": element.position.x, "y": element.position.y},
            "size": {"width": element.size.width, "height": element.size.height},
            "style": style,
            "zIndex": element.z_index,
        }
        if element.kind is ElementKind.TEXT:
            data["content"] = element.content
        else:
            data["src"] = element.image_data
        return data

    def from_dict(self, data: Any) -> DesignDocument:
        """Build a document from its persisted form.

        Missing keys fall back to model defaults.

        Raises:
            InvalidDesignError: If the payload is not a mapping, an element kind
                is unknown, a value has the wrong type, or ids repeat.
        """
        if not isinstance(data, Mapping):
            msg = f"Design must be an object, got {type(data).__name__}"
            raise InvalidDesignError(msg)
        try:
            elements = tuple(self.element_from_dict(item) for item in data.get("elements") or [])
            background = self._background_from(data.get("background"))
            border = self._border_from(data.get("border") or {})
            colors = {**asdict(CustomColors()), **(data.get("customColors") or {})}
            custom_colors = CustomColors(
                primary=str(colors["primary"]),
                secondary=str(colors["secondary"]),
                accent=str(colors["accent"]),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            msg = f"Malformed design document: {exc}"
            raise InvalidDesignError(msg) from exc

        ids = [element.id for element in elements]
        if len(ids) != len(set(ids)):
            msg = "Element ids must be unique within a design"
            raise InvalidDesignError(msg)

        return DesignDocument(
            elements=elements,
            background=background,
            border=border,
            custom_colors=custom_colors,
            theme=str(data.get("theme") or "military"),
        )

    def element_from_dict(self, data: Mapping[str, Any]) -> DesignElement:
        """Build a single element from its persisted form.

        Raises:
            InvalidDesignError: If the element kind is unknown.
        """
        kind = ELEMENT_KIND_ALIASES.get(data.get("type", "text"))
        if kind is None:
            msg = f"Unknown element type: {data.get('type')!r}"
            raise InvalidDesignError(msg)

        position = data.get("position") or {}
        size = data.get("size") or {}
        style_data = data.get("style") or {}
        style_values: dict[str, Any] = {}
        for attr, key in STYLE_KEYS.items():
            value = style_data.get(key)
            if value is None:
                continue
            if attr in ("font_size", "border_radius", "padding"):
                value = int(value)
            elif attr == "text_align":
                value = TextAlign(value)
            else:
                value = str(value)
            style_values[attr] = value

        return DesignElement(
            id=str(data["id"]),
            kind=kind,
            content=str(data.get("content") or "") if kind is ElementKind.TEXT else "",
            image_data=data.get("src") if kind is ElementKind.IMAGE else None,
            position=Position(float(position.get("x", 50)), float(position.get("y", 50))),
            size=Size(float(size.get("width", 200)), float(size.get("height", 50))),
            style=ElementStyle(**style_values),
            z_index=int(data.get("zIndex", 0)),
        )

    def _background_from(self, data: Any) -> Background:
        if data is None:
            return Background()
        if isinstance(data, str):
            if data in LEGACY_BACKGROUNDS:
                return LEGACY_BACKGROUNDS[data]
            return Background(value=data) if data.startswith("#") else Background()
        default = Background()
        direction = data.get("gradientDirection")
        return Background(
            kind=BackgroundKind(data.get("type", default.kind)),
            value=str(data.get("value", default.value)),
            gradient_direction=default.gradient_direction if direction is None else int(direction),
            gradient_colors=tuple(str(c) for c in data.get("gradientColors") or default.gradient_colors),
        )

    def _border_from(self, data: Mapping[str, Any]) -> Border:
        default = Border()
        secondary = data.get("secondaryColor")
        return Border(
            enabled=bool(data.get("enabled", default.enabled)),
            width=int(data.get("width", default.width)),
            color=str(data.get("color", default.color)),
            secondary_color=str(secondary) if secondary else None,
            style=BorderStyle(data.get("style", default.style)),
        )

    def background_css(self, background: Background) -> str:
        """Render the CSS ``background`` value for a background."""
        if background.kind is BackgroundKind.GRADIENT and background.gradient_colors:
            stops = ", ".join(background.gradient_colors)
            return f"linear-gradient({background.gradient_direction}deg, {stops})"
        if background.kind is BackgroundKind.IMAGE and background.value.startswith("data:"):
            return f"url({background.value}) center/cover no-repeat"
        return background.value

    def border_css(self, border: Border) -> str:
        """Render the CSS ``border`` value for a border."""
        if not border.enabled:
            return "none"
        # Two-tone dashed/dotted borders are drawn by the client on top of this.
        return f"{border.width}px {border.style.value} {border.color}"

    def preview(self, doc: DesignDocument) -> dict[str, Any]:
        """Return the canvas-level CSS plus elements in paint order."""
        return {
            "background": self.background_css(doc.background),
            "border": self.border_css(doc.border),
            "elements": [self.element_to_dict(e) for e in sorted(doc.elements, key=lambda e: e.z_index)],
        }
