"""Core domain model, layout engine and editor session."""

from daf_invite.core.colors import (
    BackgroundColorTarget,
    BorderColorTarget,
    ColorTarget,
    ElementColorTarget,
    GradientStopTarget,
    PaletteColorTarget,
)
from daf_invite.core.history import DesignHistory
from daf_invite.core.layout import (
    CanvasRect,
    center_all,
    format_event_datetime,
    reconcile_bound_elements,
    snap_to_fit,
    synthesize_default_elements,
)
from daf_invite.core.models import (
    Background,
    Border,
    CustomColors,
    DesignDocument,
    DesignElement,
    ElementStyle,
    Event,
    EventData,
    Position,
    Size,
    create_image_element,
    create_text_element,
)
from daf_invite.core.session import EditorSession
from daf_invite.core.types import BackgroundKind, BorderStyle, ElementKind, TextAlign

__all__ = [
    "Background",
    "BackgroundColorTarget",
    "BackgroundKind",
    "Border",
    "BorderColorTarget",
    "BorderStyle",
    "CanvasRect",
    "ColorTarget",
    "CustomColors",
    "DesignDocument",
    "DesignElement",
    "DesignHistory",
    "EditorSession",
    "ElementColorTarget",
    "ElementKind",
    "ElementStyle",
    "Event",
    "EventData",
    "GradientStopTarget",
    "PaletteColorTarget",
    "Position",
    "Size",
    "TextAlign",
    "center_all",
    "create_image_element",
    "create_text_element",
    "format_event_datetime",
    "reconcile_bound_elements",
    "snap_to_fit",
    "synthesize_default_elements",
]
