"""
In-memory host surface.

Implements the small set of layout intents the widgets issue: nested
stacks, text, images and spacers, each carrying size, padding, radius,
border, background and axis attributes. The engine only writes to these
nodes; `to_dict()` exists so tests and presenters can inspect the result.
"""

from dataclasses import asdict
from typing import Any, Dict, List, Optional, Tuple

from config.config import PRESENTATION_SIZES
from config.models import DynamicColor, FontSpec, Size

Padding = Tuple[float, float, float, float]  # top, right, bottom, left

HORIZONTAL = "horizontal"
VERTICAL = "vertical"


def _color_dict(color: Optional[DynamicColor]) -> Optional[Dict[str, str]]:
    return asdict(color) if color is not None else None


class Node:
    kind = "node"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind}


class TextNode(Node):
    kind = "text"

    def __init__(self, text: str):
        self.text = text
        self.font: Optional[FontSpec] = None
        self.text_color: Optional[DynamicColor] = None
        self.text_opacity: float = 1.0

    def set_font(self, font: FontSpec) -> None:
        self.font = font

    def set_text_color(self, color: DynamicColor) -> None:
        self.text_color = color

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "text": self.text,
            "font": asdict(self.font) if self.font else None,
            "color": _color_dict(self.text_color),
            "opacity": self.text_opacity,
        }


class ImageNode(Node):
    kind = "image"

    def __init__(self, source: str):
        self.source = source
        self.image_size: Optional[Size] = None
        self.alignment = "left"

    def set_size(self, size: Size) -> None:
        self.image_size = size

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "source": self.source,
            "size": asdict(self.image_size) if self.image_size else None,
            "alignment": self.alignment,
        }


class Spacer(Node):
    """Fixed-length gap, or a flexible one when ``length`` is None."""
    kind = "spacer"

    def __init__(self, length: Optional[float] = None):
        self.length = length

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "length": self.length}


class Stack(Node):
    kind = "stack"
    default_axis = HORIZONTAL

    def __init__(self):
        self.children: List[Node] = []
        self.size: Optional[Size] = None
        self.background_color: Optional[DynamicColor] = None
        self.border_width: float = 0
        self.border_color: Optional[DynamicColor] = None
        self.corner_radius: float = 0
        self.padding: Padding = (0, 0, 0, 0)
        self.axis = self.default_axis
        self.alignment = "top"
        self.spacing: float = 0

    # Children
    def add_stack(self) -> "Stack":
        stack = Stack()
        self.children.append(stack)
        return stack

    def add_text(self, text: str) -> TextNode:
        node = TextNode(text)
        self.children.append(node)
        return node

    def add_image(self, source: str) -> ImageNode:
        node = ImageNode(source)
        self.children.append(node)
        return node

    def add_spacer(self, length: Optional[float] = None) -> Spacer:
        node = Spacer(length)
        self.children.append(node)
        return node

    # Attributes
    def set_size(self, size: Size) -> None:
        self.size = size

    def set_background_color(self, color: DynamicColor) -> None:
        self.background_color = color

    def set_border(self, width: float, color: DynamicColor) -> None:
        self.border_width = width
        self.border_color = color

    def set_corner_radius(self, radius: float) -> None:
        self.corner_radius = radius

    def set_padding(self, top: float, right: float, bottom: float, left: float) -> None:
        self.padding = (top, right, bottom, left)

    def layout_horizontally(self) -> None:
        self.axis = HORIZONTAL

    def layout_vertically(self) -> None:
        self.axis = VERTICAL

    def bottom_align_content(self) -> None:
        self.alignment = "bottom"

    def center_align_content(self) -> None:
        self.alignment = "center"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "size": asdict(self.size) if self.size else None,
            "background": _color_dict(self.background_color),
            "border": {"width": self.border_width, "color": _color_dict(self.border_color)},
            "corner_radius": self.corner_radius,
            "padding": list(self.padding),
            "axis": self.axis,
            "alignment": self.alignment,
            "spacing": self.spacing,
            "children": [child.to_dict() for child in self.children],
        }


class Widget(Stack):
    """Root container presented by the host."""
    kind = "widget"
    default_axis = VERTICAL

    def __init__(self, presentation: str = "large"):
        super().__init__()
        if presentation not in PRESENTATION_SIZES:
            raise ValueError(f"Unknown presentation size: {presentation!r}")
        self.presentation = presentation
        self.url: Optional[str] = None

    @property
    def frame(self) -> Size:
        width, height = PRESENTATION_SIZES[self.presentation]
        return Size(width, height)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update({"presentation": self.presentation, "url": self.url})
        return data
