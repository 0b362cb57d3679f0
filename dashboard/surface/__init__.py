"""Host surface used by the widgets: node tree plus HTML presenter."""

from .presenter import render_html
from .nodes import HORIZONTAL, VERTICAL, ImageNode, Node, Spacer, Stack, TextNode, Widget

__all__ = [
    "HORIZONTAL",
    "VERTICAL",
    "ImageNode",
    "Node",
    "Spacer",
    "Stack",
    "TextNode",
    "Widget",
    "render_html",
]
