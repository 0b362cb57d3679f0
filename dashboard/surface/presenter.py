"""
HTML presenter for the in-memory surface.

Converts a widget tree into inline-styled HTML so it can be embedded with
``st.markdown(..., unsafe_allow_html=True)`` or written to a file.
"""

from html import escape
from typing import List

from .nodes import (
    HORIZONTAL,
    ImageNode,
    Node,
    Spacer,
    Stack,
    TextNode,
    Widget,
)

WIDGET_PADDING = 16

_FONT_WEIGHTS = {"regular": 400, "medium": 500, "semibold": 600, "bold": 700}


def _px(value: float) -> str:
    return f"{value:g}px"


def _stack_styles(stack: Stack, scheme: str) -> List[str]:
    horizontal = stack.axis == HORIZONTAL
    styles = [
        "display: flex",
        f"flex-direction: {'row' if horizontal else 'column'}",
        "box-sizing: border-box",
    ]
    if stack.size is not None:
        if stack.size.width:
            styles.append(f"width: {_px(stack.size.width)}")
        if stack.size.height:
            styles.append(f"height: {_px(stack.size.height)}")
    if stack.background_color is not None:
        styles.append(f"background-color: {stack.background_color.resolve(scheme)}")
    if stack.border_width and stack.border_color is not None:
        styles.append(
            f"border: {_px(stack.border_width)} solid {stack.border_color.resolve(scheme)}"
        )
    if stack.corner_radius:
        styles.append(f"border-radius: {_px(stack.corner_radius)}")
    if any(stack.padding):
        styles.append("padding: " + " ".join(_px(p) for p in stack.padding))
    if stack.spacing:
        styles.append(f"gap: {_px(stack.spacing)}")
    if stack.alignment == "bottom":
        styles.append("align-items: flex-end" if horizontal else "justify-content: flex-end")
    elif stack.alignment == "center":
        styles.append("align-items: center")
    return styles


def _render_node(node: Node, scheme: str, parent_axis: str) -> str:
    if isinstance(node, TextNode):
        styles = ["white-space: nowrap"]
        if node.font is not None:
            styles.append(f"font-size: {_px(node.font.size)}")
            styles.append(f"font-weight: {_FONT_WEIGHTS.get(node.font.weight, 400)}")
        if node.text_color is not None:
            styles.append(f"color: {node.text_color.resolve(scheme)}")
        if node.text_opacity != 1.0:
            styles.append(f"opacity: {node.text_opacity:g}")
        return f'<span style="{"; ".join(styles)}">{escape(node.text)}</span>'

    if isinstance(node, ImageNode):
        size = ""
        if node.image_size is not None:
            size = (
                f' width="{node.image_size.width:g}"'
                f' height="{node.image_size.height:g}"'
            )
        return f'<img src="{escape(node.source, quote=True)}"{size} alt="" />'

    if isinstance(node, Spacer):
        if node.length is None:
            return '<div style="flex: 1 1 auto"></div>'
        dimension = "width" if parent_axis == HORIZONTAL else "height"
        return f'<div style="flex: 0 0 auto; {dimension}: {_px(node.length)}"></div>'

    if isinstance(node, Stack):
        inner = "".join(_render_node(child, scheme, node.axis) for child in node.children)
        return f'<div style="{"; ".join(_stack_styles(node, scheme))}">{inner}</div>'

    raise TypeError(f"Cannot present node of type {type(node).__name__}")


def render_html(widget: Widget, scheme: str = "light") -> str:
    """Return the widget as a self-contained HTML fragment."""
    frame = widget.frame
    styles = _stack_styles(widget, scheme) + [
        f"width: {_px(frame.width)}",
        f"min-height: {_px(frame.height)}",
        f"padding: {_px(WIDGET_PADDING)}",
        "border-radius: 22px",
        "font-family: -apple-system, 'Segoe UI', Roboto, Helvetica, Arial, sans-serif",
    ]
    inner = "".join(_render_node(child, scheme, widget.axis) for child in widget.children)
    body = f'<div class="transit-widget" style="{"; ".join(styles)}">{inner}</div>'
    if widget.url:
        body = f'<a href="{escape(widget.url, quote=True)}" style="text-decoration: none">{body}</a>'
    return body
