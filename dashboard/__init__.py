"""Dashboard package namespace.

This package contains the widget components, the host surface they draw
on and the front ends that present them. Components are framework-agnostic:
each exposes a small `render_*` function that appends layout nodes to a
`dashboard.surface` tree, which Streamlit or the CLI then presents as HTML.
"""
