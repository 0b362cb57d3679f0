"""
Transit Widgets - Streamlit Application

Presents the delays, validations, single-category and next-trains widgets.
"""

import streamlit as st
import sys
from pathlib import Path

# Add src and the repository root to the Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.dashboards import DELAYS_DASHBOARD, VALIDATIONS_DASHBOARD
from dashboard.components.metrics_panel import render_dashboard, render_single
from dashboard.components.next_trains import render_trains_panel
from dashboard.surface import render_html
from utils.errors import WidgetError
from utils.logging import dashboard_logger

WIDGETS = {
    "⏱️ Atrasos": "delays",
    "💳 Validações": "validations",
    "💳 Validações (área)": "single",
    "🚆 Próximos comboios": "trains",
}


def build_widget(kind: str, parameter: str):
    """Build the widget tree for the selected variant."""
    if kind == "delays":
        return render_dashboard(DELAYS_DASHBOARD)
    if kind == "validations":
        return render_dashboard(VALIDATIONS_DASHBOARD)
    if kind == "single":
        return render_single(parameter or None)
    return render_trains_panel(parameter)


def main():
    """Main dashboard application."""

    st.set_page_config(
        page_title="Transit Widgets",
        page_icon="🚌",
        layout="centered",
    )

    st.sidebar.title("🧭 Widgets")
    label = st.sidebar.selectbox("Select widget:", options=list(WIDGETS), index=0)
    kind = WIDGETS[label]

    parameter = ""
    if kind == "single":
        parameter = st.sidebar.text_input("Category code", value="cm",
                                          help="cm, 41, 42, 43 or 44")
    elif kind == "trains":
        parameter = st.sidebar.text_input("Station id", value="",
                                          help="Station id from the train service index")

    scheme = "dark" if st.sidebar.toggle("🌙 Dark appearance", value=False) else "light"

    if st.sidebar.button("🔄 Refresh Now"):
        st.rerun()

    if kind == "trains" and not parameter.strip():
        st.info("Enter a station id in the sidebar.")
        return

    try:
        widget = build_widget(kind, parameter)
    except WidgetError as e:
        dashboard_logger.error(f"Render failed for {kind}: {e}")
        st.error(f"❌ Error rendering widget: {e}")
        return

    st.markdown(render_html(widget, scheme=scheme), unsafe_allow_html=True)


if __name__ == "__main__":
    main()
