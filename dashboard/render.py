"""Render one widget to an HTML file from the command line."""

import argparse
import sys
from typing import Optional, Sequence

from config.dashboards import DASHBOARDS
from config.models import DashboardConfig
from dashboard.components.metrics_panel import render_dashboard, render_single
from dashboard.components.next_trains import render_trains_panel
from dashboard.surface import Widget, render_html
from utils.errors import WidgetError
from utils.io import write_text
from utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a transit widget as HTML")
    parser.add_argument("--widget", choices=["delays", "validations", "single", "trains"],
                        default="delays", help="Widget variant to render")
    parser.add_argument("--param", default=None,
                        help="Category code (single) or station id (trains)")
    parser.add_argument("--scheme", choices=["light", "dark"], default="light",
                        help="Colour appearance")
    parser.add_argument("--config", default=None,
                        help="YAML file with a 'dashboard' section of overrides")
    parser.add_argument("--out", default="widget.html", help="Output HTML path")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser


def build_widget(widget: str, param: Optional[str], config_path: Optional[str]) -> Widget:
    if widget == "trains":
        return render_trains_panel(param)
    config: DashboardConfig = DashboardConfig.from_yaml(config_path, DASHBOARDS[widget])
    if widget == "single":
        return render_single(param, config)
    return render_dashboard(config)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        widget = build_widget(args.widget, args.param, args.config)
    except WidgetError as e:
        logger.error(f"Render failed: {e}")
        return 1

    path = write_text(args.out, render_html(widget, scheme=args.scheme))
    logger.info(f"Wrote {args.widget} widget to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
