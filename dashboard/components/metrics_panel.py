"""
Metrics panels: fetch, derive, classify and lay out one dashboard variant.

This is the recovery boundary of a render pass. Invalid metrics and unknown
invocation parameters become a single error card; fetch, parse and
timestamp errors propagate to the caller.
"""

from typing import Callable, Optional

from config.dashboards import VALIDATIONS_SINGLE
from config.models import DashboardConfig
from config.schemas import RawMetricsDocument
from dashboard.components.grid import compose_grid
from dashboard.components.layout import CardSpec, CardStyle, render_card, render_error_card
from dashboard.surface import Widget
from data_pipeline.collectors.metrics_collector import fetch_metrics
from data_pipeline.processors.derivation import derive_all, derive_metric
from metrics.sentiment import classify_metric
from utils.datetime import normalize_timestamp
from utils.errors import InvalidMetricError, InvalidParameterError
from utils.logging import get_logger

logger = get_logger(__name__)

Fetcher = Callable[[str], RawMetricsDocument]


def _new_widget(config: DashboardConfig) -> Widget:
    widget = Widget(config.presentation)
    widget.set_background_color(config.background)
    widget.url = config.link_url
    return widget


def _load(config: DashboardConfig, document: Optional[RawMetricsDocument], fetcher: Optional[Fetcher]) -> RawMetricsDocument:
    if document is not None:
        return document
    return (fetcher or fetch_metrics)(config.endpoint)


def resolve_category(parameter: Optional[str], config: DashboardConfig) -> str:
    """Normalise the invocation parameter to a known category code.

    Raises:
        InvalidParameterError: If the code is not one of ``config.categories``.
    """
    code = (parameter or "").strip().lower() or config.network_code
    if code not in config.categories:
        raise InvalidParameterError(code)
    return code


def render_dashboard(
    config: DashboardConfig,
    *,
    document: Optional[RawMetricsDocument] = None,
    fetcher: Optional[Fetcher] = None,
) -> Widget:
    """
    Render the headline + area grid of a dashboard variant.

    Args:
        config: Dashboard preset
        document: Already-fetched metrics; fetched from ``config.endpoint`` when None
        fetcher: Replacement for ``fetch_metrics``

    Returns:
        The populated widget
    """
    document = _load(config, document, fetcher)
    widget = _new_widget(config)

    try:
        derived = derive_all(document, config.categories, config.mode)
        items = [
            (code, metric, classify_metric(metric, config.rule, code))
            for code, metric in derived
        ]
    except InvalidMetricError as e:
        logger.warning(f"[{config.name}] Rendering error card: {e}")
        render_error_card(widget, e.code, config.headline_size, CardStyle.from_config(config))
        return widget

    compose_grid(widget, items, document["timestamp_resource"], config)
    logger.info(f"[{config.name}] Rendered {len(items)} cards")
    return widget


def render_single(
    parameter: Optional[str],
    config: DashboardConfig = VALIDATIONS_SINGLE,
    *,
    document: Optional[RawMetricsDocument] = None,
    fetcher: Optional[Fetcher] = None,
) -> Widget:
    """
    Render one category chosen by the invocation parameter.

    An absent parameter selects the network-wide code; matching is
    case-insensitive. Unknown codes are rejected before any fetch.
    """
    widget = _new_widget(config)
    style = CardStyle.from_config(config)

    try:
        code = resolve_category(parameter, config)
    except InvalidParameterError as e:
        logger.warning(f"[{config.name}] Rendering error card: {e}")
        render_error_card(widget, e.parameter, config.headline_size, style)
        return widget

    document = _load(config, document, fetcher)
    footnote = normalize_timestamp(document["timestamp_resource"])

    try:
        metric = derive_metric(document, code, config.mode)
        sentiment = classify_metric(metric, config.rule, code)
    except InvalidMetricError as e:
        logger.warning(f"[{config.name}] Rendering error card: {e}")
        render_error_card(widget, code, config.headline_size, style, footnote=footnote)
        return widget

    render_card(
        widget,
        CardSpec(
            sentiment=sentiment,
            title=config.title_for(code),
            primary_value=metric.primary_display,
            secondary_value=metric.secondary_display,
            size=config.headline_size,
            subtitle=config.subtitle,
            footnote=footnote,
        ),
        style,
    )
    return widget
