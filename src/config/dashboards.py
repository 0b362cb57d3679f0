"""Dashboard presets: one frozen ``DashboardConfig`` per widget variant."""

from config.config import (
    DELAY_RATIO_BAD_ABOVE,
    DELAYS_URL,
    VALIDATION_NORMAL_BELOW,
    VALIDATIONS_URL,
)
from config.models import (
    DashboardConfig,
    DerivationMode,
    FontSet,
    FontSpec,
    Sentiment,
    Size,
    ThresholdRule,
)

DELAY_RULE = ThresholdRule(
    threshold=DELAY_RATIO_BAD_ABOVE, comparison="gt", when_true=Sentiment.BAD
)
VALIDATION_RULE = ThresholdRule(
    threshold=VALIDATION_NORMAL_BELOW, comparison="lt", when_true=Sentiment.NORMAL
)

DELAYS_DASHBOARD = DashboardConfig(
    name="delays",
    endpoint=DELAYS_URL,
    mode=DerivationMode.DELAY_RATIO,
    rule=DELAY_RULE,
    breakpoint=100,
    headline_size=Size(322, 90),
    area_size=Size(310 / 2, 90),
    headline_title="⏱️ CM - Viagens atrasadas > 5 min",
    area_title_template="⏱️ Area {area}",
    fonts=FontSet(
        title=FontSpec("semibold", 36),
        subtitle=FontSpec("regular", 16),
        text=FontSpec("regular", 12),
    ),
)

VALIDATIONS_DASHBOARD = DashboardConfig(
    name="validations",
    endpoint=VALIDATIONS_URL,
    mode=DerivationMode.VALIDATION,
    rule=VALIDATION_RULE,
    breakpoint=300,
    headline_size=Size(322, 70),
    area_size=Size(310 / 2, 90),
    headline_title="💳 Carris Metropolitana",
    area_title_template="💳 Area {area}",
    fonts=FontSet(
        title=FontSpec("semibold", 20),
        subtitle=FontSpec("regular", 16),
        text=FontSpec("regular", 12),
    ),
)

# Single category chosen by the invocation parameter
VALIDATIONS_SINGLE = DashboardConfig(
    name="single",
    endpoint=VALIDATIONS_URL,
    mode=DerivationMode.VALIDATION,
    rule=VALIDATION_RULE,
    breakpoint=0,
    headline_size=Size(330, 155),
    area_size=Size(330, 155),
    headline_title="💳 Carris Metropolitana",
    area_title_template="💳 Area {area}",
    fonts=FontSet(
        title=FontSpec("semibold", 48),
        subtitle=FontSpec("regular", 22),
        text=FontSpec("regular", 16),
    ),
    border_width=10,
    subtitle="Passageiros transportados hoje, até agora",
    presentation="medium",
)

DASHBOARDS = {
    config.name: config
    for config in (DELAYS_DASHBOARD, VALIDATIONS_DASHBOARD, VALIDATIONS_SINGLE)
}
