"""Project-wide single-source configuration constants for the transit widgets."""

# ------ Remote resources -------
METRICS_BASE_URL: str = "https://api.carrismetropolitana.pt/v2/metrics/videowall"
DELAYS_URL: str = f"{METRICS_BASE_URL}/delays"
VALIDATIONS_URL: str = f"{METRICS_BASE_URL}/validations"
TRAINS_URL: str = "https://www.cp.pt/sites/spring/station/trains"
STATION_INDEX_URL: str = "https://www.cp.pt/sites/spring/station-index"
TRAINS_LINK_URL: str = "https://www.cp.pt/passageiros/pt/consultar-horarios/proximos-comboios"
TRAINS_LOGO_URL: str = (
    "https://upload.wikimedia.org/wikipedia/commons/thumb/7/77/"
    "Logo_CP_2.svg/320px-Logo_CP_2.svg.png"
)
HTTP_TIMEOUT_SEC: float = 10.0         # Single-shot fetch; no retries

# ------ Categories -------
NETWORK_CODE: str = "cm"                                   # Network-wide aggregate
CATEGORY_CODES: tuple[str, ...] = ("cm", "41", "42", "43", "44")
COUNTER_TEMPLATE: str = "_{code}_{suffix}_count"

# ------ Sentiment thresholds -------
DELAY_RATIO_BAD_ABOVE: float = 0.095   # > 9.5% delayed trips is bad
VALIDATION_NORMAL_BELOW: float = 1.0   # Fewer validations than last week

# ------ Locale (pt-PT) -------
DISPLAY_TZ: str = "Europe/Lisbon"
GROUP_SEPARATOR: str = "\u00a0"   # No-break space
MIN_GROUPING_DIGITS: int = 2           # CLDR pt-PT: 1234 stays ungrouped
UPDATED_AT_TEMPLATE: str = "Atualizado às {time}"
ERROR_TITLE_TEMPLATE: str = 'O argumento "{code}" não é válido.'
ERROR_VALUE: str = "ERROR"

# ------ Card geometry -------
CARD_CORNER_RADIUS: int = 20
CARD_BORDER_WIDTH: int = 5
CARD_PADDING: int = 15
CARD_TITLE_SPACING: int = 10           # Spacer between title and values
SECONDARY_GAP: int = 5                 # Gap between primary and secondary values
WIDGET_SPACING: int = 10               # Vertical spacing between widget rows
ROW_SPACING: int = 10                  # Horizontal spacing between paired cards
FOOTER_LEFT_PADDING: int = 10

# ------ Colours (light, dark) -------
PALETTE_HEX: dict[str, dict[str, tuple[str, str]]] = {
    "blue": {
        "strong": ("#0096ff", "#0096ff"),
        "medium": ("#27529a", "#27529a"),
        "soft": ("#d1ebfd", "#002350"),
    },
    "green": {
        "strong": ("#00af3c", "#00af3c"),
        "medium": ("#11690b", "#11690b"),
        "soft": ("#c4f6d5", "#23321e"),
    },
    "orange": {
        "strong": ("#ff5f14", "#ff5f14"),
        "medium": ("#9a6e0c", "#9a6e0c"),
        "soft": ("#f9d9cb", "#3e3a0b"),
    },
}
TEXT_STRONG_HEX: tuple[str, str] = ("#3a3a3a", "#ffffff")
TEXT_MUTED_HEX: tuple[str, str] = ("#3a3a3a", "#adadb0")
BACKGROUND_HEX: tuple[str, str] = ("#ffffff", "#1c1c1c")

# Next trains widget
TRAINS_PRIMARY_HEX: tuple[str, str] = ("#608f3d", "#bdd298")
TRAINS_TEXT_HEX: tuple[str, str] = ("#1c1c1e", "#ffffff")
TRAINS_BACKGROUND_HEX: tuple[str, str] = ("#ffffff", "#1c1c1e")
TRAINS_DELAY_HEX: tuple[str, str] = ("#d22e2e", "#fd8c8c")
TRAINS_ROWS: int = 3
TRAINS_LOGO_SIZE: int = 20

# ------ Presentation sizes -------
PRESENTATION_SIZES: dict[str, tuple[int, int]] = {
    "small": (170, 170),
    "medium": (364, 170),
    "large": (364, 382),
}
