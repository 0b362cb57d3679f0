"""Exception taxonomy shared by the fetchers, the deriver and the panels.

Fetch, parse and format errors abort a render. Metric and parameter errors
are caught by the panels and turned into a single error card.
"""


class WidgetError(Exception):
    """Base class for every error raised while building a widget."""


class FetchError(WidgetError):
    """Transport failure, timeout or non-2xx response."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to fetch {url}: {reason}")


class ParseError(WidgetError):
    """Response body is not JSON or lacks the expected fields."""


class InvalidMetricError(WidgetError):
    """A counter is missing or a derived ratio is undefined."""

    def __init__(self, code: str, reason: str):
        self.code = code
        self.reason = reason
        super().__init__(f"Invalid metric for '{code}': {reason}")


class InvalidParameterError(WidgetError):
    """The invocation parameter does not name a known category or station."""

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"Unknown parameter: {parameter!r}")


class FormatError(WidgetError):
    """A timestamp could not be parsed."""


class LayoutError(WidgetError, ValueError):
    """The configured categories cannot be laid out as a grid."""
