"""Base collector class for the remote JSON sources."""

from typing import Any, Dict, Optional

import requests

from config.config import HTTP_TIMEOUT_SEC
from utils.errors import FetchError, ParseError
from utils.logging import get_logger

logger = get_logger(__name__)


class BaseCollector:
    """Single-shot JSON fetcher shared by every data source.

    One GET per call, no retries: a failed request surfaces as
    ``FetchError`` and a body that is not JSON as ``ParseError``. The
    caller decides what a failure means for the render.
    """

    def __init__(
        self,
        source_name: str,
        session: Optional[requests.Session] = None,
        timeout: float = HTTP_TIMEOUT_SEC,
    ):
        """Initialize the collector.

        Args:
            source_name: Name of the data source (e.g., "delays", "trains")
            session: Optional requests session; module-level ``requests`` when omitted
            timeout: Request timeout in seconds
        """
        self.source_name = source_name
        self.session = session
        self.timeout = timeout

    def _handle_error(self, error: Exception, context: str = "") -> None:
        """Log errors consistently across collectors."""
        context_str = f" ({context})" if context else ""
        logger.error(f"[{self.source_name}] Error{context_str}: {error}")

    def fetch_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET ``url`` and return the decoded JSON body."""
        http = self.session or requests
        logger.debug(f"[{self.source_name}] GET {url} params={params}")
        try:
            response = http.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            self._handle_error(e, url)
            raise FetchError(url, str(e)) from e

        try:
            return response.json()
        except ValueError as e:
            self._handle_error(e, "decode")
            raise ParseError(f"Response from {url} is not valid JSON") from e
