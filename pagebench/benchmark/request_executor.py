"""Handles individual request execution and timing."""
import time
import logging
from typing import Optional
import requests

from pagebench.const import HTTP_BAD_REQUEST

from .constants import BenchmarkConstants
from .exceptions import HttpStatusError, RequestError
from .models import HttpResponse


# Configure logging
logger = logging.getLogger(__name__)


class RequestExecutor:
    """Handles individual request execution and timing."""

    def __init__(self, timeout: Optional[float] = BenchmarkConstants.DEFAULT_TIMEOUT):
        self.timeout = timeout

    def send_request(self, session: requests.Session, url: str, check_status: bool = False) -> HttpResponse:
        """
        Send a single GET and measure its latency.

        Args:
            session: Requests session.
            url: Fully built page URL.
            check_status: Raise on 4xx/5xx answers instead of returning them.

        Returns:
            HttpResponse with the status, the raw body and the elapsed milliseconds.

        Raises:
            RequestError: If no response was received (connection, timeout, bad URL).
            HttpStatusError: If check_status is set and the status is an error.
        """
        start_time = time.perf_counter()
        try:
            response = session.get(url, timeout=self.timeout)
            body = response.content
        except requests.RequestException as e:
            logger.error(f"Request failed: {e}")
            raise RequestError(f"Request to {url} failed: {e}", url=url) from e
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        if check_status and response.status_code >= HTTP_BAD_REQUEST:
            logger.error(f"Request to {url} answered {response.status_code}")
            raise HttpStatusError(
                f"Request to {url} answered HTTP {response.status_code}",
                url=url,
                status_code=response.status_code,
            )

        return HttpResponse(url=url, status_code=response.status_code, body=body, elapsed_ms=elapsed_ms)
