"""HTTP sessions used to talk to the endpoints under test."""
import logging
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from pagebench import __version__

from .constants import BenchmarkConstants


logger = logging.getLogger(__name__)


class RequestSessionManager:
    """Builds one pooled session per endpoint."""

    @staticmethod
    def create_session(max_retries: int = BenchmarkConstants.DEFAULT_MAX_RETRIES) -> requests.Session:
        """
        Session asking for JSON, with optional transport-level retries.

        Retries default to zero: a retried page would hide its real latency.
        """
        retry = Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=BenchmarkConstants.RETRY_STATUS_CODES,
            allowed_methods=["GET"],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry, pool_connections=1, pool_maxsize=1)

        session = requests.Session()
        session.headers.update({
            "Accept": "application/json",
            "User-Agent": f"pagebench/{__version__}",
        })
        for prefix in ("http://", "https://"):
            session.mount(prefix, adapter)
        logger.debug(f"HTTP session ready ({max_retries} transport retries)")
        return session
