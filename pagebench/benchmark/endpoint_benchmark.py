"""Runs the measurement phases against one endpoint at a time."""
import logging
import time
from typing import Dict, List, Optional, Tuple, Any

import requests

from .exceptions import BenchmarkExecutionError, LivenessError, PaginationError, RequestError
from .field_extractor import FieldExtractor
from .models import BenchmarkConfig, EndpointSpec, HttpResponse, PaginationState, SampleSet, TraversalResult
from .pagination import PaginationCursor, create_cursor
from .request_executor import RequestExecutor
from .request_session_manager import RequestSessionManager


# Configure logging
logger = logging.getLogger(__name__)


class EndpointBenchmark:
    """Warmup, latency sampling, size measurement and full traversal per endpoint.

    Each endpoint gets its own HTTP session so that phases for different
    endpoints may run on different threads.
    """

    def __init__(self, config: BenchmarkConfig, request_executor: RequestExecutor, field_extractor: FieldExtractor):
        self.config = config
        self.request_executor = request_executor
        self.field_extractor = field_extractor
        self._cursors: Dict[str, PaginationCursor] = {
            endpoint.key: create_cursor(endpoint, config.page_size, field_extractor)
            for endpoint in config.endpoints
        }
        self._sessions: Dict[str, requests.Session] = {
            endpoint.key: RequestSessionManager.create_session(config.max_retries)
            for endpoint in config.endpoints
        }

    def close(self) -> None:
        """Close every endpoint session."""
        for session in self._sessions.values():
            session.close()

    def cursor_for(self, endpoint: EndpointSpec) -> PaginationCursor:
        return self._cursors[endpoint.key]

    def base_url_for(self, endpoint: EndpointSpec) -> str:
        return f"{self.config.base_url}{endpoint.path}"

    def _get(self, endpoint: EndpointSpec, url: str, check_status: bool) -> HttpResponse:
        return self.request_executor.send_request(self._sessions[endpoint.key], url, check_status=check_status)

    def _fetch_page(self, endpoint: EndpointSpec, state: PaginationState) -> Tuple[HttpResponse, Any]:
        url = self.cursor_for(endpoint).build_url(self.config.base_url, state)
        response = self._get(endpoint, url, check_status=self.config.strict_status)
        document = self.field_extractor.parse_document(response.body)
        return response, document

    def check_liveness(self, endpoint: EndpointSpec) -> None:
        """
        Request the endpoint's base path once.

        Raises:
            LivenessError: If the server does not answer or answers with an error status.
        """
        url = self.base_url_for(endpoint)
        try:
            self._get(endpoint, url, check_status=True)
        except RequestError as e:
            raise LivenessError(f"Server not responding at {self.config.base_url} ({e})") from e
        logger.info(f"Server is running at {self.config.base_url}")

    def warmup(self, endpoint: EndpointSpec, n: int) -> int:
        """
        Issue n unmeasured requests against the endpoint's base path.

        Returns:
            Number of requests made.
        """
        url = self.base_url_for(endpoint)
        for _ in range(n):
            self._get(endpoint, url, check_status=False)
        logger.debug(f"{endpoint.display_name}: {n} warmup requests done")
        return n

    def sample_latency(self, endpoint: EndpointSpec, n: int) -> SampleSet:
        """
        Collect exactly n per-request latencies while paging through the endpoint.

        When the last page is reached the walk restarts from the first page,
        so short collections are cycled until the quota is met.
        """
        cursor = self.cursor_for(endpoint)
        state = cursor.initial_state()
        latencies: List[float] = []
        while len(latencies) < n:
            response, document = self._fetch_page(endpoint, state)
            latencies.append(response.elapsed_ms)
            outcome = cursor.advance(state, document)
            if outcome.is_last:
                state = cursor.initial_state()
            else:
                state = outcome.next_state
        logger.debug(f"{endpoint.display_name}: collected {len(latencies)} latency samples")
        return SampleSet(endpoint_key=endpoint.key, latencies_ms=tuple(latencies))

    def measure_size(self, endpoint: EndpointSpec) -> int:
        """Byte length of one response of the endpoint's base path."""
        response = self._get(endpoint, self.base_url_for(endpoint), check_status=self.config.strict_status)
        return len(response.body)

    def traverse(self, endpoint: EndpointSpec) -> TraversalResult:
        """
        Follow the endpoint's pagination from the first page to exhaustion.

        Raises:
            PaginationError: If the endpoint hands out a position it already served.
        """
        cursor = self.cursor_for(endpoint)
        state: Optional[PaginationState] = cursor.initial_state()
        requested = set()
        total_items = 0
        page_count = 0

        start = time.perf_counter()
        while state is not None:
            if state.position in requested:
                raise PaginationError(
                    f"{endpoint.display_name}: pagination returned position {state.position!r} twice",
                    endpoint_key=endpoint.key,
                )
            requested.add(state.position)
            _, document = self._fetch_page(endpoint, state)
            outcome = cursor.advance(state, document)
            if outcome.counted:
                total_items += outcome.item_count
                page_count += 1
            state = outcome.next_state
        elapsed = time.perf_counter() - start

        logger.debug(f"{endpoint.display_name}: traversed {page_count} pages, {total_items} items in {elapsed:.2f}s")
        return TraversalResult(total_items=total_items, page_count=page_count, elapsed_seconds=elapsed)

    def run_phase(self, phase: str, endpoint: EndpointSpec, func, *args):
        """Run one phase method, tagging any execution failure with the phase and endpoint."""
        try:
            return func(endpoint, *args)
        except BenchmarkExecutionError as e:
            if e.phase is None:
                e.phase = phase
            if e.endpoint_key is None:
                e.endpoint_key = endpoint.key
            raise
