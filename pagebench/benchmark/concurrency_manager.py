"""Runs one benchmark phase across endpoints, sequentially or in parallel."""
import logging
import concurrent.futures
from typing import Callable, Dict, List, TypeVar

from .models import EndpointSpec


# Configure logging
logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConcurrencyManager:
    """Schedules per-endpoint work of a phase.

    Each endpoint's work runs start to finish on a single thread, so page
    order within an endpoint is never interleaved. A failure in any endpoint
    is raised after the phase's other work has been waited for.
    """

    def __init__(self, max_workers: int = 1):
        self.max_workers = max_workers

    def run_phase(self, endpoints: List[EndpointSpec], work: Callable[[EndpointSpec], T]) -> Dict[str, T]:
        """
        Apply work to every endpoint.

        Args:
            endpoints: Endpoints in report order.
            work: Callable taking an endpoint and returning its phase result.

        Returns:
            Results keyed by endpoint key, in endpoint order.
        """
        if self.max_workers <= 1 or len(endpoints) <= 1:
            return {endpoint.key: work(endpoint) for endpoint in endpoints}

        workers = min(self.max_workers, len(endpoints))
        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {endpoint.key: executor.submit(work, endpoint) for endpoint in endpoints}
            concurrent.futures.wait(futures.values())

        results = {}
        for key, future in futures.items():
            error = future.exception()
            if error is not None:
                logger.error(f"Phase failed for endpoint {key}: {error}")
                raise error
            results[key] = future.result()
        return results
