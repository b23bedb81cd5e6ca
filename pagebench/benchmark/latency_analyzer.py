"""Analyzes and computes latency statistics."""
import logging
from typing import Sequence
import numpy as np

from .constants import BenchmarkConstants
from .exceptions import EmptySampleSetError
from .models import SampleSet, StatSummary


# Configure logging
logger = logging.getLogger(__name__)


class LatencyAnalyzer:
    """Analyzes and computes latency statistics."""

    @staticmethod
    def nearest_rank(sorted_values: np.ndarray, fraction: float) -> float:
        """
        Nearest-rank percentile: 1-based index floor(n * fraction), at least 1.

        No interpolation, so results match a plain sort-and-index tool.
        """
        index = max(int(len(sorted_values) * fraction), 1)
        return float(sorted_values[index - 1])

    @staticmethod
    def compute_summary(latencies: Sequence[float]) -> StatSummary:
        """
        Compute min, max, mean, p50 and p95.

        Args:
            latencies: Latency measurements in any order.

        Returns:
            StatSummary dataclass.

        Raises:
            EmptySampleSetError: If there are no measurements.
        """
        if len(latencies) == 0:
            raise EmptySampleSetError("Cannot summarize an empty sample set")

        values = np.sort(np.asarray(latencies, dtype=float))
        return StatSummary(
            min=float(values[0]),
            max=float(values[-1]),
            mean=float(np.mean(values)),
            p50=LatencyAnalyzer.nearest_rank(values, BenchmarkConstants.P50),
            p95=LatencyAnalyzer.nearest_rank(values, BenchmarkConstants.P95),
        )

    @staticmethod
    def summarize(samples: SampleSet) -> StatSummary:
        """Summarize one endpoint's sample set."""
        try:
            return LatencyAnalyzer.compute_summary(samples.latencies_ms)
        except EmptySampleSetError as e:
            e.endpoint_key = samples.endpoint_key
            raise
