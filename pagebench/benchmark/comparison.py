"""Relative improvement of candidate endpoints over the baseline."""
import logging
from typing import List, Optional

from .models import Comparison, EndpointResult


logger = logging.getLogger(__name__)


def improvement_percent(baseline: float, candidate: float) -> Optional[float]:
    """
    Percentage by which candidate beats baseline: (1 - candidate / baseline) * 100.

    Positive means the candidate is faster or smaller. Returns None when the
    baseline is zero and the ratio is undefined.
    """
    if baseline == 0:
        logger.warning("Baseline value is zero, improvement is undefined")
        return None
    return (1 - candidate / baseline) * 100


def compare(baseline: EndpointResult, candidate: EndpointResult) -> Comparison:
    """Compare mean latency, response size and traversal time of two endpoints."""
    return Comparison(
        baseline_key=baseline.endpoint.key,
        candidate_key=candidate.endpoint.key,
        latency_improvement=improvement_percent(baseline.stats.mean, candidate.stats.mean),
        size_improvement=improvement_percent(baseline.size_bytes, candidate.size_bytes),
        traversal_improvement=improvement_percent(
            baseline.traversal.elapsed_seconds, candidate.traversal.elapsed_seconds
        ),
    )


def compare_all(results: List[EndpointResult]) -> List[Comparison]:
    """Compare every endpoint after the first against the first one."""
    if not results:
        return []
    baseline = results[0]
    return [compare(baseline, candidate) for candidate in results[1:]]
