"""Unit tests for improvement percentages."""

from dataclasses import replace

import pytest

from pagebench.benchmark.comparison import compare, compare_all, improvement_percent
from pagebench.benchmark.models import EndpointResult, SampleSet, StatSummary, TraversalResult


def _result(endpoint, mean: float, size: int, seconds: float) -> EndpointResult:
    return EndpointResult(
        endpoint=endpoint,
        samples=SampleSet(endpoint_key=endpoint.key, latencies_ms=(mean,)),
        stats=StatSummary(min=mean, max=mean, mean=mean, p50=mean, p95=mean),
        size_bytes=size,
        traversal=TraversalResult(total_items=340, page_count=4, elapsed_seconds=seconds),
    )


class TestImprovementPercent:
    """Test the improvement formula."""

    def test_candidate_twice_as_fast(self):
        assert improvement_percent(100, 50) == 50.0

    def test_candidate_twice_as_slow(self):
        assert improvement_percent(50, 100) == -100.0

    def test_equal_values(self):
        assert improvement_percent(10, 10) == 0.0

    def test_zero_baseline_is_undefined(self):
        """Test that a zero baseline yields None instead of inf or NaN."""
        assert improvement_percent(0, 10) is None


class TestCompare:
    """Test endpoint comparisons."""

    def test_compare_two_endpoints(self, offset_endpoint, cursor_endpoint):
        baseline = _result(offset_endpoint, mean=20.0, size=4000, seconds=2.0)
        candidate = _result(cursor_endpoint, mean=5.0, size=1000, seconds=0.5)

        comparison = compare(baseline, candidate)

        assert comparison.baseline_key == "a"
        assert comparison.candidate_key == "b"
        assert comparison.latency_improvement == pytest.approx(75.0)
        assert comparison.size_improvement == pytest.approx(75.0)
        assert comparison.traversal_improvement == pytest.approx(75.0)

    def test_compare_all_uses_first_endpoint_as_baseline(self, offset_endpoint, cursor_endpoint):
        third = replace(cursor_endpoint, key="c")
        results = [
            _result(offset_endpoint, 10.0, 100, 1.0),
            _result(cursor_endpoint, 5.0, 50, 0.5),
            _result(third, 20.0, 200, 2.0),
        ]

        comparisons = compare_all(results)

        assert [(c.baseline_key, c.candidate_key) for c in comparisons] == [("a", "b"), ("a", "c")]
        assert comparisons[1].latency_improvement == pytest.approx(-100.0)

    def test_compare_all_empty(self):
        assert compare_all([]) == []

    def test_zero_size_baseline(self, offset_endpoint, cursor_endpoint):
        comparison = compare(_result(offset_endpoint, 10.0, 0, 1.0), _result(cursor_endpoint, 5.0, 10, 0.5))
        assert comparison.size_improvement is None
        assert comparison.latency_improvement == pytest.approx(50.0)
