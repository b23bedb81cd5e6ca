"""Shared test configuration and fixtures for all tests."""

from typing import Any, Dict, Optional

import pytest

from pagebench.benchmark.comparison import compare_all
from pagebench.benchmark.field_extractor import FieldExtractor
from pagebench.benchmark.jmespath_query import JmesPathQuery
from pagebench.benchmark.models import (
    BenchmarkConfig, BenchmarkReport, EndpointResult, EndpointSpec, PaginationStyle, SampleSet, StatSummary,
    TraversalResult,
)
from tests.helpers import ScriptedExecutor
from tests.test_const import (
    CURSOR_COUNT_EXPR, CURSOR_NAME, CURSOR_NEXT_EXPR, CURSOR_PATH,
    OFFSET_COUNT_EXPR, OFFSET_HAS_NEXT_EXPR, OFFSET_NAME, OFFSET_PATH, PAGE_SIZE, TEST_BASE_URL, TOTAL_ITEMS,
)


@pytest.fixture
def extractor() -> FieldExtractor:
    """Field extractor backed by JMESPath."""
    return FieldExtractor(JmesPathQuery())


@pytest.fixture
def offset_endpoint() -> EndpointSpec:
    """Offset-paginated HAL endpoint."""
    return EndpointSpec(
        key="a",
        path=OFFSET_PATH,
        display_name=OFFSET_NAME,
        style=PaginationStyle.OFFSET,
        param_name="page",
        count_expr=OFFSET_COUNT_EXPR,
        has_next_expr=OFFSET_HAS_NEXT_EXPR,
    )


@pytest.fixture
def cursor_endpoint() -> EndpointSpec:
    """Keyset-paginated bare-array endpoint."""
    return EndpointSpec(
        key="b",
        path=CURSOR_PATH,
        display_name=CURSOR_NAME,
        style=PaginationStyle.CURSOR,
        param_name="afterId",
        count_expr=CURSOR_COUNT_EXPR,
        cursor_expr=CURSOR_NEXT_EXPR,
    )


@pytest.fixture
def benchmark_config(offset_endpoint, cursor_endpoint) -> BenchmarkConfig:
    """Two-endpoint configuration with small request counts."""
    return BenchmarkConfig(
        base_url=TEST_BASE_URL,
        endpoints=[offset_endpoint, cursor_endpoint],
        page_size=PAGE_SIZE,
        warmup_requests=2,
        benchmark_requests=5,
    )


@pytest.fixture
def scripted_executor_factory():
    """Factory fixture for ScriptedExecutor instances."""
    def _factory(pages: Dict[str, Any], default: Optional[Any] = None, **kwargs) -> ScriptedExecutor:
        return ScriptedExecutor(pages, default=default, **kwargs)
    return _factory


@pytest.fixture
def sample_report(offset_endpoint, cursor_endpoint) -> BenchmarkReport:
    """Finished two-endpoint report where the cursor endpoint wins on every metric."""
    results = [
        EndpointResult(
            endpoint=offset_endpoint,
            samples=SampleSet(endpoint_key="a", latencies_ms=(10.0, 20.0, 30.0, 40.0)),
            stats=StatSummary(min=10.0, max=40.0, mean=25.0, p50=20.0, p95=40.0),
            size_bytes=2000,
            traversal=TraversalResult(total_items=TOTAL_ITEMS, page_count=4, elapsed_seconds=2.0),
        ),
        EndpointResult(
            endpoint=cursor_endpoint,
            samples=SampleSet(endpoint_key="b", latencies_ms=(5.0, 10.0, 15.0, 20.0)),
            stats=StatSummary(min=5.0, max=20.0, mean=12.5, p50=10.0, p95=20.0),
            size_bytes=1000,
            traversal=TraversalResult(total_items=TOTAL_ITEMS, page_count=4, elapsed_seconds=1.0),
        ),
    ]
    return BenchmarkReport(
        base_url=TEST_BASE_URL,
        page_size=PAGE_SIZE,
        warmup_requests=2,
        benchmark_requests=4,
        results=results,
        comparisons=compare_all(results),
    )
