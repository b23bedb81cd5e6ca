"""Data models for the benchmarking system."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from pagebench.const import DEFAULT_INITIAL_CURSOR, DEFAULT_QUERY_ENGINE


class PaginationStyle(str, Enum):
    """How an endpoint addresses its pages."""
    OFFSET = "offset"
    CURSOR = "cursor"


@dataclass(frozen=True)
class EndpointSpec:
    """One endpoint under comparison, resolved from configuration."""
    key: str
    path: str
    display_name: str
    style: PaginationStyle
    param_name: str
    count_expr: str
    has_next_expr: Optional[str] = None
    cursor_expr: Optional[str] = None
    initial_cursor: str = DEFAULT_INITIAL_CURSOR


@dataclass(frozen=True)
class PaginationState:
    """Position of the next page to request (page index or cursor token)."""
    style: PaginationStyle
    position: Union[int, str]


@dataclass(frozen=True)
class PageOutcome:
    """What a fetched page says about the pagination walk."""
    item_count: int
    next_state: Optional[PaginationState]
    counted: bool = True

    @property
    def is_last(self) -> bool:
        return self.next_state is None


@dataclass(frozen=True)
class HttpResponse:
    """Result of one timed GET."""
    url: str
    status_code: int
    body: bytes
    elapsed_ms: float


@dataclass(frozen=True)
class SampleSet:
    """Latency samples (milliseconds) of one endpoint's warm run."""
    endpoint_key: str
    latencies_ms: Tuple[float, ...]

    def __len__(self) -> int:
        return len(self.latencies_ms)


@dataclass(frozen=True)
class TraversalResult:
    """Totals of one full pagination walk."""
    total_items: int
    page_count: int
    elapsed_seconds: float


@dataclass(frozen=True)
class StatSummary:
    """Container for latency statistics in milliseconds."""
    min: float
    max: float
    mean: float
    p50: float
    p95: float


@dataclass
class EndpointResult:
    """Everything measured for one endpoint."""
    endpoint: EndpointSpec
    samples: SampleSet
    stats: StatSummary
    size_bytes: int
    traversal: TraversalResult


@dataclass(frozen=True)
class Comparison:
    """Improvement of a candidate endpoint over the baseline, in percent."""
    baseline_key: str
    candidate_key: str
    latency_improvement: Optional[float]
    size_improvement: Optional[float]
    traversal_improvement: Optional[float]


@dataclass
class BenchmarkConfig:
    """Configuration for the benchmark."""
    base_url: str
    endpoints: List[EndpointSpec]
    page_size: int = 100
    warmup_requests: int = 5
    benchmark_requests: int = 20
    request_timeout: Optional[float] = 300.0
    max_retries: int = 0
    strict_status: bool = True
    parallel_endpoints: int = 1
    query_engine: str = DEFAULT_QUERY_ENGINE

    def endpoint(self, key: str) -> EndpointSpec:
        for endpoint in self.endpoints:
            if endpoint.key == key:
                return endpoint
        raise KeyError(key)


@dataclass
class BenchmarkReport:
    """Collected metrics of a whole benchmark run."""
    base_url: str
    page_size: int
    warmup_requests: int
    benchmark_requests: int
    results: List[EndpointResult] = field(default_factory=list)
    comparisons: List[Comparison] = field(default_factory=list)

    def result(self, key: str) -> EndpointResult:
        for result in self.results:
            if result.endpoint.key == key:
                return result
        raise KeyError(key)
