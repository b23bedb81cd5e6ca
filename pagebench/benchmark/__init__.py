"""Benchmark package initialization."""
from .models import (
    BenchmarkConfig,
    BenchmarkReport,
    Comparison,
    EndpointResult,
    EndpointSpec,
    HttpResponse,
    PageOutcome,
    PaginationState,
    PaginationStyle,
    SampleSet,
    StatSummary,
    TraversalResult,
)
from .constants import BenchmarkConstants
from .exceptions import (
    BenchmarkExecutionError,
    ConfigurationError,
    DependencyMissingError,
    EmptySampleSetError,
    HttpStatusError,
    LivenessError,
    PaginationError,
    QueryEvaluationError,
    RequestError,
)
from .field_extractor import DocumentQuery, FieldExtractor, load_query_engine
from .pagination import CursorPaginationCursor, OffsetPaginationCursor, PaginationCursor, create_cursor
from .request_session_manager import RequestSessionManager
from .request_executor import RequestExecutor
from .endpoint_benchmark import EndpointBenchmark
from .latency_analyzer import LatencyAnalyzer
from .comparison import compare, compare_all, improvement_percent
from .concurrency_manager import ConcurrencyManager
from .config_resolver import ConfigResolver
from .report_renderer import ReportRenderer
from .result_exporter import ResultExporter
from .visualization_generator import VisualizationGenerator
from .runner import BenchmarkRunner

__all__ = [
    'BenchmarkConfig',
    'BenchmarkReport',
    'Comparison',
    'EndpointResult',
    'EndpointSpec',
    'HttpResponse',
    'PageOutcome',
    'PaginationState',
    'PaginationStyle',
    'SampleSet',
    'StatSummary',
    'TraversalResult',
    'BenchmarkConstants',
    'BenchmarkExecutionError',
    'ConfigurationError',
    'DependencyMissingError',
    'EmptySampleSetError',
    'HttpStatusError',
    'LivenessError',
    'PaginationError',
    'QueryEvaluationError',
    'RequestError',
    'DocumentQuery',
    'FieldExtractor',
    'load_query_engine',
    'CursorPaginationCursor',
    'OffsetPaginationCursor',
    'PaginationCursor',
    'create_cursor',
    'RequestSessionManager',
    'RequestExecutor',
    'EndpointBenchmark',
    'LatencyAnalyzer',
    'compare',
    'compare_all',
    'improvement_percent',
    'ConcurrencyManager',
    'ConfigResolver',
    'ReportRenderer',
    'ResultExporter',
    'VisualizationGenerator',
    'BenchmarkRunner',
]
