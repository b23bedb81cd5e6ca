"""Benchmark runner to orchestrate the execution of benchmarks."""
from pathlib import Path
from typing import Optional, Union
import logging

from pagebench.const import OUTPUT_FORMAT_JSON, OUTPUT_FORMAT_TABLE

from .comparison import compare_all
from .concurrency_manager import ConcurrencyManager
from .constants import BenchmarkConstants
from .endpoint_benchmark import EndpointBenchmark
from .field_extractor import FieldExtractor, load_query_engine
from .latency_analyzer import LatencyAnalyzer
from .models import BenchmarkConfig, BenchmarkReport, EndpointResult
from .report_renderer import ReportRenderer
from .request_executor import RequestExecutor
from .result_exporter import ResultExporter
from .visualization_generator import VisualizationGenerator


logger = logging.getLogger(__name__)


class BenchmarkRunner:
    """Orchestrates the benchmark phases and manages output."""

    def __init__(self, config: BenchmarkConfig, renderer: Optional[ReportRenderer] = None,
                 output_format: str = OUTPUT_FORMAT_TABLE, export_dir: Optional[Union[Path, str]] = None,
                 plots: bool = False, field_extractor: Optional[FieldExtractor] = None):
        self.config = config
        self.renderer = renderer or ReportRenderer()
        self.output_format = output_format
        self.export_dir = Path(export_dir) if export_dir else None
        self.plots = plots
        self.field_extractor = field_extractor or FieldExtractor(load_query_engine(config.query_engine))
        self.request_executor = RequestExecutor(timeout=config.request_timeout)
        self.latency_analyzer = LatencyAnalyzer()
        self.concurrency_manager = ConcurrencyManager(config.parallel_endpoints)
        self.result_exporter = ResultExporter()
        self.visualization_generator = VisualizationGenerator()

    def _step(self, number: int, message: str) -> None:
        logger.info(f"[{number}/{BenchmarkConstants.PHASE_COUNT}] {message}")

    def measure(self) -> BenchmarkReport:
        """
        Run every phase against every endpoint and collect the report.

        Raises:
            LivenessError: If the liveness check fails.
            BenchmarkExecutionError: If any phase fails; nothing is reported.
        """
        config = self.config
        endpoints = config.endpoints
        benchmark = EndpointBenchmark(config, self.request_executor, self.field_extractor)
        phases = self.concurrency_manager
        try:
            self._step(1, "Checking server availability...")
            # All endpoints live on one server, so only endpoint B is checked
            benchmark.check_liveness(endpoints[1])

            self._step(2, f"Warming up ({config.warmup_requests} requests each)...")
            phases.run_phase(endpoints, lambda ep: benchmark.run_phase(
                "warmup", ep, benchmark.warmup, config.warmup_requests))

            self._step(3, "Benchmarking request latency across pages...")
            samples = phases.run_phase(endpoints, lambda ep: benchmark.run_phase(
                "latency", ep, benchmark.sample_latency, config.benchmark_requests))

            self._step(4, "Measuring response sizes...")
            sizes = phases.run_phase(endpoints, lambda ep: benchmark.run_phase(
                "size", ep, benchmark.measure_size))

            self._step(5, "Benchmarking full pagination traversal...")
            traversals = phases.run_phase(endpoints, lambda ep: benchmark.run_phase(
                "traversal", ep, benchmark.traverse))
        finally:
            benchmark.close()

        results = [
            EndpointResult(
                endpoint=endpoint,
                samples=samples[endpoint.key],
                stats=self.latency_analyzer.summarize(samples[endpoint.key]),
                size_bytes=sizes[endpoint.key],
                traversal=traversals[endpoint.key],
            )
            for endpoint in endpoints
        ]
        return BenchmarkReport(
            base_url=config.base_url,
            page_size=config.page_size,
            warmup_requests=config.warmup_requests,
            benchmark_requests=config.benchmark_requests,
            results=results,
            comparisons=compare_all(results),
        )

    def run(self) -> BenchmarkReport:
        """Run the complete benchmarking process and emit its outputs."""
        try:
            report = self.measure()

            if self.output_format == OUTPUT_FORMAT_JSON:
                self.renderer.render_json(report)
            else:
                self.renderer.render(report)

            if self.export_dir is not None:
                self.result_exporter.export_all(report, self.export_dir)
                if self.plots:
                    names = {r.endpoint.key: r.endpoint.display_name for r in report.results}
                    self.visualization_generator.generate_visualizations(self.export_dir, names)

            logger.info("Benchmark completed successfully!")
            return report

        except Exception as e:
            logger.error(f"Benchmark failed: {e}")
            raise

