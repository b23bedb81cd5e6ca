"""Rich formatting of the benchmark report for the terminal.

Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes).
"""
import json
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

from .models import BenchmarkReport, Comparison, EndpointResult


def get_console() -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    return Console(stderr=False)


def format_improvement(value: Optional[float]) -> str:
    """Signed percentage with one decimal, 'n/a' when undefined."""
    if value is None:
        return "n/a"
    return f"{value:+.1f}%"


def _improvement_style(value: Optional[float]) -> str:
    if value is None:
        return "dim"
    return "green" if value >= 0 else "red"


class ReportRenderer:
    """Renders a BenchmarkReport as tables or as a JSON document."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_console()

    def _comparison_for(self, report: BenchmarkReport, key: str) -> Optional[Comparison]:
        for comparison in report.comparisons:
            if comparison.candidate_key == key:
                return comparison
        return None

    def _new_table(self, report: BenchmarkReport) -> Table:
        table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
        table.add_column("Metric", width=14)
        for result in report.results:
            table.add_column(escape(result.endpoint.display_name), justify="right")
        for comparison in report.comparisons:
            table.add_column(f"{comparison.candidate_key.upper()} vs {comparison.baseline_key.upper()}", justify="right")
        return table

    def _improvement_cells(self, report: BenchmarkReport, attribute: str) -> List[str]:
        cells = []
        for comparison in report.comparisons:
            value = getattr(comparison, attribute)
            style = _improvement_style(value)
            cells.append(f"[{style}]{format_improvement(value)}[/{style}]")
        return cells

    def render(self, report: BenchmarkReport) -> None:
        """Print the full report."""
        console = self.console
        console.print(Rule("[bold blue]PERFORMANCE BENCHMARK REPORT[/bold blue]"))
        console.print(
            f"[bold]Configuration:[/bold] Page Size: {report.page_size} items | "
            f"Requests: {report.benchmark_requests} | Warmup: {report.warmup_requests}"
        )
        for result in report.results:
            console.print(
                f"  {result.endpoint.key.upper()}: {escape(result.endpoint.display_name)} "
                f"[dim]({result.endpoint.style.value}, {escape(result.endpoint.path)})[/dim]"
            )
        console.print()

        blank = [""] * len(report.comparisons)

        console.print("[bold cyan]SINGLE REQUEST LATENCY (ms)[/bold cyan]")
        latency = self._new_table(report)
        latency.add_row("Average", *[f"{r.stats.mean:.2f}" for r in report.results],
                        *self._improvement_cells(report, "latency_improvement"))
        latency.add_row("P50 (Median)", *[f"{r.stats.p50:.2f}" for r in report.results], *blank)
        latency.add_row("P95", *[f"{r.stats.p95:.2f}" for r in report.results], *blank)
        latency.add_row("Min", *[f"{r.stats.min:.2f}" for r in report.results], *blank)
        latency.add_row("Max", *[f"{r.stats.max:.2f}" for r in report.results], *blank)
        console.print(latency)
        console.print()

        console.print("[bold cyan]RESPONSE SIZE (bytes)[/bold cyan]")
        size = self._new_table(report)
        size.add_row("Size per page", *[str(r.size_bytes) for r in report.results],
                     *self._improvement_cells(report, "size_improvement"))
        console.print(size)
        console.print()

        console.print("[bold cyan]FULL PAGINATION TRAVERSAL[/bold cyan]")
        traversal = self._new_table(report)
        traversal.add_row("Total Items", *[str(r.traversal.total_items) for r in report.results], *blank)
        traversal.add_row("Pages", *[str(r.traversal.page_count) for r in report.results], *blank)
        traversal.add_row("Total Time", *[f"{r.traversal.elapsed_seconds:.2f}s" for r in report.results],
                          *self._improvement_cells(report, "traversal_improvement"))
        console.print(traversal)
        console.print()

        console.print(Rule("[bold]SUMMARY[/bold]"))
        for comparison in report.comparisons:
            self._render_summary(report, comparison)
        console.print()

    def _render_summary(self, report: BenchmarkReport, comparison: Comparison) -> None:
        name = escape(report.result(comparison.candidate_key).endpoint.display_name)
        baseline = escape(report.result(comparison.baseline_key).endpoint.display_name)
        lines = (
            ("Latency:  ", comparison.latency_improvement, f"{name} is", "faster", "slower", f"than {baseline}"),
            ("Size:     ", comparison.size_improvement, f"{name} responses are", "smaller", "larger", f"than {baseline}"),
            ("Traversal:", comparison.traversal_improvement, "Full scan is", "faster", "slower", f"with {name}"),
        )
        for label, value, subject, better, worse, tail in lines:
            if value is None:
                self.console.print(f"  [dim]-[/dim] {label} not comparable, baseline is zero")
                continue
            mark, style, word = ("✓", "green", better) if value >= 0 else ("✗", "red", worse)
            self.console.print(f"  [{style}]{mark}[/{style}] {label} {subject} [{style}]{abs(value):.1f}%[/{style}] {word} {tail}")

    @staticmethod
    def to_dict(report: BenchmarkReport) -> Dict[str, Any]:
        """Machine-readable view of the report."""
        return {
            "configuration": {
                "base_url": report.base_url,
                "page_size": report.page_size,
                "warmup_requests": report.warmup_requests,
                "benchmark_requests": report.benchmark_requests,
            },
            "endpoints": [ReportRenderer._result_dict(result) for result in report.results],
            "comparisons": [
                {
                    "baseline": comparison.baseline_key,
                    "candidate": comparison.candidate_key,
                    "latency_improvement_pct": comparison.latency_improvement,
                    "size_improvement_pct": comparison.size_improvement,
                    "traversal_improvement_pct": comparison.traversal_improvement,
                }
                for comparison in report.comparisons
            ],
        }

    @staticmethod
    def _result_dict(result: EndpointResult) -> Dict[str, Any]:
        return {
            "key": result.endpoint.key,
            "name": result.endpoint.display_name,
            "path": result.endpoint.path,
            "pagination": result.endpoint.style.value,
            "latency_ms": {
                "min": result.stats.min,
                "max": result.stats.max,
                "mean": result.stats.mean,
                "p50": result.stats.p50,
                "p95": result.stats.p95,
                "samples": list(result.samples.latencies_ms),
            },
            "size_bytes": result.size_bytes,
            "traversal": {
                "total_items": result.traversal.total_items,
                "pages": result.traversal.page_count,
                "elapsed_seconds": result.traversal.elapsed_seconds,
            },
        }

    def render_json(self, report: BenchmarkReport) -> None:
        """Print the report as JSON, without markup or highlighting."""
        self.console.print_json(json.dumps(self.to_dict(report)), highlight=False)
