"""Handles exporting benchmark results to various formats."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union
import pandas as pd

from pagebench.const import COMPARISON_CSV_NAME, REPORT_JSON_NAME, SAMPLES_CSV_NAME, SUMMARY_CSV_NAME

from .models import BenchmarkReport, StatSummary
from .report_renderer import ReportRenderer


# Configure logging
logger = logging.getLogger(__name__)


class ResultExporter:
    """Handles exporting benchmark results to various formats."""

    @staticmethod
    def save_summary_to_csv(report: BenchmarkReport, output_path: Union[Path, str]) -> None:
        """
        Save one row per endpoint: latency statistics, size and traversal totals.

        Args:
            report: Collected benchmark report.
            output_path: Path to save CSV.
        """
        rows = []
        for result in report.results:
            rows.append({
                'endpoint': result.endpoint.key,
                'name': result.endpoint.display_name,
                'pagination': result.endpoint.style.value,
                'min_ms': result.stats.min,
                'max_ms': result.stats.max,
                'mean_ms': result.stats.mean,
                'p50_ms': result.stats.p50,
                'p95_ms': result.stats.p95,
                'size_bytes': result.size_bytes,
                'total_items': result.traversal.total_items,
                'pages': result.traversal.page_count,
                'traversal_seconds': result.traversal.elapsed_seconds,
            })
        df = pd.DataFrame(rows).set_index('endpoint')
        df.to_csv(output_path)
        logger.info(f"Summary CSV saved: {output_path}")

    @staticmethod
    def load_summary_from_csv(input_path: Union[Path, str]) -> Dict[str, StatSummary]:
        """
        Load latency statistics from a summary CSV without running the benchmark.

        Returns:
            Dictionary of StatSummary keyed by endpoint key.
        """
        df = pd.read_csv(input_path, index_col=0)
        results = {}
        for idx, row in df.iterrows():
            results[str(idx)] = StatSummary(
                min=float(row['min_ms']),
                max=float(row['max_ms']),
                mean=float(row['mean_ms']),
                p50=float(row['p50_ms']),
                p95=float(row['p95_ms']),
            )
        logger.info(f"Summary loaded from CSV: {input_path}")
        return results

    @staticmethod
    def save_samples_to_csv(report: BenchmarkReport, output_path: Union[Path, str]) -> None:
        """Save every latency sample, one row per request, for spreadsheet work."""
        rows = []
        for result in report.results:
            for number, latency in enumerate(result.samples.latencies_ms, start=1):
                rows.append({
                    'endpoint': result.endpoint.key,
                    'name': result.endpoint.display_name,
                    'sample_number': number,
                    'latency_ms': latency,
                })
        if not rows:
            logger.warning("No latency samples available for saving")
            return
        pd.DataFrame(rows).to_csv(output_path, index=False)
        logger.info(f"Latency samples saved to CSV: {output_path}")

    @staticmethod
    def load_samples_from_csv(input_path: Union[Path, str]) -> Dict[str, List[float]]:
        """
        Load latency samples keyed by endpoint key, in sample order.
        """
        df = pd.read_csv(input_path)
        df = df.sort_values(by=['endpoint', 'sample_number'])
        samples = {
            str(key): group['latency_ms'].astype(float).tolist()
            for key, group in df.groupby('endpoint', sort=False)
        }
        logger.info(f"Latency samples loaded from CSV: {input_path}")
        return samples

    @staticmethod
    def save_comparisons_to_csv(report: BenchmarkReport, output_path: Union[Path, str]) -> None:
        """Save improvement percentages of every candidate over the baseline."""
        if not report.comparisons:
            logger.warning("No comparisons available for saving")
            return
        df = pd.DataFrame([comparison.__dict__ for comparison in report.comparisons])
        df.to_csv(output_path, index=False)
        logger.info(f"Comparison CSV saved: {output_path}")

    @staticmethod
    def save_json(report: BenchmarkReport, output_path: Union[Path, str]) -> None:
        """Save the machine-readable report."""
        Path(output_path).write_text(json.dumps(ReportRenderer.to_dict(report), indent=2))
        logger.info(f"JSON report saved: {output_path}")

    @staticmethod
    def export_all(report: BenchmarkReport, export_dir: Union[Path, str]) -> Dict[str, Path]:
        """
        Write summary, samples, comparisons and JSON report into a directory.

        Returns:
            Written file paths keyed by kind.
        """
        export_dir = Path(export_dir)
        export_dir.mkdir(parents=True, exist_ok=True)
        paths = {
            'summary': export_dir / SUMMARY_CSV_NAME,
            'samples': export_dir / SAMPLES_CSV_NAME,
            'comparison': export_dir / COMPARISON_CSV_NAME,
            'report': export_dir / REPORT_JSON_NAME,
        }
        ResultExporter.save_summary_to_csv(report, paths['summary'])
        ResultExporter.save_samples_to_csv(report, paths['samples'])
        ResultExporter.save_comparisons_to_csv(report, paths['comparison'])
        ResultExporter.save_json(report, paths['report'])
        return paths

    @staticmethod
    def load_results_from_directory(export_dir: Union[Path, str]) -> Dict[str, Any]:
        """
        Load all exported results from a directory without running the benchmark.

        Returns:
            Dictionary with 'summary', 'samples' and 'report' entries for the files found.
        """
        export_dir = Path(export_dir)
        results: Dict[str, Any] = {}

        summary_csv = export_dir / SUMMARY_CSV_NAME
        if summary_csv.exists():
            results['summary'] = ResultExporter.load_summary_from_csv(summary_csv)

        samples_csv = export_dir / SAMPLES_CSV_NAME
        if samples_csv.exists():
            results['samples'] = ResultExporter.load_samples_from_csv(samples_csv)

        report_json = export_dir / REPORT_JSON_NAME
        if report_json.exists():
            results['report'] = json.loads(report_json.read_text())
            logger.info(f"JSON report loaded from: {report_json}")

        if not results:
            logger.warning(f"No benchmark result files found in directory: {export_dir}")

        return results
