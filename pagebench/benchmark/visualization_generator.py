"""Generates visualizations from benchmark results."""
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns

from pagebench.const import DISTRIBUTION_GRAPH_NAME, PERCENTILE_GRAPH_NAME

from .models import StatSummary
from .result_exporter import ResultExporter


# Configure logging
logger = logging.getLogger(__name__)


class VisualizationGenerator:
    """Generates visualizations from benchmark results."""

    METRICS = ["min", "p50", "mean", "p95", "max"]

    def plot_percentiles(self, summaries: Dict[str, StatSummary], output_path: Union[Path, str],
                         names: Optional[Dict[str, str]] = None) -> None:
        """
        Generate and save a grouped bar chart of latency statistics per endpoint.

        Args:
            summaries: StatSummary keyed by endpoint key.
            output_path: Path to save plot.
            names: Optional display names keyed by endpoint key.
        """
        if not summaries:
            logger.warning("No summaries available. Skipping percentile plot.")
            return

        names = names or {}
        keys = list(summaries)
        x = np.arange(len(self.METRICS))
        width = 0.8 / len(keys)

        fig, ax = plt.subplots(figsize=(12, 6))
        for i, key in enumerate(keys):
            values = [getattr(summaries[key], metric) for metric in self.METRICS]
            offset = (i - (len(keys) - 1) / 2) * width
            bars = ax.bar(x + offset, values, width, label=names.get(key, key.upper()))
            # Add values on top of bars
            for bar, val in zip(bars, values):
                ax.text(bar.get_x() + bar.get_width() / 2, bar.get_height(), f'{val:.1f}',
                        ha='center', va='bottom', fontsize=8)

        ax.set_title("Single Request Latency")
        ax.set_xticks(x)
        ax.set_xticklabels([metric.upper() for metric in self.METRICS])
        ax.set_ylabel("Latency (ms)")
        ax.legend()
        ax.grid(True, axis='y', alpha=0.3)

        plt.tight_layout()
        plt.savefig(output_path)
        plt.close(fig)
        logger.info(f"Graph saved: {output_path}")

    def plot_sample_distribution(self, samples: Dict[str, List[float]], output_path: Union[Path, str],
                                 names: Optional[Dict[str, str]] = None) -> None:
        """
        Generate and save a box plot of every latency sample per endpoint.
        """
        names = names or {}
        rows = [
            {'endpoint': names.get(key, key.upper()), 'latency_ms': latency}
            for key, latencies in samples.items()
            for latency in latencies
        ]
        if not rows:
            logger.warning("No latency samples available. Skipping distribution plot.")
            return

        df = pd.DataFrame(rows)
        fig, ax = plt.subplots(figsize=(10, 6))
        sns.boxplot(data=df, x='endpoint', y='latency_ms', ax=ax)
        sns.stripplot(data=df, x='endpoint', y='latency_ms', ax=ax, color='black', size=3, alpha=0.5)
        ax.set_title("Latency Distribution")
        ax.set_xlabel("Endpoint")
        ax.set_ylabel("Latency (ms)")
        ax.grid(True, axis='y', alpha=0.3)

        plt.tight_layout()
        plt.savefig(output_path, dpi=150)
        plt.close(fig)
        logger.info(f"Distribution graph saved: {output_path}")

    @staticmethod
    def _names_from_report(report: Dict[str, Any]) -> Dict[str, str]:
        return {str(endpoint['key']): endpoint['name'] for endpoint in report.get('endpoints', [])}

    def generate_visualizations(self, export_dir: Union[Path, str],
                                names: Optional[Dict[str, str]] = None) -> List[Path]:
        """
        Generate all graphs from the files of an export directory.

        Display names come from the exported JSON report unless given.

        Returns:
            Paths of the graphs written.
        """
        export_dir = Path(export_dir)
        results = ResultExporter.load_results_from_directory(export_dir)
        if names is None:
            names = self._names_from_report(results.get('report', {}))
        written = []

        if 'summary' in results:
            graph_path = export_dir / PERCENTILE_GRAPH_NAME
            self.plot_percentiles(results['summary'], graph_path, names)
            written.append(graph_path)
        else:
            logger.warning(f"No latency summary in {export_dir}, skipping percentile graph")

        if 'samples' in results:
            graph_path = export_dir / DISTRIBUTION_GRAPH_NAME
            self.plot_sample_distribution(results['samples'], graph_path, names)
            written.append(graph_path)
        else:
            logger.warning(f"No latency samples in {export_dir}, skipping distribution graph")

        return written
