"""Unit tests for report rendering."""

import io
import json
from dataclasses import replace

from rich.console import Console

from pagebench.benchmark.report_renderer import ReportRenderer, format_improvement
from tests.test_const import CURSOR_NAME, OFFSET_NAME, TOTAL_ITEMS


def make_renderer():
    buffer = io.StringIO()
    console = Console(file=buffer, width=160, force_terminal=False, color_system=None)
    return ReportRenderer(console), buffer


class TestFormatImprovement:
    """Test improvement formatting."""

    def test_positive(self):
        assert format_improvement(50.0) == "+50.0%"

    def test_negative(self):
        assert format_improvement(-12.345) == "-12.3%"

    def test_undefined(self):
        assert format_improvement(None) == "n/a"


class TestRender:
    """Test the terminal report."""

    def test_sections_and_values(self, sample_report):
        """Test every section and the measured values are printed."""
        renderer, buffer = make_renderer()

        renderer.render(sample_report)
        output = buffer.getvalue()

        assert "PERFORMANCE BENCHMARK REPORT" in output
        assert "Page Size: 100 items" in output
        assert "SINGLE REQUEST LATENCY (ms)" in output
        assert "RESPONSE SIZE (bytes)" in output
        assert "FULL PAGINATION TRAVERSAL" in output
        assert OFFSET_NAME in output and CURSOR_NAME in output
        assert "25.00" in output and "12.50" in output
        assert "B vs A" in output
        assert "+50.0%" in output
        assert str(TOTAL_ITEMS) in output
        assert "2.00s" in output

    def test_summary_lines(self, sample_report):
        """Test the summary states which endpoint won."""
        renderer, buffer = make_renderer()

        renderer.render(sample_report)
        output = buffer.getvalue()

        assert f"{CURSOR_NAME} is 50.0% faster than {OFFSET_NAME}" in output
        assert f"{CURSOR_NAME} responses are 50.0% smaller than {OFFSET_NAME}" in output
        assert f"Full scan is 50.0% faster with {CURSOR_NAME}" in output

    def test_regression_and_undefined(self, sample_report):
        """Test slower candidates and undefined improvements are reported as such."""
        comparison = replace(sample_report.comparisons[0], latency_improvement=-20.0, size_improvement=None)
        report = replace(sample_report, comparisons=[comparison])
        renderer, buffer = make_renderer()

        renderer.render(report)
        output = buffer.getvalue()

        assert "20.0% slower" in output
        assert "n/a" in output
        assert "not comparable" in output


class TestRenderJson:
    """Test the machine-readable report."""

    def test_to_dict(self, sample_report):
        data = ReportRenderer.to_dict(sample_report)

        assert data["configuration"]["page_size"] == 100
        assert [e["key"] for e in data["endpoints"]] == ["a", "b"]
        assert data["endpoints"][0]["pagination"] == "offset"
        assert data["endpoints"][1]["latency_ms"]["samples"] == [5.0, 10.0, 15.0, 20.0]
        assert data["endpoints"][1]["traversal"]["pages"] == 4
        assert data["comparisons"][0]["latency_improvement_pct"] == 50.0

    def test_render_json_is_parseable(self, sample_report):
        renderer, buffer = make_renderer()

        renderer.render_json(sample_report)

        data = json.loads(buffer.getvalue())
        assert data["endpoints"][0]["size_bytes"] == 2000
        assert data["comparisons"][0]["candidate"] == "b"
