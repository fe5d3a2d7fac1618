"""
Tests for dashboard state, rendering and recommendations.
"""

import io

import pytest
from rich.console import Console

from costlens.dashboard import (
    DashboardState,
    DashboardStatus,
    load_csv,
    load_upload,
    render,
    render_json,
    summarize,
)
from costlens.formatting import format_currency, format_percentage
from costlens.optimize import RecommendationType, generate_recommendations
from costlens.see import CostSummary, aggregate


def render_text(state: DashboardState) -> str:
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None)
    render(state, console)
    return buffer.getvalue()


class TestFormatting:
    """Currency and percentage formatting."""

    def test_currency(self):
        assert format_currency(None) == "$0.00"
        assert format_currency(0) == "$0.00"
        assert format_currency(12.345) == "$12.35"
        assert format_currency(1234567.8) == "$1234567.80"

    def test_percentage(self):
        assert format_percentage(30, 35) == "85.7%"
        assert format_percentage(0, 35) == "0.0%"
        assert format_percentage(5, 0) == "0.0%"
        assert format_percentage(None, None) == "0.0%"


class TestDashboardState:
    """State transitions and the aggregation boundary."""

    def test_initial(self):
        state = DashboardState.initial()
        assert state.status == DashboardStatus.EMPTY
        assert state.summary is None
        assert state.error is None

    def test_summarize_ready(self, example_rows):
        state = summarize(example_rows, source="usage.csv")
        assert state.status == DashboardStatus.READY
        assert state.summary.total_cost == 35
        assert state.error is None
        assert state.source == "usage.csv"

    def test_summarize_fault_substitutes_empty_summary(self):
        state = summarize([{"date": "2024-01-01"}, "not a row"])
        assert state.status == DashboardStatus.ERROR
        assert state.summary == CostSummary.empty()
        assert state.error.startswith("Error processing data:")

    def test_summarize_fault_is_logged(self, captured_logs):
        summarize([42], source="bad.csv")
        events = [entry["event"] for entry in captured_logs]
        assert "aggregation_failed" in events

    def test_summarize_invalid_call(self):
        state = summarize(None)
        assert state.status == DashboardStatus.ERROR
        assert state.has_summary

    def test_load_csv(self, sample_csv):
        state = load_csv(sample_csv)
        assert state.status == DashboardStatus.READY
        assert state.summary.total_cost == 35
        assert state.summary.resource_costs.name == "vm-two"
        assert state.source == str(sample_csv)

    def test_load_csv_decode_failure(self, tmp_path):
        state = load_csv(tmp_path / "missing.csv")
        assert state.status == DashboardStatus.ERROR
        assert state.summary is None
        assert state.error.startswith("Error parsing CSV:")

    def test_load_upload(self, sample_csv_bytes):
        state = load_upload(sample_csv_bytes, filename="upload.csv")
        assert state.status == DashboardStatus.READY
        assert state.source == "upload.csv"
        assert state.summary.top_service.name == "Compute"

    def test_load_upload_failure(self):
        state = load_upload(b"")
        assert state.status == DashboardStatus.ERROR
        assert not state.has_summary

    def test_new_load_replaces_state(self, sample_csv, tmp_path):
        first = load_csv(sample_csv)
        second = load_csv(tmp_path / "missing.csv")
        assert first.summary is not None
        assert second.summary is None


class TestRecommendations:
    """Recommendation text."""

    def test_with_data(self, example_rows):
        recs = generate_recommendations(aggregate(example_rows))
        assert [r.rec_type for r in recs] == [
            RecommendationType.RESOURCE_GROUP,
            RecommendationType.SERVICE_USAGE,
            RecommendationType.PEAK_USAGE,
        ]
        assert recs[0].message == (
            "rg2 has the highest spend at $20.00. "
            "Review resource allocation and implement cost controls."
        )
        assert recs[1].message == (
            "Compute accounts for 85.7% of total spend. "
            "Consider optimization strategies for this service."
        )
        assert recs[2].message == (
            "Peak daily cost of $20.00 on 2024-01-02. "
            "Review workload scheduling and resource scaling policies."
        )
        assert all(r.actionable for r in recs)

    def test_without_data(self):
        recs = generate_recommendations(CostSummary.empty())
        assert [r.message for r in recs] == [
            "No resource group data available for analysis.",
            "No service usage data available for analysis.",
            "No peak usage data available for analysis.",
        ]
        assert not any(r.actionable for r in recs)

    def test_to_dict(self, example_rows):
        data = generate_recommendations(aggregate(example_rows))[0].to_dict()
        assert data["type"] == "resource_group"
        assert data["title"] == "Resource Group Optimization"


class TestRender:
    """Console rendering."""

    def test_empty_state(self):
        text = render_text(DashboardState.initial())
        assert "Upload your Azure usage CSV file" in text

    def test_loading_state(self):
        assert "Processing file..." in render_text(DashboardState.loading("usage.csv"))

    def test_decode_error(self):
        text = render_text(DashboardState.failed("Error parsing CSV: File is empty"))
        assert "Error parsing CSV: File is empty" in text
        assert "Monthly Spend" not in text

    def test_ready(self, example_rows):
        text = render_text(summarize(example_rows, source="usage.csv"))
        assert "Azure Cost Analysis Dashboard - usage.csv" in text
        assert "Monthly Spend: $35.00" in text
        assert "Daily Average: $17.50" in text
        assert "Daily Cost Trend" in text
        assert "Top 5 Services by Cost" in text
        assert "Resource Group Cost Distribution" in text
        assert "rg2 has the highest spend at $20.00." in text

    def test_aggregation_error_shows_zero_summary(self):
        text = render_text(summarize("bad input"))
        assert "Error processing data:" in text
        assert "Monthly Spend: $0.00" in text
        assert "No peak usage data available for analysis." in text

    def test_render_json(self, example_rows):
        data = render_json(summarize(example_rows))
        assert data["status"] == "ready"
        assert data["error"] is None
        assert data["summary"]["totalCost"] == 35
        assert len(data["recommendations"]) == 3

    def test_render_json_without_summary(self):
        data = render_json(DashboardState.failed("Error parsing CSV: boom"))
        assert data["summary"] is None
        assert data["recommendations"] == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
