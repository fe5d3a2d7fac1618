"""
CostLens - Azure Cost Analysis Dashboard

Summarize an exported Azure usage-cost file: spend, trend, top services,
resources and resource groups.
"""

__version__ = "0.1.0"

from costlens.see import CostSummary, aggregate
from costlens.ingest import UsageRecord, read_usage_csv
from costlens.dashboard import DashboardState, load_csv, render
from costlens.optimize import generate_recommendations
from costlens.errors import AggregationFault, CostLensError, DecodeFailure

__all__ = [
    "aggregate",
    "CostSummary",
    "UsageRecord",
    "read_usage_csv",
    "DashboardState",
    "load_csv",
    "render",
    "generate_recommendations",
    "AggregationFault",
    "CostLensError",
    "DecodeFailure",
]
