"""
See Module - Cost Aggregation

Turn the rows of one usage file into a single summary view.
"""

from costlens.see.aggregator import aggregate
from costlens.see.models import CostSummary, DailyCost, ResourceCost, ServiceCost

__all__ = [
    "aggregate",
    "CostSummary",
    "DailyCost",
    "ResourceCost",
    "ServiceCost",
]
