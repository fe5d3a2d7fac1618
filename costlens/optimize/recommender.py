"""
Recommender - Turn a cost summary into optimization hints.
"""

from dataclasses import dataclass
from enum import Enum

from costlens.formatting import format_currency, format_percentage
from costlens.see.models import CostSummary


class RecommendationType(str, Enum):
    """Areas a recommendation can target."""
    RESOURCE_GROUP = "resource_group"
    SERVICE_USAGE = "service_usage"
    PEAK_USAGE = "peak_usage"


@dataclass(frozen=True)
class Recommendation:
    """A single optimization recommendation."""
    rec_type: RecommendationType
    title: str
    message: str
    actionable: bool = True

    def to_dict(self) -> dict:
        return {
            "type": self.rec_type.value,
            "title": self.title,
            "message": self.message,
            "actionable": self.actionable,
        }


def _resource_group_recommendation(summary: CostSummary) -> Recommendation:
    title = "Resource Group Optimization"
    if not summary.resource_group_costs:
        return Recommendation(
            rec_type=RecommendationType.RESOURCE_GROUP,
            title=title,
            message="No resource group data available for analysis.",
            actionable=False,
        )

    top_group = summary.resource_group_costs[0]
    return Recommendation(
        rec_type=RecommendationType.RESOURCE_GROUP,
        title=title,
        message=(
            f"{top_group.name} has the highest spend at {format_currency(top_group.cost)}. "
            "Review resource allocation and implement cost controls."
        ),
    )


def _service_recommendation(summary: CostSummary) -> Recommendation:
    title = "Service Usage Analysis"
    service = summary.top_service
    if not service.value:
        return Recommendation(
            rec_type=RecommendationType.SERVICE_USAGE,
            title=title,
            message="No service usage data available for analysis.",
            actionable=False,
        )

    share = format_percentage(service.value, summary.total_cost)
    return Recommendation(
        rec_type=RecommendationType.SERVICE_USAGE,
        title=title,
        message=(
            f"{service.name} accounts for {share} of total spend. "
            "Consider optimization strategies for this service."
        ),
    )


def _peak_recommendation(summary: CostSummary) -> Recommendation:
    title = "Peak Usage Optimization"
    peak = summary.peak_usage
    if not peak.cost:
        return Recommendation(
            rec_type=RecommendationType.PEAK_USAGE,
            title=title,
            message="No peak usage data available for analysis.",
            actionable=False,
        )

    return Recommendation(
        rec_type=RecommendationType.PEAK_USAGE,
        title=title,
        message=(
            f"Peak daily cost of {format_currency(peak.cost)} on {peak.date}. "
            "Review workload scheduling and resource scaling policies."
        ),
    )


def generate_recommendations(summary: CostSummary) -> list[Recommendation]:
    """Resource group, service and peak usage hints, in that order."""
    return [
        _resource_group_recommendation(summary),
        _service_recommendation(summary),
        _peak_recommendation(summary),
    ]
