"""
Cost Aggregator - Summary view of a single usage file.
"""

from collections import defaultdict
from collections.abc import Iterable, Mapping
from typing import Any, Optional

import structlog

from costlens.config.settings import (
    NAME_MAX_LENGTH,
    NULL_LITERALS,
    OTHER_SERVICE,
    TOP_RESOURCE_GROUPS,
    UNASSIGNED_GROUP,
    UNKNOWN_DATE,
    UNNAMED_RESOURCE,
)
from costlens.errors import AggregationFault
from costlens.ingest.base import UsageRecord
from costlens.see.models import (
    NO_PEAK,
    NO_RESOURCE,
    NO_SERVICE,
    CostSummary,
    DailyCost,
    ResourceCost,
    ServiceCost,
)

logger = structlog.get_logger(__name__)


def _truncate(name: str) -> str:
    return name[:NAME_MAX_LENGTH]


def _resource_name(resource_id: Optional[str]) -> str:
    """Last path segment of a resource id, e.g. the VM name."""
    name = resource_id.split("/")[-1] if resource_id else ""
    return _truncate(name or UNNAMED_RESOURCE)


def _sum_by(records: list[UsageRecord], key) -> dict[str, float]:
    """Sum cost per key, keeping first-seen key order."""
    totals = defaultdict(float)
    for record in records:
        totals[key(record)] += record.cost
    return totals


def _load_records(records: Iterable[Any]) -> list[UsageRecord]:
    if records is None or isinstance(records, (str, bytes, Mapping)):
        raise AggregationFault(
            f"expected a sequence of rows, got {type(records).__name__}"
        )
    try:
        rows = iter(records)
    except TypeError:
        raise AggregationFault(
            f"expected a sequence of rows, got {type(records).__name__}"
        )
    return [UsageRecord.from_row(row) for row in rows]


def aggregate(records: Iterable[Any]) -> CostSummary:
    """
    Aggregate decoded usage rows into a CostSummary.

    Rows are mappings keyed by the export's column names (or UsageRecord
    instances). Missing or non-numeric costs count as zero and missing
    labels fall back to placeholder names, so bad field values never
    raise. AggregationFault is reserved for calls that are not a sequence
    of rows at all.
    """
    usage = _load_records(records)

    total_cost = sum((r.cost for r in usage), 0.0)

    # Daily costs, ascending by raw date label
    daily_totals = _sum_by(usage, lambda r: r.date or UNKNOWN_DATE)
    daily_costs = tuple(
        DailyCost(date=date, cost=cost)
        for date, cost in sorted(daily_totals.items(), key=lambda item: item[0])
    )

    daily_average = total_cost / len(daily_costs) if daily_costs else 0.0

    # max() keeps the first maximum, i.e. the earliest date on ties
    peak_usage = max(daily_costs, key=lambda d: d.cost) if daily_costs else NO_PEAK

    # Service families
    service_totals = _sum_by(usage, lambda r: r.service_family or OTHER_SERVICE)
    service_breakdown = tuple(
        ServiceCost(name=name, value=value)
        for name, value in sorted(
            service_totals.items(), key=lambda item: item[1], reverse=True
        )
        if name not in NULL_LITERALS and value > 0
    )
    top_service = service_breakdown[0] if service_breakdown else NO_SERVICE

    # Resources are grouped by full id, named by their last segment
    resource_totals = _sum_by(usage, lambda r: r.resource_id or "")
    resources = [
        ResourceCost(name=_resource_name(resource_id), cost=cost)
        for resource_id, cost in resource_totals.items()
        if cost > 0
    ]
    resources.sort(key=lambda r: r.cost, reverse=True)
    resource_costs = resources[0] if resources else NO_RESOURCE

    # Resource groups
    group_totals = _sum_by(usage, lambda r: r.resource_group_name or UNASSIGNED_GROUP)
    groups = [
        ResourceCost(name=_truncate(name), cost=cost)
        for name, cost in group_totals.items()
        if _truncate(name) not in NULL_LITERALS and cost > 0
    ]
    groups.sort(key=lambda g: g.cost, reverse=True)
    resource_group_costs = tuple(groups[:TOP_RESOURCE_GROUPS])

    logger.debug(
        "aggregation_completed",
        records=len(usage),
        days=len(daily_costs),
        services=len(service_breakdown),
        total_cost=total_cost,
    )

    return CostSummary(
        total_cost=total_cost,
        daily_average=daily_average,
        daily_costs=daily_costs,
        peak_usage=peak_usage,
        service_breakdown=service_breakdown,
        resource_costs=resource_costs,
        resource_group_costs=resource_group_costs,
        top_service=top_service,
    )
