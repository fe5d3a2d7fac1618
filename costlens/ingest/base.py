"""
Usage record model and field coercion for decoded cost rows.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from numbers import Integral, Real
from typing import Any, Optional

from costlens.config.settings import (
    COST_FIELD,
    DATE_FIELD,
    RESOURCE_FIELD,
    RESOURCE_GROUP_FIELD,
    SERVICE_FIELD,
)
from costlens.errors import AggregationFault


def is_missing(value: Any) -> bool:
    """None and float NaN (pandas' empty cell) both mean absent."""
    if value is None:
        return True
    if isinstance(value, Real) and not isinstance(value, Integral):
        try:
            return math.isnan(float(value))
        except (OverflowError, ValueError):
            return False
    return False


def coerce_cost(value: Any) -> float:
    """Finite numeric cost, or 0.0 for anything missing, non-numeric or non-finite."""
    if isinstance(value, bool) or is_missing(value):
        return 0.0
    if isinstance(value, (Real, Decimal)):
        try:
            cost = float(value)
        except (OverflowError, ValueError):
            # ints beyond float range, signaling NaN
            return 0.0
        return cost if math.isfinite(cost) else 0.0
    return 0.0


def coerce_label(value: Any) -> Optional[str]:
    """Grouping label as a string, None when absent."""
    if is_missing(value):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        # 20240101.0 from type inference should group as "20240101"
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class UsageRecord:
    """One row of an Azure usage-cost export."""
    date: Optional[str] = None
    cost: float = 0.0
    service_family: Optional[str] = None
    resource_id: Optional[str] = None
    resource_group_name: Optional[str] = None

    @classmethod
    def from_row(cls, row: Any) -> "UsageRecord":
        """Build a record from a decoded row mapping without modifying it."""
        if isinstance(row, UsageRecord):
            return row
        if not isinstance(row, Mapping):
            raise AggregationFault(
                f"expected a row mapping, got {type(row).__name__}",
                details={"row_type": type(row).__name__},
            )

        return cls(
            date=coerce_label(row.get(DATE_FIELD)),
            cost=coerce_cost(row.get(COST_FIELD)),
            service_family=coerce_label(row.get(SERVICE_FIELD)),
            resource_id=coerce_label(row.get(RESOURCE_FIELD)),
            resource_group_name=coerce_label(row.get(RESOURCE_GROUP_FIELD)),
        )

    def to_row(self) -> dict[str, Any]:
        """Row mapping using the export's column names."""
        return {
            DATE_FIELD: self.date,
            COST_FIELD: self.cost,
            SERVICE_FIELD: self.service_family,
            RESOURCE_FIELD: self.resource_id,
            RESOURCE_GROUP_FIELD: self.resource_group_name,
        }
