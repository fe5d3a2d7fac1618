"""
Data models for cost aggregation.
"""

from dataclasses import dataclass

from costlens.config.settings import NOT_AVAILABLE, TOP_SERVICES_CHART


@dataclass(frozen=True)
class DailyCost:
    """Summed cost for one date label."""
    date: str
    cost: float

    def to_dict(self) -> dict:
        return {"date": self.date, "cost": self.cost}


@dataclass(frozen=True)
class ServiceCost:
    """Summed cost for one service family."""
    name: str
    value: float

    def to_dict(self) -> dict:
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class ResourceCost:
    """Summed cost for one resource or resource group."""
    name: str
    cost: float

    def to_dict(self) -> dict:
        return {"name": self.name, "cost": self.cost}


NO_PEAK = DailyCost(date=NOT_AVAILABLE, cost=0.0)
NO_SERVICE = ServiceCost(name=NOT_AVAILABLE, value=0.0)
NO_RESOURCE = ResourceCost(name=NOT_AVAILABLE, cost=0.0)


@dataclass(frozen=True)
class CostSummary:
    """Complete cost summary for one usage file."""
    total_cost: float = 0.0
    daily_average: float = 0.0
    daily_costs: tuple[DailyCost, ...] = ()
    peak_usage: DailyCost = NO_PEAK
    service_breakdown: tuple[ServiceCost, ...] = ()
    resource_costs: ResourceCost = NO_RESOURCE
    resource_group_costs: tuple[ResourceCost, ...] = ()
    top_service: ServiceCost = NO_SERVICE

    @classmethod
    def empty(cls) -> "CostSummary":
        """Zero-value summary with every sentinel in place."""
        return cls()

    @property
    def has_data(self) -> bool:
        return bool(self.daily_costs)

    def top_services(self, n: int = TOP_SERVICES_CHART) -> tuple[ServiceCost, ...]:
        return self.service_breakdown[:n]

    def share_of_total(self, value: float) -> float:
        """Fraction of total spend, 0 when nothing was spent."""
        if self.total_cost:
            return value / self.total_cost
        return 0.0

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "totalCost": self.total_cost,
            "dailyAverage": self.daily_average,
            "dailyCosts": [d.to_dict() for d in self.daily_costs],
            "peakUsage": self.peak_usage.to_dict(),
            "serviceBreakdown": [s.to_dict() for s in self.service_breakdown],
            "resourceCosts": self.resource_costs.to_dict(),
            "resourceGroupCosts": [r.to_dict() for r in self.resource_group_costs],
            "topService": self.top_service.to_dict(),
        }
