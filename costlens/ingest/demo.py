"""
Demo usage data shaped like an Azure cost export.
"""

from datetime import date, timedelta
from pathlib import Path
from typing import Any, Optional, Union

import pandas as pd

from costlens.config.settings import (
    COST_FIELD,
    DATE_FIELD,
    EXPECTED_COLUMNS,
    RESOURCE_FIELD,
    RESOURCE_GROUP_FIELD,
    SERVICE_FIELD,
)

DEMO_SUBSCRIPTION = "/subscriptions/00000000-0000-0000-0000-000000000000"

# (resource group, provider path, resource name, service family, daily cost)
DEMO_RESOURCES = [
    ("rg-ml-training", "Microsoft.Compute/virtualMachines", "gpu-trainer-a100-01", "Compute", 88.08),
    ("rg-ml-training", "Microsoft.Compute/virtualMachines", "gpu-trainer-t4-02", "Compute", 18.05),
    ("rg-web-prod", "Microsoft.Web/sites", "contoso-storefront", "Web", 6.40),
    ("rg-web-prod", "Microsoft.Sql/servers", "contoso-sql/databases/orders", "Databases", 12.75),
    ("rg-data-lake", "Microsoft.Storage/storageAccounts", "contosodatalake", "Storage", 4.32),
    ("rg-networking", "Microsoft.Network/publicIPAddresses", "pip-gateway", "Networking", 0.12),
]


def _resource_id(group: str, provider: str, name: str) -> str:
    return f"{DEMO_SUBSCRIPTION}/resourceGroups/{group}/providers/{provider}/{name}"


def demo_rows(days: int = 30, start: Optional[date] = None) -> list[dict[str, Any]]:
    """
    Generate deterministic demo rows.

    Costs grow slightly through the week so the daily trend has a clear
    peak. Each day also carries a row without a service family and one
    whose service family was stringified to "null" upstream.
    """
    if start is None:
        start = date(2025, 1, 1)

    rows = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        label = day.isoformat()
        weekday_factor = 1.0 + 0.05 * day.weekday()

        for group, provider, name, service, daily_cost in DEMO_RESOURCES:
            rows.append({
                DATE_FIELD: label,
                COST_FIELD: round(daily_cost * weekday_factor, 4),
                SERVICE_FIELD: service,
                RESOURCE_FIELD: _resource_id(group, provider, name),
                RESOURCE_GROUP_FIELD: group,
            })

        rows.append({
            DATE_FIELD: label,
            COST_FIELD: 0.35,
            SERVICE_FIELD: None,
            RESOURCE_FIELD: None,
            RESOURCE_GROUP_FIELD: None,
        })
        rows.append({
            DATE_FIELD: label,
            COST_FIELD: 0.05,
            SERVICE_FIELD: "null",
            RESOURCE_FIELD: None,
            RESOURCE_GROUP_FIELD: "null",
        })

    return rows


def write_demo_csv(
    path: Union[str, Path],
    days: int = 30,
    start: Optional[date] = None,
) -> Path:
    """Write demo rows to a CSV file and return its path."""
    path = Path(path)
    df = pd.DataFrame(demo_rows(days, start), columns=list(EXPECTED_COLUMNS))
    df.to_csv(path, index=False)
    return path
