"""
Shared fixtures for CostLens tests.
"""

import pytest
from structlog.testing import capture_logs


SAMPLE_CSV = (
    "date,costInBillingCurrency,serviceFamily,resourceId,resourceGroupName\n"
    "2024-01-01,10,Compute,/subscriptions/s1/resourceGroups/rg1/providers/Microsoft.Compute/virtualMachines/vm-one,rg1\n"
    "2024-01-01,5,Storage,/subscriptions/s1/resourceGroups/rg1/providers/Microsoft.Storage/storageAccounts/store1,rg1\n"
    "2024-01-02,20,Compute,/subscriptions/s1/resourceGroups/rg2/providers/Microsoft.Compute/virtualMachines/vm-two,rg2\n"
)


@pytest.fixture(autouse=True)
def captured_logs():
    """Keep log lines out of captured CLI output and expose them to tests."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture
def example_rows():
    return [
        {
            "date": "2024-01-01",
            "costInBillingCurrency": 10,
            "serviceFamily": "Compute",
            "resourceGroupName": "rg1",
        },
        {
            "date": "2024-01-01",
            "costInBillingCurrency": 5,
            "serviceFamily": "Storage",
            "resourceGroupName": "rg1",
        },
        {
            "date": "2024-01-02",
            "costInBillingCurrency": 20,
            "serviceFamily": "Compute",
            "resourceGroupName": "rg2",
        },
    ]


@pytest.fixture
def sample_csv_bytes():
    return SAMPLE_CSV.encode("utf-8")


@pytest.fixture
def sample_csv(tmp_path):
    path = tmp_path / "usage.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path
